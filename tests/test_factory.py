"""
create_client() reads its configuration from ISTANBULFESTIVALI_* variables.
"""

import pytest

from istanbulfestivali.adapters.simulator_transport import SimulatorTransport
from istanbulfestivali.factory import create_client


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("ISTANBULFESTIVALI_BASE_URL", "https://api.istanbulfestivali.com/")
    monkeypatch.setenv("ISTANBULFESTIVALI_USERNAME", "user@istanbulfestivali.com")
    monkeypatch.setenv("ISTANBULFESTIVALI_PASSWORD", "secret")
    monkeypatch.delenv("ISTANBULFESTIVALI_TIMEOUT", raising=False)
    return monkeypatch


def test_builds_client_from_env(env):
    client = create_client(transport=SimulatorTransport())
    assert client.base_url == "https://api.istanbulfestivali.com"
    assert client._timeout == 20


def test_timeout_from_env(env):
    env.setenv("ISTANBULFESTIVALI_TIMEOUT", "45")
    transport = SimulatorTransport()
    client = create_client(transport=transport)
    transport.queue_json({"token": "tok"})
    transport.queue_json({"success": True})

    client.create_reservation(1, {"tickets": [], "customer": {"name": "x"}})

    assert transport.requests[1].timeout == 45


def test_missing_variable_raises_key_error(env):
    env.delenv("ISTANBULFESTIVALI_PASSWORD")
    with pytest.raises(KeyError, match="ISTANBULFESTIVALI_PASSWORD"):
        create_client()
