"""
Contract tests for HttpTransport — simulator and requests adapter.

The requests adapter runs against the `responses` library, so no
network is needed for either.
"""

import json

import pytest
import requests
import responses

from istanbulfestivali.adapters.ports import TransportError
from istanbulfestivali.adapters.requests_transport import RequestsTransport
from istanbulfestivali.adapters.simulator_transport import SimulatorTransport
from tests.contracts.http_transport_contract import URL, HttpTransportContract

# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------


class TestSimulatorTransportContract(HttpTransportContract):

    def create_transport(self):
        self.transport = SimulatorTransport()
        return self.transport

    def serve(self, status_code, body):
        self.transport.queue_text(body, status_code=status_code)

    def serve_failure(self):
        self.transport.queue_error("Connection refused")

    def test_records_requests(self):
        transport = SimulatorTransport()
        transport.queue_json({"ok": True})
        transport.request("POST", URL, headers={"A": "b"}, json={"x": 1}, timeout=3)
        assert len(transport.requests) == 1
        sent = transport.requests[0]
        assert (sent.method, sent.url, sent.headers, sent.json, sent.timeout) == (
            "POST", URL, {"A": "b"}, {"x": 1}, 3,
        )
        assert transport.pending == 0

    def test_unexpected_request_fails_loudly(self):
        transport = SimulatorTransport()
        with pytest.raises(AssertionError):
            transport.request("GET", URL)


# ---------------------------------------------------------------------------
# requests adapter
# ---------------------------------------------------------------------------


class TestRequestsTransportContract(HttpTransportContract):

    @pytest.fixture(autouse=True)
    def _mock_http(self):
        with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
            self.rsps = rsps
            yield

    def create_transport(self):
        return RequestsTransport()

    def serve(self, status_code, body):
        self.rsps.add(responses.POST, URL, body=body, status=status_code)

    def serve_failure(self):
        self.rsps.add(responses.POST, URL, body=requests.ConnectionError("Connection refused"))

    def test_sends_json_body_and_headers(self):
        self.rsps.add(responses.POST, URL, json={"ok": True}, status=201)
        resp = RequestsTransport().request(
            "POST",
            URL,
            headers={"X-Auth-Token": "tok"},
            json={"tickets": [], "customer": {}},
            timeout=5,
        )
        assert resp.status_code == 201
        sent = self.rsps.calls[0].request
        assert sent.headers["X-Auth-Token"] == "tok"
        assert json.loads(sent.body) == {"tickets": [], "customer": {}}

    def test_timeout_becomes_transport_error(self):
        self.rsps.add(responses.POST, URL, body=requests.Timeout("read timed out"))
        with pytest.raises(TransportError) as excinfo:
            RequestsTransport().request("POST", URL, timeout=1)
        assert "read timed out" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, requests.Timeout)

    def test_uses_given_session(self):
        session = requests.Session()
        assert RequestsTransport(session).session is session
