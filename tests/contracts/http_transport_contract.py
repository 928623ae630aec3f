"""
Adapter contract for HttpTransport.

Any implementation (requests, simulator, ...) must pass these tests.
Subclasses decide how a canned response or a connection failure is
arranged for the next request to URL.
"""

from abc import ABC, abstractmethod

import pytest

from istanbulfestivali.adapters.ports import HttpTransport, TransportError

URL = "https://api.istanbulfestivali.com/api/echo"


class HttpTransportContract(ABC):

    @abstractmethod
    def create_transport(self) -> HttpTransport:
        ...

    @abstractmethod
    def serve(self, status_code: int, body: str) -> None:
        """Arrange for the next POST to URL to answer with status_code and body."""
        ...

    @abstractmethod
    def serve_failure(self) -> None:
        """Arrange for the next POST to URL to fail before any response arrives."""
        ...

    def _post(self, transport):
        return transport.request(
            "POST",
            URL,
            headers={"Accept": "application/json"},
            json={"hello": "world"},
            timeout=5,
        )

    def test_success_returns_status_and_body(self):
        transport = self.create_transport()
        self.serve(200, '{"ok": true}')
        resp = self._post(transport)
        assert resp.status_code == 200
        assert resp.json_object() == {"ok": True}

    def test_error_status_is_returned_not_raised(self):
        transport = self.create_transport()
        self.serve(500, '{"error": "boom"}')
        resp = self._post(transport)
        assert resp.status_code == 500
        assert resp.json_object() == {"error": "boom"}

    def test_non_json_body_has_no_json_object(self):
        transport = self.create_transport()
        self.serve(200, "<html>Bad Gateway</html>")
        resp = self._post(transport)
        assert resp.text == "<html>Bad Gateway</html>"
        assert resp.json_object() is None

    def test_json_array_is_not_an_object(self):
        transport = self.create_transport()
        self.serve(200, "[1, 2, 3]")
        assert self._post(transport).json_object() is None

    def test_connection_failure_raises_transport_error(self):
        transport = self.create_transport()
        self.serve_failure()
        with pytest.raises(TransportError):
            self._post(transport)
