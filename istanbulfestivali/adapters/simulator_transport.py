import json as jsonlib
from collections import deque
from collections.abc import Mapping
from typing import Any

from .ports import HttpRequest, HttpResponse, HttpTransport, TransportError


class SimulatorTransport(HttpTransport):
    """
    In-memory fake for testing. No mocking framework needed.

    Responses are served in the order they were queued, regardless of URL.

    Test helpers:
        queue_json()   : queue a response whose body is JSON-encoded data
        queue_text()   : queue a response with a raw body
        queue_error()  : queue a TransportError to be raised
        requests       : list of HttpRequest recorded by request()
        pending        : number of queued responses not yet consumed
    """

    def __init__(self):
        self._queue: deque[HttpResponse | TransportError] = deque()
        self.requests: list[HttpRequest] = []

    def queue_json(self, data: Any, status_code: int = 200) -> None:
        self._queue.append(HttpResponse(status_code=status_code, text=jsonlib.dumps(data)))

    def queue_text(self, text: str, status_code: int = 200) -> None:
        self._queue.append(HttpResponse(status_code=status_code, text=text))

    def queue_error(self, message: str = "Connection refused") -> None:
        self._queue.append(TransportError(message))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        self.requests.append(HttpRequest(
            method=method,
            url=url,
            headers=dict(headers or {}),
            json=json,
            timeout=timeout,
        ))
        if not self._queue:
            raise AssertionError(f"SimulatorTransport: unexpected {method} {url}")

        item = self._queue.popleft()
        if isinstance(item, TransportError):
            raise item
        return item
