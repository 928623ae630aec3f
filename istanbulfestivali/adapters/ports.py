import json as jsonlib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class TransportError(Exception):
    """Connection failure, timeout, or anything else that kept a response from arriving."""


@dataclass
class HttpResponse:
    """What the transport hands back: status plus raw body text."""

    status_code: int
    text: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def json_object(self) -> dict | None:
        """Decoded body if it is a JSON object, None for anything else."""
        try:
            body = jsonlib.loads(self.text)
        except ValueError:
            return None
        return body if isinstance(body, dict) else None


@dataclass
class HttpRequest:
    """A request as seen by the transport. Recorded by the simulator."""

    method: str
    url: str
    headers: dict[str, str]
    json: Any = None
    timeout: float | None = None


class HttpTransport(ABC):
    """
    Port: how we talk HTTP.

    The token provider and the client depend ONLY on this interface.
    Non-2xx statuses are returned as responses, never raised; only
    failures to get a response at all raise TransportError. Adapters should
    convert their library's errors; socket-level OSErrors that slip through
    are treated the same way by callers.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Send one request and return the response, whatever its status."""
        ...
