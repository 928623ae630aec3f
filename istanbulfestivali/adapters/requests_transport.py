from collections.abc import Mapping
from typing import Any

import requests

from .ports import HttpResponse, HttpTransport, TransportError


class RequestsTransport(HttpTransport):
    """Adapter: real HTTP via a requests.Session."""

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        try:
            resp = self.session.request(
                method,
                url,
                headers=dict(headers or {}),
                json=json,
                timeout=timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        return HttpResponse(
            status_code=resp.status_code,
            text=resp.text,
            headers=dict(resp.headers),
        )
