"""
Istanbul Festivali API client.

Composes the token provider with the reservation and health endpoints.
Payload and credential checks happen before any network call; failures
are raised to the caller, except in health_check() which is advisory.
"""

import logging
from collections.abc import Mapping
from urllib.parse import quote_plus

from istanbulfestivali.adapters.memory_cache import InMemoryCache
from istanbulfestivali.adapters.ports import HttpTransport, TransportError
from istanbulfestivali.adapters.requests_transport import RequestsTransport
from istanbulfestivali.domain.cache import Cache
from istanbulfestivali.domain.credentials import Credentials
from istanbulfestivali.domain.errors import ApiError, NetworkError
from istanbulfestivali.domain.reservation import validate_reservation_payload
from istanbulfestivali.token_provider import LOGIN_TIMEOUT, TokenProvider

log = logging.getLogger(__name__)

RESERVATIONS_PATH = "/api/iticket-reservations/"
HEALTH_PATH = "/api/health"
HEALTH_TIMEOUT = 5
DEFAULT_TIMEOUT = 20
LOG_BODY_LIMIT = 2000


def _truncate_for_log(text: str, limit: int = LOG_BODY_LIMIT) -> str:
    return text[:limit] + "…(truncated)" if len(text) > limit else text


class IstanbulFestivaliClient:
    """
    Client for the Istanbul Festivali reservation API.

    transport, cache and logger are pluggable; by default requests, an
    in-memory cache and this module's logger are used.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        transport: HttpTransport | None = None,
        cache: Cache | None = None,
        logger: logging.Logger | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: Mapping[str, str] | None = None,
    ):
        credentials = Credentials(username=username, password=password)

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._default_headers = dict(default_headers or {})
        self._transport = transport or RequestsTransport()
        self._log = logger or log

        self._tokens = TokenProvider(
            transport=self._transport,
            base_url=self._base_url,
            credentials=credentials,
            cache=cache if cache is not None else InMemoryCache(),
            logger=self._log,
            timeout=LOGIN_TIMEOUT,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def create_reservation(self, reservation_id: str | int, payload: Mapping) -> dict:
        """POST the payload to /api/iticket-reservations/{id} and return the decoded reply."""
        validate_reservation_payload(payload)

        token = self._tokens.get_token()
        url = self._base_url + RESERVATIONS_PATH + quote_plus(str(reservation_id))

        self._log.info("Creating reservation %s (url=%s)", reservation_id, url)

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-Auth-Token": token,
        }
        headers.update(self._default_headers)

        try:
            resp = self._transport.request(
                "POST",
                url,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
        except (TransportError, OSError) as exc:
            self._log.error("Network error during reservation creation: %s (url=%s)", exc, url)
            raise NetworkError(f"Network error during reservation creation: {exc}") from exc

        self._log.debug(
            "Reservation creation response: HTTP %d %s",
            resp.status_code,
            _truncate_for_log(resp.text),
        )

        body = resp.json_object()
        if 200 <= resp.status_code < 300 and body is not None:
            return body

        raise ApiError(
            f"Reservation creation failed (HTTP {resp.status_code})",
            status_code=resp.status_code,
            response_body=body if body is not None else {"raw": resp.text},
        )

    def flush_auth_cache(self) -> None:
        """Drop the cached token so the next call logs in again."""
        self._tokens.clear()
        self._log.info("Authentication cache cleared")

    def health_check(self) -> bool:
        try:
            resp = self._transport.request(
                "GET",
                self._base_url + HEALTH_PATH,
                headers=self._default_headers,
                timeout=HEALTH_TIMEOUT,
            )
        except (TransportError, OSError) as exc:
            self._log.warning("Health check failed: %s", exc)
            return False
        return resp.status_code < 400
