"""
Bearer-token acquisition and caching.

Two states only: no token cached, or a token cached until its TTL runs
out (or clear() is called). A cache miss triggers one login call; there
is no locking, so concurrent callers may each log in and the last write
wins.
"""

import logging
import math
import time
from collections.abc import Callable
from datetime import timezone
from typing import Any

import dateutil.parser

from istanbulfestivali.adapters.ports import HttpTransport, TransportError
from istanbulfestivali.domain.cache import Cache
from istanbulfestivali.domain.credentials import Credentials
from istanbulfestivali.domain.errors import AuthError, InvalidCredentialsError, NetworkError

log = logging.getLogger(__name__)

CACHE_KEY = "istanbulfestivali.auth.token"
TOKEN_REFRESH_MARGIN = 30  # seconds shaved off the real expiry
DEFAULT_TTL = 3600
ABSOLUTE_TIMESTAMP_THRESHOLD = 1_000_000_000  # below: seconds from now, above: unix time
LOGIN_PATH = "/api/auth/login"
LOGIN_TIMEOUT = 15

# Known login response shapes, probed in order; first usable value wins.
TOKEN_PATHS = (("token",), ("data", "token"), ("access_token",))
EXPIRY_PATHS = (("expireTime",), ("data", "expireTime"), ("expires_in",))


def _probe(body: dict, path: tuple[str, ...]) -> Any:
    node: Any = body
    for part in path:
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node


def extract_token(body: dict) -> str | None:
    """Return the first non-empty string found along TOKEN_PATHS."""
    for path in TOKEN_PATHS:
        value = _probe(body, path)
        if isinstance(value, str) and value:
            return value
    return None


def extract_expiry(body: dict) -> Any:
    """Return the first expiry signal present along EXPIRY_PATHS, or None."""
    for path in EXPIRY_PATHS:
        value = _probe(body, path)
        if value is not None:
            return value
    return None


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _parse_datetime(value: Any) -> float | None:
    if not isinstance(value, str):
        return None
    try:
        parsed = dateutil.parser.parse(value)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


class TokenProvider:
    """
    Hands out a valid X-Auth-Token, logging in only when the cache is empty.

    The expiry the API reports is normalised into a cache TTL that ends
    TOKEN_REFRESH_MARGIN seconds early, so a cached token is never one the
    backend has already invalidated.
    """

    def __init__(
        self,
        transport: HttpTransport,
        base_url: str,
        credentials: Credentials,
        cache: Cache,
        logger: logging.Logger | None = None,
        timeout: float = LOGIN_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ):
        self._transport = transport
        self._login_url = base_url.rstrip("/") + LOGIN_PATH
        self._credentials = credentials
        self._cache = cache
        self._log = logger or log
        self._timeout = timeout
        self._clock = clock

    def get_token(self) -> str:
        cached = self._cache.get(CACHE_KEY)
        if isinstance(cached, str) and cached:
            self._log.debug("Using cached authentication token")
            return cached

        self._log.info("Fetching new authentication token")
        return self._fetch_new_token()

    def clear(self) -> None:
        self._cache.delete(CACHE_KEY)
        self._log.info("Authentication token cache cleared")

    def _fetch_new_token(self) -> str:
        try:
            resp = self._transport.request(
                "POST",
                self._login_url,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                json=self._credentials.as_login_body(),
                timeout=self._timeout,
            )
        except (TransportError, OSError) as exc:
            self._log.error(
                "Network error during authentication: %s (url=%s)", exc, self._login_url
            )
            raise NetworkError(f"Authentication request failed: {exc}") from exc

        self._log.debug("Authentication response: HTTP %d", resp.status_code)

        if resp.status_code == 401:
            raise InvalidCredentialsError("Invalid username or password")

        body = resp.json_object()
        if resp.status_code >= 300 or body is None:
            raise AuthError(
                f"Authentication failed: unexpected response (HTTP {resp.status_code})"
            )

        token = extract_token(body)
        if token is None:
            raise AuthError("Authentication failed: token not found in response")

        expire = extract_expiry(body)
        ttl = self.calculate_token_ttl(expire)
        self._cache.set(CACHE_KEY, token, ttl)

        self._log.info("Authentication token stored in cache (ttl=%ds, expires_at=%r)", ttl, expire)
        return token

    def calculate_token_ttl(self, expire: Any) -> int:
        """
        Turn whatever expiry the API sent into a cache TTL in seconds.

        Accepts seconds-from-now, an absolute unix timestamp, or a date
        string. Missing, unparsable or already-past values give DEFAULT_TTL.
        """
        if not expire:
            return DEFAULT_TTL

        now = self._clock()
        number = _as_number(expire)
        if number is not None:
            if number < ABSOLUTE_TIMESTAMP_THRESHOLD:
                expires_at = now + number
            else:
                expires_at = number
        else:
            expires_at = _parse_datetime(expire)

        if expires_at is not None and expires_at > now:
            return max(1, int(expires_at - now - TOKEN_REFRESH_MARGIN))

        return DEFAULT_TTL
