import os

from .client import DEFAULT_TIMEOUT, IstanbulFestivaliClient


def create_client(**overrides) -> IstanbulFestivaliClient:
    """
    Factory: build a client from ISTANBULFESTIVALI_* environment variables.

    Required: ISTANBULFESTIVALI_BASE_URL, ISTANBULFESTIVALI_USERNAME,
    ISTANBULFESTIVALI_PASSWORD. Optional: ISTANBULFESTIVALI_TIMEOUT.
    Keyword overrides (transport, cache, logger, default_headers, ...) are
    passed straight to the client.
    """
    return IstanbulFestivaliClient(
        base_url=os.environ["ISTANBULFESTIVALI_BASE_URL"],
        username=os.environ["ISTANBULFESTIVALI_USERNAME"],
        password=os.environ["ISTANBULFESTIVALI_PASSWORD"],
        timeout=float(os.environ.get("ISTANBULFESTIVALI_TIMEOUT", DEFAULT_TIMEOUT)),
        **overrides,
    )
