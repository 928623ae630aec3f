"""Client for the Istanbul Festivali reservation API."""

from .client import IstanbulFestivaliClient
from .domain.errors import (
    ApiError,
    AuthError,
    InvalidCredentialsError,
    IstanbulFestivaliError,
    NetworkError,
)

__all__ = [
    "ApiError",
    "AuthError",
    "InvalidCredentialsError",
    "IstanbulFestivaliClient",
    "IstanbulFestivaliError",
    "NetworkError",
]
