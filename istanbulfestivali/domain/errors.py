"""
Error taxonomy for the Istanbul Festivali client.

Nothing here is retried automatically. Callers decide:
  InvalidCredentialsError  fix the credentials, retrying won't help
  AuthError                login reached the API but the answer was unusable
  NetworkError             transport failure, safe to retry
  ApiError                 the reservation endpoint rejected the request
"""

import json


class IstanbulFestivaliError(Exception):
    """Base class for every error raised by this package."""


class InvalidCredentialsError(IstanbulFestivaliError):

    def __init__(self, message: str = "Invalid credentials provided"):
        super().__init__(message)


class AuthError(IstanbulFestivaliError):

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class NetworkError(IstanbulFestivaliError):

    def __init__(self, message: str = "Network error occurred"):
        super().__init__(message)


class ApiError(IstanbulFestivaliError):
    """
    The API answered with a non-2xx status or an undecodable body.

    status_code is 0 when the request was rejected locally, before any
    network call (e.g. a malformed reservation payload).
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        text = super().__str__()
        if self.response_body:
            text += "\nResponse Body: " + json.dumps(
                self.response_body, indent=4, ensure_ascii=False
            )
        return text
