"""
Credentials value object — validated once, before any network activity.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from .errors import InvalidCredentialsError


@dataclass(frozen=True)
class Credentials:
    username: str  # login email
    password: str

    def __post_init__(self):
        if not self.username.strip():
            raise InvalidCredentialsError("Username cannot be empty")
        if not self.password.strip():
            raise InvalidCredentialsError("Password cannot be empty")
        try:
            validate_email(self.username, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidCredentialsError("Username must be a valid email address") from exc

    def as_login_body(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"
