"""
Shape checks for a reservation payload.

Only the structure this client relies on is enforced; everything else is
left to the backend.
"""

from collections.abc import Mapping

from .errors import ApiError


def validate_reservation_payload(payload: Mapping) -> None:
    """Raise ApiError unless payload has a "tickets" list and a "customer" mapping."""
    if not payload:
        raise ApiError("Reservation payload cannot be empty")

    if not isinstance(payload, Mapping):
        raise ApiError('Reservation payload must contain a "tickets" array')

    if not isinstance(payload.get("tickets"), list):
        raise ApiError('Reservation payload must contain a "tickets" array')

    if not isinstance(payload.get("customer"), Mapping):
        raise ApiError('Reservation payload must contain a "customer" array')
