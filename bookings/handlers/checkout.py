"""Signed checkout links handed out for accepted bookings."""

from urllib.parse import urlencode

from django.core import signing

from bookings.config import BookingConfig
from bookings.domain import BookingId
from bookings.domain.errors import InvalidTokenError

_SALT = "bookings.checkout"


def checkout_token(booking_id: BookingId) -> str:
    return signing.TimestampSigner(salt=_SALT).sign(str(booking_id))


def checkout_url(booking_id: BookingId, config: BookingConfig) -> str:
    query = urlencode({"booking": str(booking_id), "token": checkout_token(booking_id)})
    return f"{config.checkout_url}?{query}"


def verify_checkout_token(booking_id: str, token: str, config: BookingConfig) -> None:
    """Check that ``token`` was issued for ``booking_id`` and has not expired.

    Raises:
        InvalidTokenError: If the token is forged, expired or for another booking.
    """
    try:
        value = signing.TimestampSigner(salt=_SALT).unsign(token, max_age=config.token_max_age)
    except signing.BadSignature as exc:
        raise InvalidTokenError() from exc
    if value != booking_id:
        raise InvalidTokenError()
