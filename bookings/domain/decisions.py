"""Outcomes of a booking admission request."""

from dataclasses import dataclass

from bookings.domain.value_objects import BookingId, Money


@dataclass(frozen=True)
class Accepted:
    """The booking was persisted; the caller continues to checkout."""

    booking_id: BookingId
    unit_price: Money
    quantity: int


@dataclass(frozen=True)
class PartiallyUnavailable:
    """Some capacity remains, but less than requested."""

    free_slots: int
    requested: int


@dataclass(frozen=True)
class FullyBooked:
    """No capacity remains on the time slot."""


Decision = Accepted | PartiallyUnavailable | FullyBooked
