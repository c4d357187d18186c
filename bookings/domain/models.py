"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from bookings.domain.value_objects import (
    BookingId,
    Capacity,
    EventId,
    Money,
    Quantity,
    TimeSlotId,
    VenueId,
)


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    name: str
    street: str = ""
    number: str = ""
    postal_code: str = ""
    city: str = ""
    region: str = ""
    country: str = ""

    @property
    def street_and_number(self) -> str:
        return " ".join(part for part in (self.street, self.number) if part)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    base_price: Money
    price_hint: str
    venue_id: VenueId | None
    created_at: datetime


@dataclass(frozen=True)
class TimeSlot:
    """Domain representation of a bookable date or date-time of an Event."""

    id: TimeSlotId
    event_id: EventId
    title: str
    starts_at: datetime
    ends_at: datetime | None
    date_only: bool
    capacity: Capacity
    override_price: Money | None = None

    def unit_price(self, base_price: Money) -> Money:
        """Price charged per place: the override when set and non-zero."""
        if self.override_price is not None and not self.override_price.is_zero:
            return self.override_price
        return base_price


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking. Never modified after creation."""

    id: BookingId
    event_id: EventId
    time_slot_id: TimeSlotId
    quantity: Quantity
    unit_price: Money
    created_at: datetime

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value
