from bookings.domain.decisions import Accepted, Decision, FullyBooked, PartiallyUnavailable
from bookings.domain.models import Booking, Event, TimeSlot, Venue
from bookings.domain.value_objects import (
    BookingId,
    Capacity,
    EventId,
    Money,
    Quantity,
    TimeSlotId,
    VenueId,
)

__all__ = [
    "Accepted",
    "Booking",
    "BookingId",
    "Capacity",
    "Decision",
    "Event",
    "EventId",
    "FullyBooked",
    "Money",
    "PartiallyUnavailable",
    "Quantity",
    "TimeSlot",
    "TimeSlotId",
    "Venue",
    "VenueId",
]
