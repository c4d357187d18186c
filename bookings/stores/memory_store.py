"""In-process implementation of the BookingStore.

Used by tests and local tooling. Admission on each time slot is serialized
with its own lock, so unrelated slots never wait on each other.
"""

import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from bookings.domain import (
    Booking,
    BookingId,
    Event,
    EventId,
    Money,
    Quantity,
    TimeSlot,
    TimeSlotId,
    Venue,
    VenueId,
)
from bookings.domain.errors import CapacityExceededError
from bookings.stores.interfaces import BookingStore


class InMemoryBookingStore(BookingStore):
    """Dictionary-backed booking store."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._venues: dict[VenueId, Venue] = {}
        self._time_slots: dict[TimeSlotId, TimeSlot] = {}
        self._bookings: dict[BookingId, Booking] = {}
        self._slot_locks: dict[TimeSlotId, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def add_event(self, event: Event) -> None:
        self._events[event.id] = event

    def add_venue(self, venue: Venue) -> None:
        self._venues[venue.id] = venue

    def add_time_slot(self, time_slot: TimeSlot) -> None:
        self._time_slots[time_slot.id] = time_slot

    def add_booking(self, booking: Booking) -> None:
        """Insert a booking without any capacity check."""
        self._bookings[booking.id] = booking

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        return self._venues.get(venue_id)

    def get_time_slot(self, time_slot_id: TimeSlotId) -> TimeSlot | None:
        return self._time_slots.get(time_slot_id)

    def get_time_slots_for_event(self, event_id: EventId) -> list[TimeSlot]:
        slots = [slot for slot in self._time_slots.values() if slot.event_id == event_id]
        return sorted(slots, key=lambda slot: slot.starts_at)

    def list_booking_quantities(self, time_slot_id: TimeSlotId) -> list[int]:
        return [
            booking.quantity.value
            for booking in list(self._bookings.values())
            if booking.time_slot_id == time_slot_id
        ]

    def _lock_for(self, time_slot_id: TimeSlotId) -> threading.Lock:
        with self._registry_lock:
            return self._slot_locks.setdefault(time_slot_id, threading.Lock())

    @contextmanager
    def locked_time_slot(self, time_slot_id: TimeSlotId) -> Iterator[TimeSlot | None]:
        with self._lock_for(time_slot_id):
            yield self._time_slots.get(time_slot_id)

    def create_booking(
        self,
        event_id: EventId,
        time_slot_id: TimeSlotId,
        quantity: Quantity,
        price: Money,
        created_at: datetime,
    ) -> BookingId:
        slot = self._time_slots[time_slot_id]
        booked = sum(self.list_booking_quantities(time_slot_id))
        if booked + quantity.value > slot.capacity.value:
            raise CapacityExceededError(str(time_slot_id))
        booking = Booking(
            id=BookingId(value=uuid.uuid4()),
            event_id=event_id,
            time_slot_id=time_slot_id,
            quantity=quantity,
            unit_price=price,
            created_at=created_at,
        )
        self._bookings[booking.id] = booking
        return booking.id

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self._bookings.get(booking_id)
