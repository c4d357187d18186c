"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
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


class BookingStore(ABC):
    """Interface for event, time slot and booking persistence."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...

    @abstractmethod
    def get_time_slot(self, time_slot_id: TimeSlotId) -> TimeSlot | None:
        """Return a time slot by ID, or None if not found."""
        ...

    @abstractmethod
    def get_time_slots_for_event(self, event_id: EventId) -> list[TimeSlot]:
        """Return all time slots of an event, ordered by starts_at ascending."""
        ...

    @abstractmethod
    def list_booking_quantities(self, time_slot_id: TimeSlotId) -> list[int]:
        """Return the quantity of every booking held against a time slot."""
        ...

    @abstractmethod
    def locked_time_slot(
        self, time_slot_id: TimeSlotId
    ) -> AbstractContextManager[TimeSlot | None]:
        """Serialize admission for one time slot.

        Yields the time slot (or None if it does not exist). Concurrent
        callers for the same slot wait until the holder leaves the block;
        other slots are not affected. Bookings created inside the block
        are committed when it exits without error.

        Raises:
            StorageFailureError: If locking or committing the block fails.
        """
        ...

    @abstractmethod
    def create_booking(
        self,
        event_id: EventId,
        time_slot_id: TimeSlotId,
        quantity: Quantity,
        price: Money,
        created_at: datetime,
    ) -> BookingId:
        """Persist a booking and return its ID.

        Raises:
            CapacityExceededError: If the booking would exceed the slot capacity.
            StorageFailureError: If the write is rejected.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...
