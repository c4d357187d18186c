"""Availability oracle: free slots are derived from booking records."""

import logging

from bookings.domain import TimeSlot, TimeSlotId
from bookings.domain.errors import InvalidReferenceError
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Reports how many places of a time slot are still unreserved."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def free_slots(self, time_slot_id: str) -> int:
        """Return the free slots of a time slot.

        Raises:
            InvalidReferenceError: If the id is malformed or unknown.
        """
        try:
            slot_id = TimeSlotId.from_string(time_slot_id)
        except ValueError as exc:
            raise InvalidReferenceError("malformed time slot id") from exc

        slot = self._store.get_time_slot(slot_id)
        if slot is None:
            raise InvalidReferenceError("unknown time slot")
        return self.free_slots_for(slot)

    def free_slots_for(self, slot: TimeSlot) -> int:
        """Capacity minus booked quantities, clamped at zero."""
        booked = sum(self._store.list_booking_quantities(slot.id))
        free = slot.capacity.value - booked
        if free < 0:
            logger.error(
                "Time slot %s is overbooked: capacity=%d booked=%d",
                slot.id,
                slot.capacity.value,
                booked,
            )
            return 0
        return free
