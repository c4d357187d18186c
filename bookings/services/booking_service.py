"""Booking admission service.

Decides whether a direct booking request is accepted and records it.
The check of free slots and the write of the booking happen inside one
per-slot serialized region provided by the store.
"""

import logging
from datetime import datetime

from bookings.domain import (
    Accepted,
    Booking,
    BookingId,
    Decision,
    EventId,
    FullyBooked,
    PartiallyUnavailable,
    Quantity,
    TimeSlotId,
)
from bookings.domain.errors import (
    BookingNotFoundError,
    CapacityExceededError,
    InvalidQuantityError,
    InvalidReferenceError,
)
from bookings.services.availability_service import AvailabilityService
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for direct booking admission."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store
        self._availability = AvailabilityService(store)

    def request_booking(
        self,
        event_id: str,
        time_slot_id: str,
        quantity: object,
        submitted_at: datetime,
    ) -> Decision:
        """Admit or reject a booking request.

        Input is validated before the store is touched. A rejection never
        writes anything.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer.
            InvalidReferenceError: If the ids are malformed, unknown or the
                time slot does not belong to the event.
            StorageFailureError: If the booking could not be written.
            CapacityExceededError: If the store refused a write past capacity.
        """
        try:
            amount = Quantity.parse(quantity)
        except ValueError as exc:
            raise InvalidQuantityError() from exc
        try:
            event_key = EventId.from_string(event_id)
            slot_key = TimeSlotId.from_string(time_slot_id)
        except ValueError as exc:
            raise InvalidReferenceError("malformed id") from exc

        event = self._store.get_event(event_key)
        if event is None:
            raise InvalidReferenceError("unknown event")

        with self._store.locked_time_slot(slot_key) as slot:
            if slot is None:
                raise InvalidReferenceError("unknown time slot")
            if slot.event_id != event.id:
                raise InvalidReferenceError("time slot belongs to another event")

            free = self._availability.free_slots_for(slot)

            if free >= amount.value:
                price = slot.unit_price(event.base_price)
                try:
                    booking_id = self._store.create_booking(
                        event.id, slot.id, amount, price, submitted_at
                    )
                except CapacityExceededError:
                    logger.error(
                        "Capacity guard rejected booking of %d on time slot %s",
                        amount.value,
                        slot.id,
                    )
                    raise
                accepted = Accepted(booking_id=booking_id, unit_price=price, quantity=amount.value)
            elif free > 0:
                logger.info(
                    "Booking rejected on time slot %s: requested %d, free %d",
                    slot.id,
                    amount.value,
                    free,
                )
                return PartiallyUnavailable(free_slots=free, requested=amount.value)
            else:
                logger.info("Booking rejected on time slot %s: booked out", slot.id)
                return FullyBooked()

        # Only reached once the locked region has committed.
        logger.info(
            "Booking %s accepted: %d x %s on time slot %s",
            accepted.booking_id,
            accepted.quantity,
            accepted.unit_price,
            slot_key,
        )
        return accepted

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            BookingNotFoundError: If the id is malformed or unknown.
        """
        try:
            key = BookingId.from_string(booking_id)
        except ValueError as exc:
            raise BookingNotFoundError(booking_id) from exc
        booking = self._store.get_booking(key)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking
