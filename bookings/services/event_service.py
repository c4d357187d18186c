"""Event catalog service - read side of the booking box.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from dataclasses import dataclass

from bookings.domain import Event, EventId, Money, TimeSlot, Venue
from bookings.domain.errors import EventNotFoundError
from bookings.services.availability_service import AvailabilityService
from bookings.stores.interfaces import BookingStore


@dataclass(frozen=True)
class SlotOffer:
    """A time slot as offered to the customer."""

    slot: TimeSlot
    price: Money
    free_slots: int


@dataclass(frozen=True)
class BookingBox:
    """Everything needed to show the direct booking box of an event."""

    event: Event
    venue: Venue | None
    offers: tuple[SlotOffer, ...]


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store
        self._availability = AvailabilityService(store)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the id is malformed or the event does not exist.
        """
        try:
            key = EventId.from_string(event_id)
        except ValueError as exc:
            raise EventNotFoundError(event_id) from exc
        event = self._store.get_event(key)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_booking_box(self, event_id: str) -> BookingBox:
        """Return the event with its venue and priced, counted time slots.

        Raises:
            EventNotFoundError: If the id is malformed or the event does not exist.
        """
        event = self.get_event(event_id)
        venue = self._store.get_venue(event.venue_id) if event.venue_id else None
        offers = tuple(
            SlotOffer(
                slot=slot,
                price=slot.unit_price(event.base_price),
                free_slots=self._availability.free_slots_for(slot),
            )
            for slot in self._store.get_time_slots_for_event(event.id)
        )
        return BookingBox(event=event, venue=venue, offers=offers)
