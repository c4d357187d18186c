"""Django ORM implementation of the BookingStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from django.db import DatabaseError, transaction
from django.db.models import Sum

from bookings import models
from bookings.domain import (
    Booking,
    BookingId,
    Capacity,
    Event,
    EventId,
    Money,
    Quantity,
    TimeSlot,
    TimeSlotId,
    Venue,
    VenueId,
)
from bookings.domain.errors import CapacityExceededError, StorageFailureError
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class DjangoBookingStore(BookingStore):
    """PostgreSQL-backed booking store using Django ORM.

    Admission is serialized with a row lock on the time slot
    (SELECT ... FOR UPDATE) held for the duration of the transaction.
    """

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        row = models.Venue.objects.filter(pk=venue_id.value).first()
        return _to_venue(row) if row else None

    def get_time_slot(self, time_slot_id: TimeSlotId) -> TimeSlot | None:
        row = models.TimeSlot.objects.filter(pk=time_slot_id.value).first()
        return _to_time_slot(row) if row else None

    def get_time_slots_for_event(self, event_id: EventId) -> list[TimeSlot]:
        rows = models.TimeSlot.objects.filter(event_id=event_id.value).order_by("starts_at")
        return [_to_time_slot(row) for row in rows]

    def list_booking_quantities(self, time_slot_id: TimeSlotId) -> list[int]:
        return list(
            models.Booking.objects.filter(time_slot_id=time_slot_id.value).values_list(
                "quantity", flat=True
            )
        )

    @contextmanager
    def locked_time_slot(self, time_slot_id: TimeSlotId) -> Iterator[TimeSlot | None]:
        # Lock, read, write and commit all fail as StorageFailureError.
        try:
            with transaction.atomic():
                row = (
                    models.TimeSlot.objects.select_for_update()
                    .filter(pk=time_slot_id.value)
                    .first()
                )
                yield _to_time_slot(row) if row else None
        except DatabaseError as exc:
            logger.exception("Admission transaction failed for time slot %s", time_slot_id)
            raise StorageFailureError() from exc

    def create_booking(
        self,
        event_id: EventId,
        time_slot_id: TimeSlotId,
        quantity: Quantity,
        price: Money,
        created_at: datetime,
    ) -> BookingId:
        try:
            with transaction.atomic():
                capacity = (
                    models.TimeSlot.objects.filter(pk=time_slot_id.value)
                    .values_list("capacity", flat=True)
                    .get()
                )
                booked = (
                    models.Booking.objects.filter(time_slot_id=time_slot_id.value)
                    .aggregate(total=Sum("quantity"))["total"]
                    or 0
                )
                if booked + quantity.value > capacity:
                    raise CapacityExceededError(str(time_slot_id))
                row = models.Booking.objects.create(
                    event_id=event_id.value,
                    time_slot_id=time_slot_id.value,
                    quantity=quantity.value,
                    price=price.amount,
                    booked_at=created_at,
                )
        except (DatabaseError, models.TimeSlot.DoesNotExist) as exc:
            logger.exception("Failed to write booking for time slot %s", time_slot_id)
            raise StorageFailureError() from exc
        return BookingId(value=row.id)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        if row is None:
            return None
        return Booking(
            id=BookingId(value=row.id),
            event_id=EventId(value=row.event_id),
            time_slot_id=TimeSlotId(value=row.time_slot_id),
            quantity=Quantity(value=row.quantity),
            unit_price=Money(amount=row.price),
            created_at=row.booked_at,
        )


def _to_venue(row: models.Venue) -> Venue:
    return Venue(
        id=VenueId(value=row.id),
        name=row.name,
        street=row.street,
        number=row.number,
        postal_code=row.postal_code,
        city=row.city,
        region=row.region,
        country=row.country,
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        name=row.name,
        description=row.description,
        base_price=Money(amount=row.price),
        price_hint=row.price_hint,
        venue_id=VenueId(value=row.venue_id) if row.venue_id else None,
        created_at=row.created_at,
    )


def _to_time_slot(row: models.TimeSlot) -> TimeSlot:
    return TimeSlot(
        id=TimeSlotId(value=row.id),
        event_id=EventId(value=row.event_id),
        title=row.title,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        date_only=row.date_only,
        capacity=Capacity(value=row.capacity),
        override_price=Money(amount=row.price) if row.price is not None else None,
    )
