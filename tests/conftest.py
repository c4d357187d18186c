"""Pytest configuration and shared fixtures."""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

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
)
from bookings.stores.memory_store import InMemoryBookingStore

NOW = datetime(2026, 5, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def make_event(memory_store):
    """Add an event to the in-memory store."""

    def _make(price: str = "20.00", **overrides) -> Event:
        event = Event(
            id=EventId(value=uuid.uuid4()),
            name="Wine tasting",
            description="Six wines from the Palatinate",
            base_price=Money(Decimal(price)),
            price_hint="",
            venue_id=None,
            created_at=NOW,
        )
        event = replace(event, **overrides)
        memory_store.add_event(event)
        return event

    return _make


@pytest.fixture
def make_slot(memory_store):
    """Add a time slot of ``event`` to the in-memory store."""

    def _make(event: Event, capacity: int = 10, price: str | None = None, days: int = 1) -> TimeSlot:
        starts_at = NOW + timedelta(days=days)
        slot = TimeSlot(
            id=TimeSlotId(value=uuid.uuid4()),
            event_id=event.id,
            title=starts_at.strftime("%d.%m.%Y %H:%M"),
            starts_at=starts_at,
            ends_at=starts_at + timedelta(hours=2),
            date_only=False,
            capacity=Capacity(capacity),
            override_price=Money(Decimal(price)) if price is not None else None,
        )
        memory_store.add_time_slot(slot)
        return slot

    return _make


@pytest.fixture
def add_bookings(memory_store):
    """Add existing bookings to a slot, bypassing admission."""

    def _add(slot: TimeSlot, *quantities: int) -> None:
        for quantity in quantities:
            memory_store.add_booking(
                Booking(
                    id=BookingId(value=uuid.uuid4()),
                    event_id=slot.event_id,
                    time_slot_id=slot.id,
                    quantity=Quantity(quantity),
                    unit_price=Money(Decimal("20.00")),
                    created_at=NOW,
                )
            )

    return _add


@pytest.fixture
def db_event(db):
    """Create an event row."""

    def _make(price: str = "20.00", **fields) -> models.Event:
        fields.setdefault("name", "Wine tasting")
        return models.Event.objects.create(price=Decimal(price), **fields)

    return _make


@pytest.fixture
def db_slot(db):
    """Create a time slot row for ``event``."""

    def _make(
        event: models.Event, capacity: int = 10, price: str | None = None, days: int = 1
    ) -> models.TimeSlot:
        starts_at = NOW + timedelta(days=days)
        return models.TimeSlot.objects.create(
            event=event,
            title=starts_at.strftime("%d.%m.%Y %H:%M"),
            starts_at=starts_at,
            capacity=capacity,
            price=Decimal(price) if price is not None else None,
        )

    return _make


@pytest.fixture
def db_booking(db):
    """Create a booking row, bypassing admission."""

    def _make(slot: models.TimeSlot, quantity: int) -> models.Booking:
        return models.Booking.objects.create(
            event=slot.event,
            time_slot=slot,
            quantity=quantity,
            price=slot.price or slot.event.price,
            booked_at=NOW,
        )

    return _make
