"""Integration tests for the direct booking HTTP API.

Run with: pytest tests/test_direct_booking_api.py -v
"""

import uuid
from unittest import mock
from urllib.parse import parse_qs, urlsplit

import pytest
from django.db import DatabaseError, connection
from django.urls import reverse
from rest_framework.test import APIClient

from bookings import models


def _submit(api_client: APIClient, event, slot, quantity):
    return api_client.post(
        reverse("direct-booking"),
        {"event_id": str(event.id), "time_slot_id": str(slot.id), "quantity": quantity},
        format="json",
    )


@pytest.mark.django_db
class TestDirectBooking:
    """Tests for POST /api/bookings"""

    def test_accepted_booking_redirects_to_checkout(self, api_client, db_event, db_slot):
        event = db_event(price="20.00")
        slot = db_slot(event, capacity=10)

        response = _submit(api_client, event, slot, 2)

        assert response.status_code == 201
        assert response.data["decision"] == "accepted"
        assert response.data["unit_price"] == "20.00"
        assert response.data["quantity"] == 2
        url = urlsplit(response.data["redirect_url"])
        query = parse_qs(url.query)
        assert url.path == "/checkout/"
        assert query["booking"] == [str(response.data["booking_id"])]
        assert query["token"]
        assert models.Booking.objects.filter(time_slot=slot).count() == 1

    def test_quantity_sent_as_form_text_is_accepted(self, api_client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)

        response = api_client.post(
            reverse("direct-booking"),
            {"event_id": str(event.id), "time_slot_id": str(slot.id), "quantity": "3"},
        )

        assert response.status_code == 201

    def test_shortfall_returns_not_enough_slots_message(self, api_client, db_event, db_slot, db_booking):
        event = db_event()
        slot = db_slot(event, capacity=10)
        db_booking(slot, 7)

        response = _submit(api_client, event, slot, 5)

        assert response.status_code == 409
        assert response.data == {
            "decision": "partially_unavailable",
            "message": "There are not enough free slots for your selection.",
        }
        assert models.Booking.objects.filter(time_slot=slot).count() == 1

    def test_no_capacity_returns_booked_out_message(self, api_client, db_event, db_slot, db_booking):
        event = db_event()
        slot = db_slot(event, capacity=10)
        db_booking(slot, 10)

        response = _submit(api_client, event, slot, 1)

        assert response.status_code == 409
        assert response.data["decision"] == "fully_booked"
        assert response.data["message"] == "This is now booked out."

    @pytest.mark.parametrize("quantity", [0, -2, "many"])
    def test_invalid_quantity_returns_400(self, api_client, db_event, db_slot, quantity):
        event = db_event()
        slot = db_slot(event)

        response = _submit(api_client, event, slot, quantity)

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_QUANTITY"
        assert not models.Booking.objects.exists()

    def test_slot_of_other_event_returns_400(self, api_client, db_event, db_slot):
        event = db_event()
        foreign_slot = db_slot(db_event(name="Cheese tasting"))

        response = _submit(api_client, event, foreign_slot, 1)

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_REFERENCE"

    def test_missing_field_returns_400(self, api_client, db):
        response = api_client.post(reverse("direct-booking"), {"quantity": 1}, format="json")

        assert response.status_code == 400
        assert "event_id" in response.data


@pytest.mark.django_db
class TestBookingDetail:
    """Tests for GET /api/bookings/{id}"""

    def test_valid_token_returns_booking(self, api_client, db_event, db_slot):
        event = db_event(price="20.00")
        slot = db_slot(event)
        accepted = _submit(api_client, event, slot, 2).data
        token = parse_qs(urlsplit(accepted["redirect_url"]).query)["token"][0]

        response = api_client.get(
            reverse("booking-detail", args=[accepted["booking_id"]]), {"token": token}
        )

        assert response.status_code == 200
        assert response.data["quantity"] == 2
        assert response.data["total_price"] == "40.00"

    def test_forged_token_is_forbidden(self, api_client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)
        accepted = _submit(api_client, event, slot, 1).data

        response = api_client.get(
            reverse("booking-detail", args=[accepted["booking_id"]]), {"token": "forged:token"}
        )

        assert response.status_code == 403
        assert response.data["code"] == "INVALID_TOKEN"

    def test_token_of_another_booking_is_forbidden(self, api_client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)
        first = _submit(api_client, event, slot, 1).data
        second = _submit(api_client, event, slot, 1).data
        token = parse_qs(urlsplit(first["redirect_url"]).query)["token"][0]

        response = api_client.get(reverse("booking-detail", args=[second["booking_id"]]), {"token": token})

        assert response.status_code == 403

    def test_unknown_booking_returns_404(self, api_client, db):
        response = api_client.get(reverse("booking-detail", args=[str(uuid.uuid4())]))

        assert response.status_code == 404


@pytest.mark.django_db
class TestFreeSlots:
    """Tests for GET /api/time-slots/{id}/free-slots"""

    def test_returns_free_slots(self, api_client, db_event, db_slot, db_booking):
        slot = db_slot(db_event(), capacity=10)
        db_booking(slot, 4)

        response = api_client.get(reverse("free-slots", args=[str(slot.id)]))

        assert response.status_code == 200
        assert response.data["free_slots"] == 6

    def test_unknown_slot_returns_400(self, api_client, db):
        response = api_client.get(reverse("free-slots", args=[str(uuid.uuid4())]))

        assert response.status_code == 400
        assert response.data["code"] == "INVALID_REFERENCE"


@pytest.mark.django_db
class TestBookingBox:
    """Tests for GET /api/events/{id}/booking-box"""

    def test_returns_event_with_priced_slots(self, api_client, db_event, db_slot, db_booking):
        venue = models.Venue.objects.create(name="Weingut Hof", street="Weinstr.", number="12")
        event = db_event(price="20.00", venue=venue)
        first = db_slot(event, capacity=10, days=1)
        second = db_slot(event, capacity=5, price="15.00", days=2)
        db_booking(second, 5)

        response = api_client.get(reverse("booking-box", args=[str(event.id)]))

        assert response.status_code == 200
        assert response.data["event"]["price"] == "20.00"
        assert response.data["currency_code"] == "EUR"
        assert response.data["venue"]["street_and_number"] == "Weinstr. 12"
        slots = response.data["time_slots"]
        assert [s["id"] for s in slots] == [str(first.id), str(second.id)]
        assert [s["price"] for s in slots] == ["20.00", "15.00"]
        assert [s["free_slots"] for s in slots] == [10, 0]
        assert response.data["individual_request_url"].startswith("/contact/?your-subject=")

    def test_event_without_venue(self, api_client, db_event):
        event = db_event()

        response = api_client.get(reverse("booking-box", args=[str(event.id)]))

        assert response.status_code == 200
        assert response.data["venue"] is None
        assert response.data["time_slots"] == []

    def test_unknown_event_returns_404(self, api_client, db):
        response = api_client.get(reverse("booking-box", args=[str(uuid.uuid4())]))

        assert response.status_code == 404
        assert response.data["code"] == "EVENT_NOT_FOUND"


@pytest.mark.django_db
class TestStorageFailure:
    """Storage failures are answered with 503 and a generic message."""

    def test_rejected_write_returns_503(self, api_client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)

        with mock.patch.object(
            models.Booking.objects, "create", side_effect=DatabaseError("disk full")
        ):
            response = _submit(api_client, event, slot, 1)

        assert response.status_code == 503
        assert response.data == {
            "code": "STORAGE_FAILURE",
            "message": "The booking could not be saved",
        }


@pytest.mark.django_db(transaction=True)
class TestCommitFailure:
    """A failed commit of the admission transaction is a storage failure."""

    def test_rejected_commit_returns_503(self, api_client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)

        with mock.patch.object(connection, "commit", side_effect=DatabaseError("commit rejected")):
            response = _submit(api_client, event, slot, 1)

        assert response.status_code == 503
        assert response.data["code"] == "STORAGE_FAILURE"
        assert not models.Booking.objects.exists()
