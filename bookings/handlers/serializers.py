"""Serializers for transforming domain models to API responses."""

from urllib.parse import urlencode

from rest_framework import serializers


class DirectBookingRequestSerializer(serializers.Serializer):
    """Input of a direct booking submission.

    Values are kept as text; the admission service owns their validation.
    """

    event_id = serializers.CharField()
    time_slot_id = serializers.CharField()
    quantity = serializers.CharField()


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    street_and_number = serializers.CharField()
    postal_code = serializers.CharField()
    city = serializers.CharField()
    region = serializers.CharField()
    country = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(source="base_price.amount", max_digits=10, decimal_places=2)
    price_hint = serializers.CharField()


class SlotOfferSerializer(serializers.Serializer):
    """Serializer for a priced time slot with its free slots."""

    id = serializers.UUIDField(source="slot.id.value")
    title = serializers.CharField(source="slot.title")
    starts_at = serializers.DateTimeField(source="slot.starts_at")
    ends_at = serializers.DateTimeField(source="slot.ends_at", allow_null=True)
    date_only = serializers.BooleanField(source="slot.date_only")
    capacity = serializers.IntegerField(source="slot.capacity.value")
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    free_slots = serializers.IntegerField()


class BookingBoxSerializer(serializers.Serializer):
    """Serializer for the booking box of an event. Needs ``config`` in context."""

    event = EventSerializer()
    venue = VenueSerializer(allow_null=True)
    time_slots = SlotOfferSerializer(source="offers", many=True)
    currency_code = serializers.SerializerMethodField()
    currency_symbol = serializers.SerializerMethodField()
    individual_request_url = serializers.SerializerMethodField()

    def get_currency_code(self, obj) -> str:
        return self.context["config"].currency_code

    def get_currency_symbol(self, obj) -> str:
        return self.context["config"].currency_symbol

    def get_individual_request_url(self, obj) -> str:
        query = urlencode({"your-subject": obj.event.name})
        return f"{self.context['config'].contact_url}?{query}"


class AcceptedSerializer(serializers.Serializer):
    """Serializer for an accepted booking. Needs ``redirect_url`` in context."""

    decision = serializers.SerializerMethodField()
    booking_id = serializers.UUIDField(source="booking_id.value")
    unit_price = serializers.DecimalField(source="unit_price.amount", max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
    redirect_url = serializers.SerializerMethodField()

    def get_decision(self, obj) -> str:
        return "accepted"

    def get_redirect_url(self, obj) -> str:
        return self.context["redirect_url"]


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    time_slot_id = serializers.UUIDField(source="time_slot_id.value")
    quantity = serializers.IntegerField(source="quantity.value")
    unit_price = serializers.DecimalField(source="unit_price.amount", max_digits=10, decimal_places=2)
    total_price = serializers.DecimalField(source="total_price.amount", max_digits=12, decimal_places=2)
    created_at = serializers.DateTimeField()
