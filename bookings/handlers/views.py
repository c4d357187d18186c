"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.middleware.csrf import get_token
from django.utils import timezone
from django.utils.html import format_html
from django.views import View
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.config import BookingBoxOptions, BookingConfig, InvalidOptionError
from bookings.domain import Accepted, PartiallyUnavailable
from bookings.domain.errors import DomainError, ErrorKind
from bookings.handlers import messages
from bookings.handlers.booking_box import render_booking_box
from bookings.handlers.checkout import checkout_url, verify_checkout_token
from bookings.handlers.serializers import (
    AcceptedSerializer,
    BookingBoxSerializer,
    BookingSerializer,
    DirectBookingRequestSerializer,
)
from bookings.services.availability_service import AvailabilityService
from bookings.services.booking_service import BookingService
from bookings.services.event_service import EventService
from bookings.stores.django_store import DjangoBookingStore

_STATUS_BY_CODE = {
    ErrorKind.INVALID_REFERENCE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.CAPACITY_EXCEEDED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_TOKEN: status.HTTP_403_FORBIDDEN,
}


def error_response(error: DomainError) -> Response:
    """Map a domain error to a response carrying only its code and safe message."""
    return Response(
        {"code": error.code.value, "message": error.message},
        status=_STATUS_BY_CODE[error.code],
    )


class DirectBookingView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = DirectBookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        config = BookingConfig.from_settings()
        service = BookingService(DjangoBookingStore())
        try:
            decision = service.request_booking(
                serializer.validated_data["event_id"],
                serializer.validated_data["time_slot_id"],
                serializer.validated_data["quantity"],
                submitted_at=timezone.now(),
            )
        except DomainError as exc:
            return error_response(exc)

        if isinstance(decision, Accepted):
            context = {"redirect_url": checkout_url(decision.booking_id, config)}
            return Response(
                AcceptedSerializer(decision, context=context).data,
                status=status.HTTP_201_CREATED,
            )
        kind = "partially_unavailable" if isinstance(decision, PartiallyUnavailable) else "fully_booked"
        return Response(
            {"decision": kind, "message": messages.rejection_message(decision)},
            status=status.HTTP_409_CONFLICT,
        )


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}?token=..."""

    def get(self, request: Request, booking_id: str) -> Response:
        config = BookingConfig.from_settings()
        service = BookingService(DjangoBookingStore())
        try:
            booking = service.get_booking(booking_id)
            verify_checkout_token(str(booking.id), request.query_params.get("token", ""), config)
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)


class FreeSlotsView(APIView):
    """Handler for GET /api/time-slots/{time_slot_id}/free-slots"""

    def get(self, request: Request, time_slot_id: str) -> Response:
        service = AvailabilityService(DjangoBookingStore())
        try:
            free = service.free_slots(time_slot_id)
        except DomainError as exc:
            return error_response(exc)
        return Response({"time_slot_id": time_slot_id, "free_slots": free})


class BookingBoxView(APIView):
    """Handler for GET /api/events/{event_id}/booking-box"""

    def get(self, request: Request, event_id: str) -> Response:
        service = EventService(DjangoBookingStore())
        try:
            box = service.get_booking_box(event_id)
        except DomainError as exc:
            return error_response(exc)
        context = {"config": BookingConfig.from_settings()}
        return Response(BookingBoxSerializer(box, context=context).data)


class BookingBoxPageView(View):
    """Handler for GET|POST /events/{event_id}/booking-box.html

    GET renders the booking box; query parameters override the configured
    box options. POST processes the booking form.
    """

    def get(self, request: HttpRequest, event_id: str) -> HttpResponse:
        config = BookingConfig.from_settings()
        try:
            options = BookingBoxOptions.from_mapping(request.GET, base=config.box)
        except InvalidOptionError as exc:
            return HttpResponse(format_html("<p>{}</p>", exc), status=status.HTTP_400_BAD_REQUEST)
        try:
            box = EventService(DjangoBookingStore()).get_booking_box(event_id)
        except DomainError:
            return HttpResponse(
                format_html("<p>{}</p>", messages.EVENT_NOT_FOUND),
                status=status.HTTP_404_NOT_FOUND,
            )
        return HttpResponse(render_booking_box(box, options, config, get_token(request)))

    def post(self, request: HttpRequest, event_id: str) -> HttpResponse:
        form_event_id = request.POST.get("event_id", event_id).strip().lower()
        if form_event_id != event_id.strip().lower():
            return HttpResponse(
                format_html("<p>{}</p>", messages.EVENT_MISMATCH),
                status=status.HTTP_400_BAD_REQUEST,
            )
        config = BookingConfig.from_settings()
        service = BookingService(DjangoBookingStore())
        try:
            decision = service.request_booking(
                event_id,
                request.POST.get("time_slot_id", ""),
                request.POST.get("quantity", ""),
                submitted_at=timezone.now(),
            )
        except DomainError as exc:
            return HttpResponse(
                format_html("<p>{}</p>", exc.message),
                status=_STATUS_BY_CODE[exc.code],
            )
        if isinstance(decision, Accepted):
            return HttpResponseRedirect(checkout_url(decision.booking_id, config))
        return HttpResponse(format_html("<p>{}</p>", messages.rejection_message(decision)))
