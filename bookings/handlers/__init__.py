from bookings.handlers.views import (
    BookingBoxPageView,
    BookingBoxView,
    BookingDetailView,
    DirectBookingView,
    FreeSlotsView,
)

__all__ = [
    "BookingBoxPageView",
    "BookingBoxView",
    "BookingDetailView",
    "DirectBookingView",
    "FreeSlotsView",
]
