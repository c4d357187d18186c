from django.urls import path

from bookings.handlers import (
    BookingBoxPageView,
    BookingBoxView,
    BookingDetailView,
    DirectBookingView,
    FreeSlotsView,
)

api_urlpatterns = [
    path("bookings", DirectBookingView.as_view(), name="direct-booking"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "time-slots/<str:time_slot_id>/free-slots",
        FreeSlotsView.as_view(),
        name="free-slots",
    ),
    path(
        "events/<str:event_id>/booking-box",
        BookingBoxView.as_view(),
        name="booking-box",
    ),
]

page_urlpatterns = [
    path(
        "events/<str:event_id>/booking-box.html",
        BookingBoxPageView.as_view(),
        name="booking-box-page",
    ),
]
