"""User-facing texts shared by the JSON and HTML handlers."""

from django.utils.translation import gettext_lazy as _

from bookings.domain import Decision, PartiallyUnavailable

NOT_ENOUGH_FREE_SLOTS = _("There are not enough free slots for your selection.")
BOOKED_OUT = _("This is now booked out.")
EVENT_NOT_FOUND = _("Under the specified ID no event has been found.")
SELECT_A_DATE = _("Select a date")
NOTHING_SELECTED = _("Nothing selected")
FULLY_BOOKED = _("fully booked")
AVAILABLE = _("available")
PRICE = _("Price")
FREE = _("Free")
FREE_SLOTS = _("Free slots")
EVENT_MISMATCH = _("The booking form does not belong to this event.")


def rejection_message(decision: Decision) -> str:
    if isinstance(decision, PartiallyUnavailable):
        return str(NOT_ENOUGH_FREE_SLOTS)
    return str(BOOKED_OUT)
