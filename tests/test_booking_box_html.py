"""Tests for the HTML element renderer and the booking box page.

Run with: pytest tests/test_booking_box_html.py -v
"""

from unittest import mock

import pytest
from django.urls import reverse

from bookings import models
from bookings.config import BookingBoxOptions, InvalidOptionError
from bookings.handlers import messages
from bookings.handlers.html import (
    Element,
    Link,
    Option,
    RadioInput,
    Select,
    TableCell,
    TableRow,
    Text,
    render,
)


class TestRender:
    """Tests for render()."""

    def test_header_cell_renders_th_with_scope_and_abbr(self):
        cell = TableCell((Text("Date"),), header=True, scope="col", abbr="D")
        assert render(cell) == '<th scope="col" abbr="D">Date</th>'

    def test_data_cell_ignores_abbr(self):
        assert render(TableCell((Text("x"),), abbr="ignored")) == "<td>x</td>"

    def test_colspan_only_above_one_and_rowspan_from_zero(self):
        assert render(TableCell(colspan=1, rowspan=0)) == '<td rowspan="0"></td>'
        assert render(TableCell(colspan=2)) == '<td colspan="2"></td>'

    def test_row_renders_cells(self):
        row = TableRow(cells=(TableCell((Text("a"),)), TableCell((Text("b"),))))
        assert render(row) == "<tr><td>a</td><td>b</td></tr>"

    def test_text_and_attributes_are_escaped(self):
        element = Element("p", (Text("<b>a&b</b>"),), classes='x"y')
        assert render(element) == '<p class="x&quot;y">&lt;b&gt;a&amp;b&lt;/b&gt;</p>'

    def test_link_escapes_href(self):
        assert render(Link(href="/c?a=1&b=2", text="Contact")) == '<a href="/c?a=1&amp;b=2">Contact</a>'

    def test_empty_option_value_is_kept(self):
        select = Select(name="s", options=(Option("", "Pick"), Option("1", "One")))
        assert render(select) == (
            '<select name="s"><option value="">Pick</option><option value="1">One</option></select>'
        )

    def test_checked_radio_renders_boolean_attribute(self):
        radio = RadioInput(name="t", value="", id="time_0", checked=True)
        assert render(radio) == '<input type="radio" id="time_0" name="t" value="" checked>'

    def test_unknown_node_type_raises(self):
        with pytest.raises(TypeError):
            render(object())


class TestBookingBoxOptions:
    """Tests for BookingBoxOptions.from_mapping."""

    def test_defaults(self):
        options = BookingBoxOptions.from_mapping({})
        assert options.select_layout == "dropdown"
        assert options.ind_req_force is False

    def test_overrides_known_options(self):
        options = BookingBoxOptions.from_mapping({"headline": "Tickets", "ind_req_force": "1"})
        assert options.headline == "Tickets"
        assert options.ind_req_force is True

    def test_keeps_base_values(self):
        base = BookingBoxOptions(button_text="Reserve")
        assert BookingBoxOptions.from_mapping({"style": "avada"}, base=base).button_text == "Reserve"

    def test_rejects_unknown_keys(self):
        with pytest.raises(InvalidOptionError, match="onclick"):
            BookingBoxOptions.from_mapping({"onclick": "alert(1)"})

    @pytest.mark.parametrize(
        "values",
        [{"select_layout": "carousel"}, {"style": "fancy"}, {"ind_req_force": "maybe"}],
    )
    def test_rejects_invalid_values(self, values):
        with pytest.raises(InvalidOptionError):
            BookingBoxOptions.from_mapping(values)


def _page(event) -> str:
    return reverse("booking-box-page", args=[str(event.id)])


@pytest.mark.django_db
class TestBookingBoxPage:
    """Tests for GET|POST /events/{id}/booking-box.html"""

    def test_dropdown_lists_slots_with_free_slots_and_price(self, client, db_event, db_slot, db_booking):
        event = db_event(price="20.00", price_hint="incl. bread")
        slot = db_slot(event, capacity=10, price="15.00")
        db_booking(slot, 3)

        response = client.get(_page(event))

        html = response.content.decode()
        assert response.status_code == 200
        assert '<h4>Booking</h4>' in html
        assert "incl. bread" in html
        assert f'<option value="{slot.id}"' in html
        assert 'data-slots="7"' in html
        assert 'data-price="15.00"' in html
        assert 'name="csrfmiddlewaretoken"' in html

    def test_bigdropdown_sets_select_size(self, client, db_event, db_slot):
        event = db_event()
        db_slot(event, days=1)
        db_slot(event, days=2)

        html = client.get(_page(event), {"select_layout": "bigdropdown"}).content.decode()

        assert 'size="3"' in html

    def test_radiolist_layout(self, client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)

        html = client.get(_page(event), {"select_layout": "radiolist"}).content.decode()

        assert "<fieldset" in html
        assert 'id="time_0" name="time_slot_id" value="" checked' in html
        assert f'id="time_{slot.id}"' in html

    def test_styledlist_layout_renders_availability_table(self, client, db_event, db_slot, db_booking):
        event = db_event()
        slot = db_slot(event, capacity=2)
        db_booking(slot, 2)

        html = client.get(_page(event), {"select_layout": "styledlist"}).content.decode()

        assert "<table" in html
        assert '<th scope="col">' in html
        assert "fully booked" in html
        assert "disabled" in html

    def test_event_without_slots_shows_individual_request_link(self, client, db_event):
        event = db_event(name="Private tour")

        html = client.get(_page(event)).content.decode()

        assert "<form" not in html
        assert 'href="/contact/?your-subject=Private+tour"' in html

    def test_unknown_option_returns_400(self, client, db_event):
        response = client.get(_page(db_event()), {"colour": "red"})

        assert response.status_code == 400

    def test_unknown_event_returns_404(self, client, db):
        response = client.get("/events/3f1c6d7e-0000-4000-8000-000000000000/booking-box.html")

        assert response.status_code == 404
        assert b"no event has been found" in response.content

    def test_post_accepted_redirects_to_checkout(self, client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event, capacity=4)

        response = client.post(
            _page(event),
            {"event_id": str(event.id), "time_slot_id": str(slot.id), "quantity": "4"},
        )

        assert response.status_code == 302
        assert response["Location"].startswith("/checkout/?booking=")
        assert models.Booking.objects.get().quantity == 4

    def test_post_rejection_shows_message(self, client, db_event, db_slot, db_booking):
        event = db_event()
        slot = db_slot(event, capacity=4)
        db_booking(slot, 4)

        response = client.post(
            _page(event),
            {"event_id": str(event.id), "time_slot_id": str(slot.id), "quantity": "1"},
        )

        assert response.status_code == 200
        assert response.content.decode() == "<p>This is now booked out.</p>"

    def test_post_without_selected_date_returns_400(self, client, db_event, db_slot):
        event = db_event()
        db_slot(event)

        response = client.post(_page(event), {"event_id": str(event.id), "time_slot_id": "", "quantity": "1"})

        assert response.status_code == 400

    def test_post_for_another_event_is_rejected(self, client, db_event, db_slot):
        """The event in the URL must match the event of the submitted form."""
        event = db_event()
        other = db_event(name="Cheese tasting")
        slot = db_slot(other)

        response = client.post(
            _page(event),
            {"event_id": str(other.id), "time_slot_id": str(slot.id), "quantity": "1"},
        )

        assert response.status_code == 400
        assert not models.Booking.objects.exists()

    def test_post_without_event_field_uses_url_event(self, client, db_event, db_slot):
        event = db_event()
        slot = db_slot(event)

        response = client.post(_page(event), {"time_slot_id": str(slot.id), "quantity": "1"})

        assert response.status_code == 302
        assert models.Booking.objects.get().event_id == event.id

    def test_styledlist_headers_come_from_message_catalog(self, client, db_event, db_slot):
        event = db_event()
        db_slot(event)

        with mock.patch.object(messages, "PRICE", "Preis"):
            html = client.get(_page(event), {"select_layout": "styledlist"}).content.decode()

        assert '<th scope="col">Preis</th>' in html
        assert '<th scope="col" abbr="Free slots">Free</th>' in html
