"""Builds the element tree of the direct booking box."""

from urllib.parse import urlencode

from django.utils.safestring import SafeString

from bookings.config import BookingBoxOptions, BookingConfig
from bookings.handlers import messages
from bookings.handlers.html import (
    Button,
    Element,
    HiddenInput,
    Label,
    Link,
    Node,
    NumberInput,
    Option,
    RadioInput,
    Select,
    TableCell,
    TableRow,
    Text,
    render,
)
from bookings.services.event_service import BookingBox, SlotOffer


def _offer_attrs(offer: SlotOffer, event_id: str) -> tuple[tuple[str, object], ...]:
    return (
        ("data-event-id", event_id),
        ("data-slots", offer.free_slots),
        ("data-price", str(offer.price)),
        ("disabled", offer.free_slots == 0),
    )


def _individual_request(box: BookingBox, label: str, config: BookingConfig) -> Node:
    query = urlencode({"your-subject": box.event.name})
    return Element(
        "p",
        (Link(href=f"{config.contact_url}?{query}", text=label),),
        classes="btb_direct_booking_no_times",
    )


def _dropdown(box: BookingBox, options: BookingBoxOptions, selector_id: str) -> tuple[Node, ...]:
    event_id = str(box.event.id)
    choices = (Option(value="", text=str(messages.SELECT_A_DATE)),) + tuple(
        Option(value=str(offer.slot.id), text=offer.slot.title, attrs=_offer_attrs(offer, event_id))
        for offer in box.offers
    )
    return (
        Label(options.select_label, for_id=selector_id, classes="btb_direct_booking_select_label"),
        Select(
            name="time_slot_id",
            options=choices,
            id=selector_id,
            classes=f"btb_direct_booking_selector {options.select_class}".strip(),
            size=len(box.offers) + 1 if options.select_layout == "bigdropdown" else None,
            attrs=(("data-event-id", event_id),),
        ),
    )


def _radiolist(box: BookingBox, options: BookingBoxOptions, selector_id: str) -> tuple[Node, ...]:
    event_id = str(box.event.id)
    rows: list[Node] = [
        Element(
            "div",
            (
                RadioInput(name="time_slot_id", value="", id="time_0", checked=True),
                Label(str(messages.NOTHING_SELECTED), for_id="time_0"),
            ),
        )
    ]
    for offer in box.offers:
        radio_id = f"time_{offer.slot.id}"
        rows.append(
            Element(
                "div",
                (
                    RadioInput(
                        name="time_slot_id",
                        value=str(offer.slot.id),
                        id=radio_id,
                        attrs=_offer_attrs(offer, event_id),
                    ),
                    Label(offer.slot.title, for_id=radio_id),
                ),
            )
        )
    return (
        Element(
            "fieldset",
            (Element("legend", (Text(options.select_label),), classes="btb_direct_booking_select_label"),)
            + tuple(rows),
            classes=f"btb_direct_booking_selector {options.select_class}".strip(),
            attrs=(("id", selector_id),),
        ),
    )


def _styledlist(box: BookingBox, options: BookingBoxOptions, selector_id: str) -> tuple[Node, ...]:
    event_id = str(box.event.id)
    header = TableRow(
        cells=(
            TableCell((Text(options.select_label),), header=True, scope="col"),
            TableCell((Text(str(messages.PRICE)),), header=True, scope="col"),
            TableCell(
                (Text(str(messages.FREE)),), header=True, scope="col", abbr=str(messages.FREE_SLOTS)
            ),
        )
    )
    rows = []
    for offer in box.offers:
        radio_id = f"time_{offer.slot.id}"
        availability = (
            f"{offer.free_slots} {messages.AVAILABLE}"
            if offer.free_slots
            else str(messages.FULLY_BOOKED)
        )
        rows.append(
            TableRow(
                cells=(
                    TableCell(
                        (
                            RadioInput(
                                name="time_slot_id",
                                value=str(offer.slot.id),
                                id=radio_id,
                                attrs=_offer_attrs(offer, event_id),
                            ),
                            Label(offer.slot.title, for_id=radio_id),
                        ),
                        header=True,
                        scope="row",
                    ),
                    TableCell((Text(str(offer.price)),)),
                    TableCell((Text(availability),)),
                )
            )
        )
    return (
        Element(
            "table",
            (Element("thead", (header,)), Element("tbody", tuple(rows))),
            classes=f"btb_direct_booking_selectable btb_direct_booking_selector {options.select_class}".strip(),
            attrs=(("id", selector_id),),
        ),
    )


_LAYOUTS = {
    "dropdown": _dropdown,
    "bigdropdown": _dropdown,
    "radiolist": _radiolist,
    "styledlist": _styledlist,
}


def _amount_and_submit(box: BookingBox, options: BookingBoxOptions) -> Node:
    event_id = str(box.event.id)
    amount_id = f"btb_direct_booking_amount_{event_id}"
    amount: Node = NumberInput(
        name="quantity",
        id=amount_id,
        classes=f"btb_direct_booking_amount_input {options.amount_input_class}".strip(),
        input_type=options.amount_input_type,
        attrs=(("size", 4), ("data-event-id", event_id)),
    )
    if options.amount_input_surrounding:
        amount = Element("div", (amount,), classes=options.amount_input_surrounding)
    children: list[Node] = [amount]
    if options.amount_input_label:
        children.append(
            Label(options.amount_input_label, for_id=amount_id, classes="btb_direct_amount_unit")
        )
    children.append(
        Button(
            options.button_text,
            id=f"btb_direct_submit_button_{event_id}",
            classes=f"btb_direct_booking_submit {options.button_class}".strip(),
        )
    )
    return Element("div", tuple(children), classes="btb_direct_booking_amount_submit")


def build_booking_box(
    box: BookingBox,
    options: BookingBoxOptions,
    config: BookingConfig,
    csrf_token: str = "",
) -> Element:
    """Return the booking box of an event as an element tree."""
    event = box.event
    event_id = str(event.id)

    content: list[Node] = [
        Element("p", (Text(event.name),), classes="btb_direct_booking_name"),
        Element(
            "p",
            (
                Text(f"{config.currency_symbol} "),
                Element(
                    "span",
                    (Text(str(event.base_price)),),
                    attrs=(
                        ("data-default-price", str(event.base_price)),
                        ("id", f"btb_direct_booking_price_value_{event_id}"),
                    ),
                ),
            ),
            classes="btb_direct_booking_price",
        ),
    ]
    if event.price_hint:
        content.append(Element("p", (Text(event.price_hint),), classes="btb_direct_booking_price_hint"))
    if options.ind_req_force or not box.offers:
        content.append(_individual_request(box, options.ind_req_label, config))

    if box.offers:
        selector_id = f"btb_direct_booking_selector_{event_id}"
        form_children: list[Node] = [HiddenInput(name="event_id", value=event_id)]
        if csrf_token:
            form_children.append(HiddenInput(name="csrfmiddlewaretoken", value=csrf_token))
        form_children.extend(_LAYOUTS[options.select_layout](box, options, selector_id))
        form_children.append(
            Element(
                "div",
                (_amount_and_submit(box, options),),
                classes="btb_direct_booking_checkout",
                attrs=(("id", f"btb_direct_booking_checkout_{event_id}"),),
            )
        )
        content.append(
            Element(
                "form",
                tuple(form_children),
                attrs=(("id", f"btb_direct_booking_form_{event_id}"), ("method", "post")),
            )
        )

    return Element(
        "div",
        (
            Element(
                "div",
                (Element("h4", (Text(options.headline),)),),
                classes="btb_direct_booking_header",
            ),
            Element("div", tuple(content), classes="btb_direct_booking_content"),
        ),
        classes=f"btb_direct_booking_box btb_style_{options.style}",
    )


def render_booking_box(
    box: BookingBox,
    options: BookingBoxOptions,
    config: BookingConfig,
    csrf_token: str = "",
) -> SafeString:
    return render(build_booking_box(box, options, config, csrf_token))
