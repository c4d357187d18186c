"""Explicit configuration for the booking box and checkout flow.

Every recognized option is a dataclass field. Unknown keys are rejected
instead of being copied onto objects.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

STYLES = ("default", "avada", "custom")
SELECT_LAYOUTS = ("dropdown", "bigdropdown", "radiolist", "styledlist")
AMOUNT_INPUT_TYPES = ("number", "text")

_CHOICES = {
    "style": STYLES,
    "select_layout": SELECT_LAYOUTS,
    "amount_input_type": AMOUNT_INPUT_TYPES,
}
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("", "0", "false", "no", "off")


class InvalidOptionError(ValueError):
    """Raised for unknown booking box options or values outside their choices."""


@dataclass(frozen=True)
class BookingBoxOptions:
    """Options of the direct booking box."""

    style: str = "default"
    headline: str = "Booking"
    button_class: str = ""
    button_text: str = "Book"
    select_class: str = ""
    select_label: str = "Dates"
    select_layout: str = "dropdown"
    amount_input_class: str = ""
    amount_input_type: str = "number"
    amount_input_surrounding: str = ""
    amount_input_label: str = "People"
    ind_req_label: str = "Individual request"
    ind_req_force: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, object], base: Self | None = None) -> Self:
        """Build options from a mapping, starting from ``base`` or the defaults.

        Raises:
            InvalidOptionError: For unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidOptionError(f"Unknown booking box option(s): {', '.join(unknown)}")

        changes: dict[str, object] = {}
        for name, raw in values.items():
            if name == "ind_req_force":
                changes[name] = _parse_bool(name, raw)
                continue
            value = str(raw)
            choices = _CHOICES.get(name)
            if choices and value not in choices:
                raise InvalidOptionError(
                    f"Invalid value {value!r} for {name}; expected one of {', '.join(choices)}"
                )
            changes[name] = value
        return replace(base or cls(), **changes)


def _parse_bool(name: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidOptionError(f"Invalid value {raw!r} for {name}; expected a boolean")


@dataclass(frozen=True)
class BookingConfig:
    """Site-wide booking settings, passed to views and renderers."""

    currency_code: str = "EUR"
    currency_symbol: str = "€"
    checkout_url: str = "/checkout/"
    contact_url: str = "/contact/"
    token_max_age: int = 3600
    box: BookingBoxOptions = field(default_factory=BookingBoxOptions)

    @classmethod
    def from_settings(cls) -> Self:
        """Build the configuration from the ``BOOKING`` Django setting.

        Raises:
            ImproperlyConfigured: For unknown keys or invalid box options.
        """
        raw = dict(getattr(settings, "BOOKING", {}))
        known = {f.name.upper() for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ImproperlyConfigured(f"Unknown BOOKING setting(s): {', '.join(unknown)}")

        kwargs: dict[str, object] = {
            key.lower(): value for key, value in raw.items() if key != "BOX"
        }
        try:
            kwargs["box"] = BookingBoxOptions.from_mapping(raw.get("BOX", {}))
        except InvalidOptionError as exc:
            raise ImproperlyConfigured(str(exc)) from exc
        if "token_max_age" in kwargs:
            kwargs["token_max_age"] = int(kwargs["token_max_age"])
        return cls(**kwargs)
