"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TimeSlotId:
    """Unique identifier for a TimeSlot."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def __mul__(self, factor: int) -> "Money":
        return Money(amount=self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class Quantity:
    """Positive integer number of places requested on a time slot."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Quantity must be an integer")
        if self.value <= 0:
            raise ValueError("Quantity must be positive")

    @classmethod
    def parse(cls, raw: object) -> Self:
        """Build a Quantity from an int or a base-10 integer string.

        Floats, booleans and blank strings are rejected even when they
        would coerce cleanly.
        """
        if isinstance(raw, str):
            text = raw.strip()
            if not text.lstrip("+-").isdigit():
                raise ValueError("Quantity must be an integer")
            return cls(value=int(text))
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError("Quantity must be an integer")
        return cls(value=raw)
