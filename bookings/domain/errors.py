"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Domain error codes."""

    INVALID_REFERENCE = "INVALID_REFERENCE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    STORAGE_FAILURE = "STORAGE_FAILURE"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_TOKEN = "INVALID_TOKEN"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidReferenceError(DomainError):
    """Raised when event or time slot ids are unknown, malformed or mismatched."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorKind.INVALID_REFERENCE,
            message="Unknown event or date",
        )
        self.detail = detail


class InvalidQuantityError(DomainError):
    """Raised when the requested quantity is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorKind.INVALID_QUANTITY,
            message="Quantity must be a positive whole number",
        )


class StorageFailureError(DomainError):
    """Raised when the persistence layer rejects a write."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorKind.STORAGE_FAILURE,
            message="The booking could not be saved",
        )


class CapacityExceededError(DomainError):
    """Raised when a write would push a time slot past its capacity."""

    def __init__(self, time_slot_id: str) -> None:
        super().__init__(
            code=ErrorKind.CAPACITY_EXCEEDED,
            message="The booking could not be saved",
        )
        self.time_slot_id = time_slot_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorKind.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorKind.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidTokenError(DomainError):
    """Raised when a checkout token does not match its booking."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorKind.INVALID_TOKEN,
            message="Invalid or expired checkout link",
        )
