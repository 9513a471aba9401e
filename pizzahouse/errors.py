"""Domain error codes for the admin document desk."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"


class DeskError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AdminRequiredError(DeskError):
    """Raised when a protected operation runs without a logged-in admin."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Admin login required",
        )


class BookingNotFoundError(DeskError):
    """Raised when a booking id does not exist."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id
