class BookingError(RuntimeError):
    """Base for errors reported to API callers with a short public message."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(BookingError):
    """Raised when required fields are missing or empty."""
    default_message = "Missing required fields"


class Unauthorized(BookingError):
    """Raised when the admin secret is missing or does not match."""
    status_code = 401
    default_message = "Access denied"


class SlotUnavailable(BookingError):
    """Raised when a slot does not exist or is already booked."""
    default_message = "Slot unavailable"


class DuplicateKey(BookingError):
    """Raised when a slot with the same (date, time) already exists."""
    default_message = "Slot already exists"


class PaymentSessionError(BookingError):
    """Raised when the payment provider fails to create a checkout session."""
    status_code = 500
    default_message = "Payment provider error"


class StorageUnavailable(BookingError):
    """Raised when the slot store cannot be read or written."""
    status_code = 500
    default_message = "Internal server error"
