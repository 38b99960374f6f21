"""
Domain Errors

Error taxonomy shared by the desk and meeting room workflows. Missing
resources and booking conflicts are separate types so callers can tell
them apart; notification failures never leave the workflow that caught
them.
"""


class BookingError(Exception):
    """Base class for booking workflow errors."""


class ResourceNotFoundError(BookingError):
    """Raised when a referenced desk, room or booking does not exist."""

    def __init__(self, resource_type: str, field: str, value):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(f"{resource_type} not found with {field}: '{value}'")


class BookingConflictError(BookingError):
    """Raised when the requested date or time range is already booked."""

    def __init__(self, resource_type: str, resource_id, booking_date, booking_time=None):
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.booking_date = booking_date
        self.booking_time = booking_time
        message = f"Cannot book {resource_type} with ID {resource_id} on {booking_date}"
        if booking_time is not None:
            message += f" at {booking_time}"
        super().__init__(message + " as it is already booked")


class NotificationError(Exception):
    """Raised by notifiers when a message could not be delivered."""
