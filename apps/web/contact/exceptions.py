"""Contact form submission exceptions."""

from agency_schemas import FieldError


class ContactSubmissionError(Exception):
    """Base exception for failed contact form submissions."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ContactTransportError(ContactSubmissionError):
    """The request did not complete (connection failure or timeout)."""


class ContactValidationError(ContactSubmissionError):
    """The server rejected one or more fields."""

    def __init__(
        self,
        message: str,
        errors: list[FieldError],
        status_code: int | None = 400,
    ) -> None:
        super().__init__(message, status_code)
        self.errors = errors


class ContactServerError(ContactSubmissionError):
    """The server failed to process the request or answered unexpectedly."""
