"""
Contact form controller - field state, live validation and submission.

Lifecycle per submit attempt:

    IDLE --submit()--> SUBMITTING --ok--> SUCCESS --> IDLE   (fields reset)
                                  --err-> FAILURE --> IDLE   (fields kept)

A submit that fails local validation never leaves IDLE and never touches
the network. While SUBMITTING, further submits are refused.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

from agency_schemas import (
    INQUIRY_FIELDS,
    ServiceCategory,
    ServiceInquiry,
    validate_field,
    validate_inquiry,
)
from pydantic import BaseModel

from apps.web.contact.client import ContactAPIClient
from apps.web.contact.exceptions import ContactSubmissionError, ContactValidationError

logger = logging.getLogger(__name__)

SUCCESS_TEXT = "Thank you for your message. We'll get back to you soon!"
FAILURE_TEXT = "There was an error submitting the form. Please try again."

NOTIFICATION_DISPLAY = timedelta(seconds=5)
NOTIFICATION_FADE = timedelta(milliseconds=300)


class FormState(str, Enum):
    """Submission state of the form."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


class FieldIndicator(str, Enum):
    """Per-field feedback shown next to the input."""

    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


class SubmitOutcome(str, Enum):
    """Result of a submit() call."""

    SUCCESS = "success"
    FAILURE = "failure"
    INVALID = "invalid"
    BLOCKED = "blocked"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """A toast shown after a submission, removed after display + fade."""

    kind: NotificationKind
    text: str
    created_at: datetime
    display_for: timedelta = NOTIFICATION_DISPLAY
    fade_for: timedelta = NOTIFICATION_FADE

    @property
    def fades_at(self) -> datetime:
        return self.created_at + self.display_for

    @property
    def expires_at(self) -> datetime:
        return self.fades_at + self.fade_for

    def is_visible(self, now: datetime) -> bool:
        return now < self.expires_at

    def is_fading(self, now: datetime) -> bool:
        return self.fades_at <= now < self.expires_at


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _is_blank(value: Any) -> bool:
    # Same rule as the schema: whitespace is a value, not a blank
    return value is None or value == ""


class ContactFormController:
    """
    Drives the contact form.

    Field values are kept in wire format (camelCase keys). Validation uses
    the same schema as the endpoint.
    """

    def __init__(
        self,
        client: ContactAPIClient,
        default_service: str | None = None,
        on_state_change: Callable[[FormState], None] | None = None,
        on_notification: Callable[[Notification], None] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the controller.

        Args:
            client: Contact API client used for submission.
            default_service: Category to pre-select, e.g. from ``?service=``.
                Ignored unless it is a known category.
            on_state_change: Called with each new state.
            on_notification: Called with each notification as it is emitted.
            clock: Time source for notifications.
        """
        self._client = client
        self._on_state_change = on_state_change
        self._on_notification = on_notification
        self._clock = clock

        category = ServiceCategory.from_value(default_service)
        self._defaults: dict[str, Any] = {field: "" for field in INQUIRY_FIELDS}
        if category is not None:
            self._defaults["serviceCategory"] = category.value

        self.state = FormState.IDLE
        self.notifications: list[Notification] = []
        self.reset()

    # =========================================================================
    # Field state
    # =========================================================================

    def reset(self) -> None:
        """Restore default values and clear edit/error state."""
        self.values: dict[str, Any] = dict(self._defaults)
        self.dirty: set[str] = set()
        self.touched: set[str] = set()
        self.errors: dict[str, str] = {}

    def change(self, field: str, value: Any) -> FieldIndicator:
        """On-change: store the value and re-run live validation."""
        self._check_field(field)
        self.values[field] = value
        self.dirty.add(field)
        if field in self.touched or field in self.errors:
            self._refresh_error(field)
        return self.indicator(field)

    def blur(self, field: str) -> FieldIndicator:
        """On-blur: the field's error message becomes visible."""
        self._check_field(field)
        self.touched.add(field)
        self._refresh_error(field)
        return self.indicator(field)

    def indicator(self, field: str) -> FieldIndicator:
        """Live indicator for a field, independent of blur state."""
        self._check_field(field)
        value = self.values.get(field)
        if _is_blank(value):
            return FieldIndicator.EMPTY
        if validate_field(field, value) is None:
            return FieldIndicator.VALID
        return FieldIndicator.INVALID

    def payload(self) -> dict[str, Any]:
        """Current values in wire format, blank fields omitted."""
        return {
            field: value
            for field, value in self.values.items()
            if not _is_blank(value)
        }

    @property
    def submit_enabled(self) -> bool:
        return self.state is not FormState.SUBMITTING

    # =========================================================================
    # Submission
    # =========================================================================

    async def submit(self) -> SubmitOutcome:
        """
        Validate and submit the form.

        Returns:
            BLOCKED if a submission is already outstanding, INVALID if local
            validation failed, otherwise SUCCESS or FAILURE.
        """
        if not self.submit_enabled:
            logger.debug("Submit ignored: submission already in progress")
            return SubmitOutcome.BLOCKED

        result = validate_inquiry(self.payload())
        if not isinstance(result, ServiceInquiry):
            self.touched.update(INQUIRY_FIELDS)
            self.errors = {err.field: err.message for err in result}
            return SubmitOutcome.INVALID

        self._set_state(FormState.SUBMITTING)
        try:
            ack = await self._client.submit(result.to_payload())
        except ContactSubmissionError as e:
            logger.warning("Contact form submission failed: %s", e.message)
            if isinstance(e, ContactValidationError):
                self.errors = {err.field: err.message for err in e.errors}
            self._set_state(FormState.FAILURE)
            self._notify(NotificationKind.ERROR, FAILURE_TEXT)
            self._set_state(FormState.IDLE)
            return SubmitOutcome.FAILURE
        except Exception:
            self._set_state(FormState.IDLE)
            raise

        logger.info("Contact form submitted: %s", ack.data.inquiry_id)
        self.reset()
        self._set_state(FormState.SUCCESS)
        self._notify(NotificationKind.SUCCESS, SUCCESS_TEXT)
        self._set_state(FormState.IDLE)
        return SubmitOutcome.SUCCESS

    def visible_notifications(self, now: datetime | None = None) -> list[Notification]:
        """Notifications still on screen; expired ones are dropped."""
        now = now or self._clock()
        self.notifications = [n for n in self.notifications if n.is_visible(now)]
        return list(self.notifications)

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_field(self, field: str) -> None:
        if field not in self._defaults:
            raise KeyError(f"Unknown form field: {field}")

    def _refresh_error(self, field: str) -> None:
        value = self.values.get(field)
        message = validate_field(field, None if _is_blank(value) else value)
        if message is None:
            self.errors.pop(field, None)
        else:
            self.errors[field] = message

    def _set_state(self, state: FormState) -> None:
        self.state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    def _notify(self, kind: NotificationKind, text: str) -> None:
        now = self._clock()
        notification = Notification(kind=kind, text=text, created_at=now)
        self.notifications = [n for n in self.notifications if n.is_visible(now)]
        self.notifications.append(notification)
        if self._on_notification is not None:
            self._on_notification(notification)
