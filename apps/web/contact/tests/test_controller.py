"""Tests for ContactFormController - state, live validation and submission."""

import asyncio
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
import respx
from agency_schemas import (
    ContactSuccessResponse,
    FieldError,
    InquiryReceipt,
    ServiceInquiry,
    validate_inquiry,
)

from apps.web.contact.client import ContactAPIClient
from apps.web.contact.controller import (
    FAILURE_TEXT,
    SUCCESS_TEXT,
    ContactFormController,
    FieldIndicator,
    FormState,
    NotificationKind,
    SubmitOutcome,
)
from apps.web.contact.exceptions import (
    ContactServerError,
    ContactTransportError,
    ContactValidationError,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class FakeContactClient:
    """Records submissions; optionally blocks until released or fails."""

    def __init__(self, error: Exception | None = None, gated: bool = False) -> None:
        self.calls: list[dict[str, Any]] = []
        self.error = error
        self.release = asyncio.Event()
        if not gated:
            self.release.set()

    async def submit(self, payload: dict[str, Any]) -> ContactSuccessResponse:
        self.calls.append(payload)
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return ContactSuccessResponse(
            data=InquiryReceipt(inquiry_id="INQ-1704110400000", timestamp=NOW)
        )


def _fill_valid(controller: ContactFormController) -> None:
    controller.change("name", "Jo")
    controller.change("email", "jo@example.com")
    controller.change("serviceCategory", "web-development")
    controller.change("message", "I need a new website built.")


def _controller(client: FakeContactClient, **kwargs: Any) -> ContactFormController:
    return ContactFormController(client, clock=lambda: NOW, **kwargs)  # type: ignore[arg-type]


class TestLiveValidation:
    """Per-field indicators and error messages."""

    def test_fields_start_empty(self):
        controller = _controller(FakeContactClient())

        assert controller.indicator("name") is FieldIndicator.EMPTY
        assert controller.indicator("serviceCategory") is FieldIndicator.EMPTY
        assert controller.errors == {}
        assert controller.state is FormState.IDLE

    def test_change_updates_indicator(self):
        controller = _controller(FakeContactClient())

        assert controller.change("name", "J") is FieldIndicator.INVALID
        assert controller.change("name", "Jo") is FieldIndicator.VALID
        assert controller.change("email", "bad-email") is FieldIndicator.INVALID

    def test_error_is_hidden_until_blur(self):
        controller = _controller(FakeContactClient())

        controller.change("name", "J")
        assert "name" not in controller.errors

        controller.blur("name")
        assert controller.errors["name"] == "Name must be at least 2 characters"

    def test_change_after_blur_revalidates(self):
        controller = _controller(FakeContactClient())
        controller.change("email", "bad")
        controller.blur("email")

        controller.change("email", "jo@example.com")

        assert "email" not in controller.errors

    def test_blur_on_empty_required_field(self):
        controller = _controller(FakeContactClient())

        controller.blur("message")

        assert controller.errors["message"] == "Message is required"

    def test_blur_on_empty_optional_field(self):
        controller = _controller(FakeContactClient())

        controller.blur("company")

        assert "company" not in controller.errors

    def test_whitespace_is_a_value(self):
        controller = _controller(FakeContactClient())

        assert controller.change("name", "   ") is FieldIndicator.VALID
        controller.blur("name")
        assert "name" not in controller.errors

    def test_unknown_field(self):
        controller = _controller(FakeContactClient())

        with pytest.raises(KeyError):
            controller.change("fax", "555-0100")


class TestPrepopulation:
    """Default service category from the referring page."""

    def test_default_service_is_preselected(self):
        controller = _controller(FakeContactClient(), default_service="ux-design")

        assert controller.values["serviceCategory"] == "ux-design"
        assert controller.indicator("serviceCategory") is FieldIndicator.VALID
        assert "serviceCategory" not in controller.dirty

    def test_unknown_default_service_is_ignored(self):
        controller = _controller(FakeContactClient(), default_service="Knitting")

        assert controller.values["serviceCategory"] == ""

    @pytest.mark.asyncio
    async def test_reset_restores_default_service(self):
        controller = _controller(FakeContactClient(), default_service="cloud-services")
        _fill_valid(controller)

        await controller.submit()

        assert controller.values["serviceCategory"] == "cloud-services"
        assert controller.values["name"] == ""


class TestSubmit:
    """Submit lifecycle."""

    @pytest.mark.asyncio
    async def test_invalid_form_is_not_sent(self):
        client = FakeContactClient()
        controller = _controller(client)
        controller.change("name", "J")

        outcome = await controller.submit()

        assert outcome is SubmitOutcome.INVALID
        assert client.calls == []
        assert controller.state is FormState.IDLE
        assert set(controller.errors) == {"name", "email", "serviceCategory", "message"}

    @pytest.mark.asyncio
    async def test_success_resets_and_notifies(self):
        client = FakeContactClient()
        states: list[FormState] = []
        controller = _controller(client, on_state_change=states.append)
        _fill_valid(controller)
        controller.change("company", "")

        outcome = await controller.submit()

        assert outcome is SubmitOutcome.SUCCESS
        assert client.calls == [
            {
                "name": "Jo",
                "email": "jo@example.com",
                "serviceCategory": "web-development",
                "message": "I need a new website built.",
            }
        ]
        assert states == [FormState.SUBMITTING, FormState.SUCCESS, FormState.IDLE]
        assert controller.values["name"] == ""
        assert controller.dirty == set()

        notifications = controller.visible_notifications(NOW)
        assert len(notifications) == 1
        assert notifications[0].kind is NotificationKind.SUCCESS
        assert notifications[0].text == SUCCESS_TEXT

    @pytest.mark.parametrize(
        "error",
        [
            ContactTransportError("Request timed out"),
            ContactServerError("An error occurred", status_code=500),
        ],
    )
    @pytest.mark.asyncio
    async def test_failure_keeps_values_and_notifies(self, error):
        client = FakeContactClient(error=error)
        states: list[FormState] = []
        controller = _controller(client, on_state_change=states.append)
        _fill_valid(controller)

        outcome = await controller.submit()

        assert outcome is SubmitOutcome.FAILURE
        assert states == [FormState.SUBMITTING, FormState.FAILURE, FormState.IDLE]
        assert controller.values["name"] == "Jo"
        assert controller.values["message"] == "I need a new website built."
        [notification] = controller.visible_notifications(NOW)
        assert notification.kind is NotificationKind.ERROR
        assert notification.text == FAILURE_TEXT

    @pytest.mark.asyncio
    async def test_server_field_errors_are_surfaced(self):
        error = ContactValidationError(
            "Validation error",
            [FieldError(field="email", message="Invalid email address")],
        )
        controller = _controller(FakeContactClient(error=error))
        _fill_valid(controller)

        await controller.submit()

        assert controller.errors == {"email": "Invalid email address"}

    @pytest.mark.asyncio
    async def test_agrees_with_endpoint_on_whitespace_values(self):
        client = FakeContactClient()
        controller = _controller(client)
        _fill_valid(controller)
        controller.change("name", "   ")
        controller.change("company", "  ")
        payload = controller.payload()

        assert isinstance(validate_inquiry(payload), ServiceInquiry)
        assert await controller.submit() is SubmitOutcome.SUCCESS
        assert client.calls[0]["name"] == "   "
        assert client.calls[0]["company"] == "  "

    @pytest.mark.asyncio
    async def test_double_submit_makes_one_call(self):
        client = FakeContactClient(gated=True)
        controller = _controller(client)
        _fill_valid(controller)

        first = asyncio.create_task(controller.submit())
        await asyncio.sleep(0)

        assert controller.state is FormState.SUBMITTING
        assert controller.submit_enabled is False
        assert await controller.submit() is SubmitOutcome.BLOCKED

        client.release.set()
        assert await first is SubmitOutcome.SUCCESS
        assert len(client.calls) == 1
        assert controller.submit_enabled is True

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_to_idle(self):
        controller = _controller(FakeContactClient(error=RuntimeError("bug")))
        _fill_valid(controller)

        with pytest.raises(RuntimeError):
            await controller.submit()

        assert controller.state is FormState.IDLE


class TestNotifications:
    """Time-limited notifications."""

    @pytest.mark.asyncio
    async def test_notification_expires_after_display_and_fade(self):
        received = []
        controller = _controller(FakeContactClient(), on_notification=received.append)
        _fill_valid(controller)
        await controller.submit()

        [notification] = received
        assert notification.is_fading(NOW + timedelta(seconds=5, milliseconds=100))
        assert controller.visible_notifications(NOW + timedelta(seconds=4))
        assert controller.visible_notifications(NOW + timedelta(seconds=5, milliseconds=299))
        assert controller.visible_notifications(NOW + timedelta(seconds=5, milliseconds=300)) == []
        assert controller.notifications == []

    @pytest.mark.asyncio
    async def test_expired_notifications_are_dropped_on_new_ones(self):
        now = [NOW]
        controller = ContactFormController(FakeContactClient(), clock=lambda: now[0])  # type: ignore[arg-type]

        for _ in range(3):
            _fill_valid(controller)
            await controller.submit()
            now[0] += timedelta(seconds=6)

        assert len(controller.notifications) == 1
        assert controller.notifications[0].created_at == NOW + timedelta(seconds=12)


class TestWithHttpClient:
    """Controller wired to the real HTTP client."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure(self):
        respx.post("https://thompson.test/api/contact").mock(
            side_effect=httpx.ConnectError("refused")
        )
        client = ContactAPIClient(base_url="https://thompson.test")
        controller = ContactFormController(client, clock=lambda: NOW)
        _fill_valid(controller)

        outcome = await controller.submit()

        assert outcome is SubmitOutcome.FAILURE
        assert controller.values["email"] == "jo@example.com"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self):
        route = respx.post("https://thompson.test/api/contact").mock(
            return_value=httpx.Response(
                200,
                json={
                    "success": True,
                    "message": "Form submitted successfully",
                    "data": {"inquiryId": "INQ-1", "timestamp": "2024-01-01T12:00:00Z"},
                },
            )
        )
        client = ContactAPIClient(base_url="https://thompson.test")
        controller = ContactFormController(client, default_service="ux-design")
        _fill_valid(controller)

        outcome = await controller.submit()

        assert outcome is SubmitOutcome.SUCCESS
        assert route.call_count == 1
        await client.close()
