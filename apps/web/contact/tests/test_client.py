"""Tests for ContactAPIClient - mocked HTTP responses."""

import httpx
import pytest
import respx

from apps.web.contact.client import DEFAULT_TIMEOUT, ContactAPIClient
from apps.web.contact.exceptions import (
    ContactServerError,
    ContactSubmissionError,
    ContactTransportError,
    ContactValidationError,
)
from apps.web.contact.tests.factories import ServiceInquiryPayloadFactory

BASE_URL = "https://thompson.test"
CONTACT_URL = f"{BASE_URL}/api/contact"


@pytest.fixture
def client() -> ContactAPIClient:
    return ContactAPIClient(base_url=BASE_URL)


class TestSubmit:
    """Tests for ContactAPIClient.submit."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, client: ContactAPIClient):
        route = respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "success": True,
                    "message": "Form submitted successfully",
                    "data": {
                        "inquiryId": "INQ-1704067200000",
                        "timestamp": "2024-01-01T00:00:00Z",
                    },
                },
            )
        )
        payload = ServiceInquiryPayloadFactory()

        ack = await client.submit(payload)

        assert route.called
        assert ack.success is True
        assert ack.data.inquiry_id == "INQ-1704067200000"
        assert route.calls.last.request.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_validation_error(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(
                400,
                json={
                    "success": False,
                    "message": "Validation error",
                    "errors": [
                        {"field": "email", "message": "Invalid email address"},
                    ],
                },
            )
        )

        with pytest.raises(ContactValidationError) as exc_info:
            await client.submit(ServiceInquiryPayloadFactory())

        assert exc_info.value.status_code == 400
        assert exc_info.value.errors[0].field == "email"

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(
                500,
                json={
                    "success": False,
                    "message": "An error occurred while processing your request",
                    "error": "Unexpected server error",
                },
            )
        )

        with pytest.raises(ContactServerError) as exc_info:
            await client.submit(ServiceInquiryPayloadFactory())

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_error_page(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
        )

        with pytest.raises(ContactServerError) as exc_info:
            await client.submit(ServiceInquiryPayloadFactory())

        assert "502" in exc_info.value.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_success_body(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(
            return_value=httpx.Response(200, json={"ok": True})
        )

        with pytest.raises(ContactServerError):
            await client.submit(ServiceInquiryPayloadFactory())

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_failure(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ContactTransportError):
            await client.submit(ServiceInquiryPayloadFactory())

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(ContactTransportError) as exc_info:
            await client.submit(ServiceInquiryPayloadFactory())

        assert exc_info.value.message == "Request timed out"

    @pytest.mark.asyncio
    @respx.mock
    async def test_errors_share_a_base_class(self, client: ContactAPIClient):
        respx.post(CONTACT_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ContactSubmissionError):
            await client.submit(ServiceInquiryPayloadFactory())


@pytest.mark.asyncio
async def test_default_timeout_is_bounded():
    client = ContactAPIClient(base_url=BASE_URL)

    assert DEFAULT_TIMEOUT == 10.0
    assert client._client.timeout.read == DEFAULT_TIMEOUT

    await client.close()


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    http_client = httpx.AsyncClient()
    client = ContactAPIClient(base_url=BASE_URL, http_client=http_client)

    await client.close()

    assert not http_client.is_closed
    await http_client.aclose()
