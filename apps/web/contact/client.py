"""Contact API client - posts inquiries to ``/api/contact``."""

import logging
from typing import Any

import httpx
from agency_schemas import (
    ContactErrorResponse,
    ContactSuccessResponse,
    ContactValidationErrorResponse,
)
from pydantic import ValidationError as PydanticValidationError

from apps.web.contact.exceptions import (
    ContactServerError,
    ContactTransportError,
    ContactValidationError,
)

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"

# Bounded so a hung server surfaces as a failed submission
DEFAULT_TIMEOUT = 10.0


class ContactAPIClient:
    """
    HTTP client for the contact endpoint.

    One request per call, no retries. Every failure is raised as a
    ContactSubmissionError subclass.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Site origin, e.g. "https://thompson.digital".
            http_client: Optional HTTP client for dependency injection (testing).
            timeout: Request timeout in seconds when we create the client.
        """
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None
        self._url = base_url.rstrip("/") + CONTACT_PATH

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    async def submit(self, payload: dict[str, Any]) -> ContactSuccessResponse:
        """
        Submit an inquiry payload.

        Args:
            payload: Wire-format inquiry (camelCase keys).

        Returns:
            The parsed success acknowledgment.

        Raises:
            ContactTransportError: Connection failure or timeout.
            ContactValidationError: Server rejected fields (400).
            ContactServerError: Any other non-success response.
        """
        try:
            response = await self._client.post(self._url, json=payload)
        except httpx.TimeoutException as e:
            logger.warning("Contact submission timed out: %s", e)
            raise ContactTransportError("Request timed out") from e
        except httpx.HTTPError as e:
            logger.warning("Contact submission failed: %s", e)
            raise ContactTransportError(f"Request failed: {e}") from e

        body = _json_or_none(response)

        if response.status_code == 200:
            try:
                return ContactSuccessResponse.model_validate(body)
            except PydanticValidationError as e:
                raise ContactServerError(
                    "Unexpected response from server", response.status_code
                ) from e

        if response.status_code == 400:
            try:
                invalid = ContactValidationErrorResponse.model_validate(body)
            except PydanticValidationError:
                invalid = None
            if invalid is not None:
                raise ContactValidationError(
                    invalid.message, invalid.errors, response.status_code
                )

        try:
            failure = ContactErrorResponse.model_validate(body)
            message = failure.message
        except PydanticValidationError:
            message = f"Unexpected response from server (HTTP {response.status_code})"
        raise ContactServerError(message, response.status_code)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
