"""
Pytest configuration for Django app tests.
"""

from django.test import Client as DjangoTestClient

import pytest

from apps.web.contact.tests.factories import ServiceInquiryPayloadFactory


@pytest.fixture
def api_client() -> DjangoTestClient:
    """Django test client for API and page requests."""
    return DjangoTestClient()


@pytest.fixture
def inquiry_payload() -> dict[str, str]:
    """A valid wire-format service inquiry."""
    return ServiceInquiryPayloadFactory()
