"""
Pytest fixtures for webhook tests.
"""

import json

import pytest
from django.test import RequestFactory

from paystack_client.webhooks.verifier import WebhookVerifier, compute_signature

WEBHOOK_SECRET = "whsec_test"


@pytest.fixture
def rf():
    """Request factory for creating test requests."""
    return RequestFactory()


@pytest.fixture
def verifier():
    return WebhookVerifier(WEBHOOK_SECRET)


@pytest.fixture
def charge_success_body():
    """Raw body of a charge.success notification."""
    return json.dumps(
        {
            "event": "charge.success",
            "data": {
                "id": 302961,
                "reference": "qTPrJoy9Bx",
                "amount": 10050,
                "currency": "NGN",
                "status": "success",
                "customer": {"email": "customer@example.com"},
            },
        }
    ).encode("utf-8")


@pytest.fixture
def sign():
    """Sign a raw body with the test secret."""

    def _sign(body, secret=WEBHOOK_SECRET):
        return compute_signature(body, secret)

    return _sign
