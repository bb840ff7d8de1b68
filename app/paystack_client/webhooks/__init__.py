"""
Webhook handling for Paystack events.

Webhooks are verified (HMAC-SHA512 over the raw body), decoded, and
dispatched synchronously to handlers registered by event type.

Usage:
    # In urls.py
    from paystack_client.webhooks.views import paystack_webhook

    urlpatterns = [
        path("webhooks/paystack/", paystack_webhook, name="paystack_webhook"),
    ]
"""

from paystack_client.webhooks.handlers import (
    WebhookDispatcher,
    dispatch_webhook,
    dispatcher,
    register_handler,
)
from paystack_client.webhooks.verifier import (
    SIGNATURE_HEADER,
    WEBHOOK_EVENT_TYPES,
    WebhookPayload,
    WebhookVerifier,
    compute_signature,
    verify_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "WEBHOOK_EVENT_TYPES",
    "WebhookDispatcher",
    "WebhookPayload",
    "WebhookVerifier",
    "compute_signature",
    "dispatch_webhook",
    "dispatcher",
    "register_handler",
    "verify_signature",
]
