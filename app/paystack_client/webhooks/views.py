"""
Webhook endpoint view for Paystack.

The view:
1. Verifies the X-Paystack-Signature header against the raw body
2. Decodes the JSON payload
3. Dispatches the event through the handler registry
4. Answers 200 on success so Paystack stops redelivering

Usage:
    # In urls.py
    from paystack_client.webhooks.views import paystack_webhook

    urlpatterns = [
        path("webhooks/paystack/", paystack_webhook, name="paystack_webhook"),
    ]
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from paystack_client.conf import PaystackConfig
from paystack_client.exceptions import ConfigurationError, WebhookError
from paystack_client.webhooks.handlers import dispatcher
from paystack_client.webhooks.verifier import SIGNATURE_HEADER, WebhookVerifier

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def paystack_webhook(request: HttpRequest) -> JsonResponse:
    """
    Receive, verify and dispatch a Paystack webhook.

    Security:
    - Signature is checked before the body is decoded
    - CSRF exemption required for external webhooks
    - Only POST requests accepted

    Idempotency:
    - Paystack redelivers on any non-200 answer; handlers must tolerate
      seeing the same event twice

    Returns:
        JsonResponse with status:
        - 200: Event handled (or ignored as unknown)
        - 400: Invalid signature, invalid payload, or handler failure
        - 500: Webhook secret not configured
    """
    try:
        verifier = WebhookVerifier.from_config(PaystackConfig.from_settings())
    except ConfigurationError as e:
        logger.error(f"Paystack webhook received but not configured: {e.message}")
        return JsonResponse({"status": "error", "error": e.message}, status=500)

    try:
        payload = verifier.parse(request.body, request.headers.get(SIGNATURE_HEADER))
    except WebhookError as e:
        logger.warning(
            "Webhook processing failed",
            extra={"error": e.message, "error_code": e.error_code},
        )
        return JsonResponse({"status": "error", "error": e.message}, status=400)

    logger.info(
        f"Paystack webhook received: {payload.event}",
        extra={"event_type": payload.event, "reference": payload.data.get("reference")},
    )

    result = dispatcher.dispatch(payload)
    if not result.success:
        logger.warning(
            f"Webhook handler failed for {payload.event}: {result.error}",
            extra={"event_type": payload.event, "error_code": result.error_code},
        )
        return JsonResponse({"status": "error", **result.to_response()}, status=400)

    return JsonResponse({"status": "success"}, status=200)
