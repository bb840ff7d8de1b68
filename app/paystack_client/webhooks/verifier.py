"""
Webhook signature verification and payload parsing.

Paystack signs every webhook with HMAC-SHA512 over the exact raw request
body, keyed with the webhook secret, and sends the hex digest in the
X-Paystack-Signature header.

States:
    received -> verified -> parsed
    received -> rejected (missing/wrong signature)
    verified -> rejected (body is not a JSON object)

The signature is always checked before the body is decoded, and the
comparison is constant-time.

Usage:
    verifier = WebhookVerifier(secret=config.webhook_secret)

    payload = verifier.parse(request.body, request.headers.get(SIGNATURE_HEADER))
    if verifier.is_event(payload, "charge.success"):
        reference = verifier.event_data(payload)["reference"]
"""

from __future__ import annotations

import hashlib
import hmac
import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from paystack_client.exceptions import (
    ConfigurationError,
    InvalidPayloadError,
    InvalidSignatureError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from paystack_client.conf import PaystackConfig


SIGNATURE_HEADER = "X-Paystack-Signature"

WEBHOOK_EVENT_TYPES = (
    "charge.success",
    "charge.dispute.create",
    "charge.dispute.remind",
    "charge.dispute.resolve",
    "customeridentification.failed",
    "customeridentification.success",
    "invoice.create",
    "invoice.payment_failed",
    "invoice.update",
    "paymentrequest.pending",
    "paymentrequest.success",
    "refund.failed",
    "refund.pending",
    "refund.processed",
    "refund.processing",
    "subscription.create",
    "subscription.disable",
    "subscription.expiring_cards",
    "subscription.not_renew",
    "transfer.failed",
    "transfer.reversed",
    "transfer.success",
)


@dataclass(frozen=True)
class WebhookPayload:
    """
    A verified, decoded webhook notification.

    Attributes:
        event: Event type ("charge.success"), None if the body had none
        data: Event data object (read-only view)
    """

    event: str | None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))


def _as_bytes(raw_body: bytes | str) -> bytes:
    return raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body


def compute_signature(raw_body: bytes | str, secret: str) -> str:
    """Hex HMAC-SHA512 of ``raw_body`` under ``secret``."""
    return hmac.new(secret.encode("utf-8"), _as_bytes(raw_body), hashlib.sha512).hexdigest()


def verify_signature(raw_body: bytes | str, signature: str | None, secret: str) -> bool:
    """
    Check a webhook signature.

    Fails closed: a missing or empty signature is never valid.
    """
    if not signature:
        return False
    expected = compute_signature(raw_body, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


class WebhookVerifier:
    """
    Verifies and parses inbound Paystack webhooks.

    Stateless apart from the secret, so one instance can serve any number
    of concurrent requests.
    """

    def __init__(self, secret: str) -> None:
        """
        Args:
            secret: Webhook HMAC secret

        Raises:
            ConfigurationError: Secret is empty
        """
        if not secret:
            raise ConfigurationError(
                "Webhook secret is not configured.",
                error_code="MISSING_WEBHOOK_SECRET",
            )
        self._secret = secret

    @classmethod
    def from_config(cls, config: PaystackConfig) -> WebhookVerifier:
        return cls(config.webhook_secret)

    def verify(self, raw_body: bytes | str, signature: str | None) -> bool:
        """True only when ``signature`` is the HMAC-SHA512 of ``raw_body``."""
        return verify_signature(raw_body, signature, self._secret)

    def parse(self, raw_body: bytes | str, signature: str | None) -> WebhookPayload:
        """
        Verify then decode a webhook body.

        Raises:
            InvalidSignatureError: Signature missing or wrong (body not decoded)
            InvalidPayloadError: Body is not a JSON object
        """
        if not self.verify(raw_body, signature):
            raise InvalidSignatureError()

        try:
            decoded = json.loads(_as_bytes(raw_body))
        except (ValueError, UnicodeDecodeError) as e:
            raise InvalidPayloadError(details={"error": str(e)}) from e

        if not isinstance(decoded, dict):
            raise InvalidPayloadError()

        data = decoded.get("data")
        return WebhookPayload(
            event=decoded.get("event"),
            data=data if isinstance(data, dict) else {},
        )

    @staticmethod
    def event_type(payload: WebhookPayload) -> str | None:
        return payload.event

    @staticmethod
    def event_data(payload: WebhookPayload) -> Mapping[str, Any]:
        return payload.data

    @staticmethod
    def is_event(payload: WebhookPayload, event_type: str) -> bool:
        return payload.event == event_type
