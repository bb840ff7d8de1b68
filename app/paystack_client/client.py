"""
Entry point bundling the HTTP client, cache and resource façades.

One Paystack instance owns one HTTP session and one response cache; the
façades share both. Construct it once and reuse it.

Usage:
    from paystack_client.client import Paystack

    paystack = Paystack()  # config from settings.PAYSTACK
    envelope = paystack.transactions.initialize({
        "email": "customer@example.com",
        "amount": 5000,
    })

    paystack = Paystack(PaystackConfig(secret_key="sk_test_xxx", cache_enabled=False))
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING

from paystack_client.cache import ResponseCache
from paystack_client.conf import PaystackConfig
from paystack_client.http_client import PaystackHTTPClient
from paystack_client.resources import (
    CustomerResource,
    DisputeResource,
    MiscellaneousResource,
    PlanResource,
    RefundResource,
    SubscriptionResource,
    TransactionResource,
    TransferRecipientResource,
    TransferResource,
    VerificationResource,
)
from paystack_client.webhooks.verifier import WebhookVerifier

if TYPE_CHECKING:
    from paystack_client.resources.base import BaseResource

logger = logging.getLogger(__name__)


class Paystack:
    """
    Paystack API client.

    Attributes:
        config: Validated PaystackConfig
        http: Shared PaystackHTTPClient
        cache: Shared ResponseCache
    """

    def __init__(
        self,
        config: PaystackConfig | None = None,
        http: PaystackHTTPClient | None = None,
        cache: ResponseCache | None = None,
    ) -> None:
        self.config = (config or PaystackConfig.from_settings()).validate()
        self.http = http or PaystackHTTPClient(self.config)
        self.cache = cache or ResponseCache.from_config(self.config)
        logger.debug(
            "Paystack client initialized",
            extra={"base_url": self.config.base_url, "cache_enabled": self.cache.enabled},
        )

    def _resource(self, resource_class: type[BaseResource]) -> BaseResource:
        return resource_class(self.http, self.cache, self.config)

    @cached_property
    def transactions(self) -> TransactionResource:
        return self._resource(TransactionResource)

    @cached_property
    def customers(self) -> CustomerResource:
        return self._resource(CustomerResource)

    @cached_property
    def plans(self) -> PlanResource:
        return self._resource(PlanResource)

    @cached_property
    def subscriptions(self) -> SubscriptionResource:
        return self._resource(SubscriptionResource)

    @cached_property
    def transfers(self) -> TransferResource:
        return self._resource(TransferResource)

    @cached_property
    def transfer_recipients(self) -> TransferRecipientResource:
        return self._resource(TransferRecipientResource)

    @cached_property
    def refunds(self) -> RefundResource:
        return self._resource(RefundResource)

    @cached_property
    def disputes(self) -> DisputeResource:
        return self._resource(DisputeResource)

    @cached_property
    def verification(self) -> VerificationResource:
        return self._resource(VerificationResource)

    @cached_property
    def miscellaneous(self) -> MiscellaneousResource:
        return self._resource(MiscellaneousResource)

    @cached_property
    def webhooks(self) -> WebhookVerifier:
        """Verifier for inbound webhooks; raises ConfigurationError without a secret."""
        return WebhookVerifier.from_config(self.config)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Paystack:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
