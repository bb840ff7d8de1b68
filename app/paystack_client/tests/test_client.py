"""
Tests for the Paystack entry point.

Tests cover:
- Construction from explicit config and from Django settings
- Façade wiring (shared HTTP client and cache)
- Webhook verifier access
"""

import pytest
from django.test import override_settings

from core.exceptions import ConfigurationError
from paystack_client.cache import ResponseCache
from paystack_client.client import Paystack
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
from paystack_client.webhooks import WebhookVerifier


class TestConstruction:
    """Tests for building the client."""

    def test_explicit_config(self, paystack_config):
        paystack = Paystack(paystack_config)

        assert paystack.config is paystack_config
        assert isinstance(paystack.http, PaystackHTTPClient)
        assert isinstance(paystack.cache, ResponseCache)
        assert paystack.cache.enabled is True

    @override_settings(PAYSTACK={"SECRET_KEY": "sk_test_from_settings", "CACHE_ENABLED": False})
    def test_config_from_settings(self):
        paystack = Paystack()

        assert paystack.config.secret_key == "sk_test_from_settings"
        assert paystack.cache.enabled is False

    @override_settings(PAYSTACK={})
    def test_missing_secret_key(self):
        with pytest.raises(ConfigurationError):
            Paystack()

    def test_injected_collaborators(self, paystack_config, http_client, response_cache):
        paystack = Paystack(paystack_config, http=http_client, cache=response_cache)

        assert paystack.http is http_client
        assert paystack.cache is response_cache


class TestFacades:
    """Tests for façade properties."""

    @pytest.mark.parametrize(
        "attribute,resource_class",
        [
            ("transactions", TransactionResource),
            ("customers", CustomerResource),
            ("plans", PlanResource),
            ("subscriptions", SubscriptionResource),
            ("transfers", TransferResource),
            ("transfer_recipients", TransferRecipientResource),
            ("refunds", RefundResource),
            ("disputes", DisputeResource),
            ("verification", VerificationResource),
            ("miscellaneous", MiscellaneousResource),
        ],
    )
    def test_facade_types(self, paystack_config, attribute, resource_class):
        paystack = Paystack(paystack_config)

        facade = getattr(paystack, attribute)

        assert isinstance(facade, resource_class)
        assert facade.http is paystack.http
        assert facade.cache is paystack.cache
        assert getattr(paystack, attribute) is facade

    def test_webhooks(self, paystack_config):
        assert isinstance(Paystack(paystack_config).webhooks, WebhookVerifier)

    def test_webhooks_without_secret(self, paystack_config):
        paystack = Paystack(paystack_config.replace(webhook_secret=""))

        with pytest.raises(ConfigurationError):
            paystack.webhooks

    def test_context_manager_closes_http(self, paystack_config, http_client, session):
        calls = []
        session.close = lambda: calls.append(1)

        with Paystack(paystack_config, http=http_client):
            pass

        assert calls == [1]
