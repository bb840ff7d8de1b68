"""
Configuration for the Paystack client.

PaystackConfig is an explicit, immutable configuration object that is
built once and passed into the HTTP client, the response cache and the
webhook verifier. Nothing inside the library reads Django settings on
its own; ``PaystackConfig.from_settings()`` is the single bridge.

Configuration (via settings.PAYSTACK, populated from PAYSTACK_* env vars):
- SECRET_KEY: API secret key (required)
- PUBLIC_KEY: API public key
- BASE_URL: API base URL (default: https://api.paystack.co)
- TIMEOUT: Total request timeout in seconds (default: 30)
- CONNECT_TIMEOUT: Connect timeout in seconds (default: 10)
- VERIFY_SSL: Verify TLS certificates (default: True)
- PRODUCTION: Production mode, forbids VERIFY_SSL=False (default: False)
- LOGGING_ENABLED / LOGGING_CHANNEL: Request/response logging
- CACHE_ENABLED / CACHE_TTL / CACHE_PREFIX: Response cache
- WEBHOOK_SECRET: HMAC secret for webhook signatures
- CURRENCY: Default currency (default: NGN)

Usage:
    from paystack_client.conf import PaystackConfig

    config = PaystackConfig.from_settings()
    config = PaystackConfig(secret_key="sk_test_xxx", cache_enabled=False)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from typing import Any


DEFAULT_BASE_URL = "https://api.paystack.co"


@dataclass(frozen=True)
class PaystackConfig:
    """
    Immutable Paystack client configuration.

    Attributes:
        secret_key: Bearer credential for every API call
        public_key: Publishable key (not used for server calls)
        base_url: API root, without trailing slash
        timeout: Total timeout per request in seconds
        connect_timeout: Connection establishment timeout in seconds
        verify_ssl: Whether TLS certificates are verified
        production: Production-like mode flag; TLS verification is mandatory
        logging_enabled: Log requests and responses (redacted)
        logging_channel: Logger name used for request/response logging
        cache_enabled: Global switch for the response cache
        cache_ttl: Default cache TTL in seconds
        cache_prefix: Namespace prepended to every cache key
        webhook_secret: HMAC-SHA512 secret for inbound webhooks
        currency: Default ISO 4217 currency code
        merchant_email: Merchant contact email
        callback_url: Default redirect URL after checkout
    """

    secret_key: str = ""
    public_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30
    connect_timeout: float = 10
    verify_ssl: bool = True
    production: bool = False
    logging_enabled: bool = False
    logging_channel: str = "paystack"
    cache_enabled: bool = True
    cache_ttl: int = 3600
    cache_prefix: str = "paystack"
    webhook_secret: str = ""
    currency: str = "NGN"
    merchant_email: str = ""
    callback_url: str = ""

    def validate(self) -> PaystackConfig:
        """
        Check the settings the HTTP client cannot work without.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: Missing secret key or base URL, or TLS
                verification disabled in production mode
        """
        if not self.secret_key:
            raise ConfigurationError(
                "Paystack secret key is not set. Please set PAYSTACK_SECRET_KEY.",
                error_code="MISSING_SECRET_KEY",
            )
        if not self.base_url:
            raise ConfigurationError(
                "Paystack base URL is not set.",
                error_code="MISSING_BASE_URL",
            )
        if self.production and not self.verify_ssl:
            raise ConfigurationError(
                "SSL verification must be enabled in production.",
                error_code="INSECURE_TLS_CONFIGURATION",
            )
        return self

    def replace(self, **changes: Any) -> PaystackConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: Any = None, **overrides: Any) -> PaystackConfig:
        """
        Build a config from the ``PAYSTACK`` dict in Django settings.

        Keys are the upper-case field names. Absent keys keep the field
        defaults; ``overrides`` win over settings.

        Args:
            settings: Settings object (defaults to django.conf.settings)
            **overrides: Field values that take precedence

        Returns:
            PaystackConfig (not validated; consumers validate what they need)
        """
        if settings is None:
            from django.conf import settings

        raw = getattr(settings, "PAYSTACK", {}) or {}
        values: dict[str, Any] = {}
        for config_field in dataclasses.fields(cls):
            key = config_field.name.upper()
            if key in raw and raw[key] is not None:
                values[config_field.name] = raw[key]
        values.update(overrides)

        if "base_url" in values and values["base_url"]:
            values["base_url"] = str(values["base_url"]).rstrip("/")
        return cls(**values)
