"""
Paystack client app configuration.

This app provides the Paystack API client library:
- HTTP request pipeline with typed error classification
- Amount normalization and parameter filtering
- Cached resource façades (transactions, customers, plans, ...)
- Webhook signature verification and event dispatch
"""

from django.apps import AppConfig


class PaystackClientConfig(AppConfig):
    """Configuration for the paystack_client application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "paystack_client"
    verbose_name = "Paystack Client"
