"""
URL configuration for the Django application.

URL Structure:
    /api/v1/payments/              - Payment endpoints
        webhooks/paystack/         - Paystack webhook endpoint (POST)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import include, path

# =============================================================================
# API v1 Routes
# =============================================================================
api_v1_patterns = [
    # Payments
    path("payments/", include("paystack_client.urls")),
]

urlpatterns = [
    path("api/v1/", include(api_v1_patterns)),
]
