"""URL patterns for the Paystack app."""

from django.urls import path

from paystack_client.webhooks.views import paystack_webhook

app_name = "paystack_client"

urlpatterns = [
    path("webhooks/paystack/", paystack_webhook, name="paystack_webhook"),
]
