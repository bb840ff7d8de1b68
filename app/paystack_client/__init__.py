"""
Paystack integration app.

This app handles:
- Transaction checkout, verification and recurring charges
- Customers, plans, subscriptions, transfers, refunds and disputes
- Bank, card BIN and BVN verification lookups
- Amount conversion to and from minor units (kobo, cents, pesewas)
- Webhook signature verification and event dispatch

Usage:
    from paystack_client.client import Paystack

    paystack = Paystack()
    envelope = paystack.transactions.initialize({"email": "a@b.co", "amount": "100.50"})

    # Handle webhook events
    from paystack_client.webhooks import register_handler

    @register_handler("charge.success")
    def on_charge_success(payload):
        ...
"""
