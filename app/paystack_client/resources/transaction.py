"""
Transactions: checkout, verification and charging saved cards.

Usage:
    envelope = paystack.transactions.initialize({
        "email": "customer@example.com",
        "amount": "100.50",  # major units; sent as 10050
    })
    authorization_url = envelope["data"]["authorization_url"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


INITIALIZE_FIELDS = (
    "email",
    "amount",
    "currency",
    "reference",
    "callback_url",
    "plan",
    "invoice_limit",
    "metadata",
    "channels",
    "split_code",
    "subaccount",
    "transaction_charge",
    "bearer",
)

LIST_FIELDS = (
    *PAGINATION_FIELDS,
    "customer",
    "status",
    "currency",
    "amount",
    "settled",
    "settlement",
    "payment_page",
)

CHARGE_AUTHORIZATION_FIELDS = (
    "email",
    "amount",
    "authorization_code",
    "reference",
    "currency",
    "metadata",
    "channels",
    "subaccount",
    "transaction_charge",
    "bearer",
    "queue",
)

PARTIAL_DEBIT_FIELDS = (
    "authorization_code",
    "currency",
    "amount",
    "email",
    "reference",
    "at_least",
    "metadata",
)


class TransactionResource(BaseResource):
    base_path = "transaction"

    def initialize(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Start a checkout and obtain an authorization URL.

        ``amount`` is in major units and converted before sending;
        ``callback_url`` falls back to the configured default.
        """
        data = dict(data)
        if not data.get("callback_url") and self.config.callback_url:
            data["callback_url"] = self.config.callback_url
        params = self._prepare(
            data,
            INITIALIZE_FIELDS,
            required=("email", "amount"),
            amount_fields=("amount",),
        )
        return self.http.post(self.build_path("initialize"), params)

    def verify(self, reference: str) -> dict[str, Any]:
        return self._fetch_one("transaction", reference, f"verify/{reference}")

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, LIST_FIELDS)
        return self.http.get(self.build_path(), params)

    def fetch(self, transaction_id: str | int) -> dict[str, Any]:
        return self._fetch_one("transaction", transaction_id, str(transaction_id))

    def charge_authorization(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Charge a previously saved authorization (recurring billing)."""
        params = self._prepare(
            data,
            CHARGE_AUTHORIZATION_FIELDS,
            required=("email", "amount", "authorization_code"),
            amount_fields=("amount",),
        )
        return self.http.post(self.build_path("charge_authorization"), params)

    def timeline(self, id_or_reference: str | int) -> dict[str, Any]:
        return self._fetch_one("transaction", id_or_reference, f"timeline/{id_or_reference}")

    def totals(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path("totals"), self._prepare(query or {}, PAGINATION_FIELDS))

    def export(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, LIST_FIELDS)
        return self.http.get(self.build_path("export"), params)

    def partial_debit(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Debit as much of ``amount`` as the authorization allows."""
        params = self._prepare(
            data,
            PARTIAL_DEBIT_FIELDS,
            required=("authorization_code", "currency", "amount", "email"),
            amount_fields=("amount", "at_least"),
        )
        return self.http.post(self.build_path("partial_debit"), params)
