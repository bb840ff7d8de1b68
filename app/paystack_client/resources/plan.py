"""Subscription plans. Lookups are cached; mutations invalidate them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.params import require_choice
from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


PLAN_FIELDS = (
    "name",
    "amount",
    "interval",
    "description",
    "currency",
    "invoice_limit",
    "send_invoices",
    "send_sms",
)
LIST_FIELDS = (*PAGINATION_FIELDS, "interval", "amount")

# Paystack billing intervals
INTERVALS = ("hourly", "daily", "weekly", "monthly", "quarterly", "biannually", "annually")

LIST_FAMILY = "plans"


class PlanResource(BaseResource):
    base_path = "plan"

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            PLAN_FIELDS,
            required=("name", "amount", "interval"),
            amount_fields=("amount",),
        )
        require_choice(params, "interval", INTERVALS)
        envelope = self.http.post(self.build_path(), params)
        self._forget_family(LIST_FAMILY)
        return envelope

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, LIST_FIELDS)
        return self._remember(
            self._list_key(LIST_FAMILY, params),
            lambda: self.http.get(self.build_path(), params),
        )

    def fetch(self, id_or_code: str | int) -> dict[str, Any]:
        return self._remember(
            f"plan:{id_or_code}",
            lambda: self._fetch_one("plan", id_or_code, str(id_or_code)),
        )

    def update(self, id_or_code: str | int, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, PLAN_FIELDS, amount_fields=("amount",))
        require_choice(params, "interval", INTERVALS)
        envelope = self.http.put(self.build_path(str(id_or_code)), params)
        self._forget(f"plan:{id_or_code}")
        self._forget_family(LIST_FAMILY)
        return envelope
