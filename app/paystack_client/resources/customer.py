"""
Customers: create, look up and manage customer records.

Lookups are cached; create and update invalidate every cached customer
lookup and list. A customer can be fetched by email or by code, so
lookups live in their own key family instead of one key per customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


CREATE_FIELDS = ("email", "first_name", "last_name", "phone", "metadata")
UPDATE_FIELDS = ("first_name", "last_name", "phone", "metadata")
VALIDATE_FIELDS = (
    "first_name",
    "last_name",
    "type",
    "value",
    "country",
    "bvn",
    "bank_code",
    "account_number",
    "middle_name",
)
RISK_ACTION_FIELDS = ("customer", "risk_action")

LIST_FAMILY = "customers"
LOOKUP_FAMILY = "customer"


class CustomerResource(BaseResource):
    base_path = "customer"

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, CREATE_FIELDS, required=("email",))
        envelope = self.http.post(self.build_path(), params)
        self._forget_family(LIST_FAMILY)
        return envelope

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, PAGINATION_FIELDS)
        return self._remember(
            self._list_key(LIST_FAMILY, params),
            lambda: self.http.get(self.build_path(), params),
        )

    def fetch(self, email_or_code: str) -> dict[str, Any]:
        return self._remember(
            self.cache.family_key(LOOKUP_FAMILY, email_or_code),
            lambda: self._fetch_one("customer", email_or_code, email_or_code),
        )

    def update(self, customer_code: str, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, UPDATE_FIELDS)
        envelope = self.http.put(self.build_path(customer_code), params)
        self._forget_family(LOOKUP_FAMILY)
        self._forget_family(LIST_FAMILY)
        return envelope

    def validate_identity(self, customer_code: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """Submit identity details (BVN or bank account) for a customer."""
        params = self._prepare(
            data,
            VALIDATE_FIELDS,
            required=("first_name", "last_name", "type", "value", "country"),
        )
        return self.http.post(self.build_path(f"{customer_code}/identification"), params)

    def set_risk_action(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Whitelist or blacklist a customer."""
        params = self._prepare(data, RISK_ACTION_FIELDS, required=RISK_ACTION_FIELDS)
        return self.http.post(self.build_path("set_risk_action"), params)

    def deactivate_authorization(self, authorization_code: str) -> dict[str, Any]:
        return self.http.post(
            self.build_path("deactivate_authorization"),
            {"authorization_code": authorization_code},
        )
