"""Subscriptions: attach customers to plans and manage their lifecycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


CREATE_FIELDS = ("customer", "plan", "authorization", "start_date")
LIST_FIELDS = (*PAGINATION_FIELDS, "customer", "plan")
TOGGLE_FIELDS = ("code", "token")


class SubscriptionResource(BaseResource):
    base_path = "subscription"

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, CREATE_FIELDS, required=("customer", "plan"))
        return self.http.post(self.build_path(), params)

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path(), self._prepare(query or {}, LIST_FIELDS))

    def fetch(self, id_or_code: str | int) -> dict[str, Any]:
        return self._fetch_one("subscription", id_or_code, str(id_or_code))

    def enable(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, TOGGLE_FIELDS, required=TOGGLE_FIELDS)
        return self.http.post(self.build_path("enable"), params)

    def disable(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, TOGGLE_FIELDS, required=TOGGLE_FIELDS)
        return self.http.post(self.build_path("disable"), params)

    def generate_update_link(self, code: str) -> dict[str, Any]:
        """Link the customer can use to update their card."""
        return self.http.get(self.build_path(f"{code}/manage/link"))

    def send_update_link(self, code: str) -> dict[str, Any]:
        """Email the card update link to the customer."""
        return self.http.post(self.build_path(f"{code}/manage/email"))
