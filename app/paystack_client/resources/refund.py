"""Refunds: full or partial, against a settled transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


CREATE_FIELDS = ("transaction", "amount", "currency", "customer_note", "merchant_note", "metadata")
LIST_FIELDS = (*PAGINATION_FIELDS, "reference", "currency", "transaction")


class RefundResource(BaseResource):
    base_path = "refund"

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Refund a transaction; omit ``amount`` for a full refund."""
        params = self._prepare(
            data,
            CREATE_FIELDS,
            required=("transaction",),
            amount_fields=("amount",),
        )
        return self.http.post(self.build_path(), params)

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path(), self._prepare(query or {}, LIST_FIELDS))

    def fetch(self, refund_id: str | int) -> dict[str, Any]:
        return self._fetch_one("refund", refund_id, str(refund_id))
