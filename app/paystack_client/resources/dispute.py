"""
Disputes: chargebacks raised by customers' banks.

A dispute is answered with evidence (add_evidence, upload_url) and closed
with resolve(). Refund amounts are in major units.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


LIST_FIELDS = (*PAGINATION_FIELDS, "transaction", "status")
UPDATE_FIELDS = ("refund_amount", "uploaded_filename")
EVIDENCE_FIELDS = (
    "customer_email",
    "customer_name",
    "customer_phone",
    "service_details",
    "delivery_address",
    "delivery_date",
)
RESOLVE_FIELDS = ("resolution", "message", "refund_amount", "uploaded_filename", "evidence")


class DisputeResource(BaseResource):
    base_path = "dispute"

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path(), self._prepare(query or {}, LIST_FIELDS))

    def fetch(self, dispute_id: str | int) -> dict[str, Any]:
        return self._fetch_one("dispute", dispute_id, str(dispute_id))

    def list_transaction_disputes(self, transaction_id: str | int) -> dict[str, Any]:
        return self._fetch_one("transaction", transaction_id, f"transaction/{transaction_id}")

    def update(self, dispute_id: str | int, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            UPDATE_FIELDS,
            required=("refund_amount",),
            amount_fields=("refund_amount",),
        )
        return self.http.put(self.build_path(str(dispute_id)), params)

    def add_evidence(self, dispute_id: str | int, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            EVIDENCE_FIELDS,
            required=("customer_email", "customer_name", "customer_phone", "service_details"),
        )
        return self.http.post(self.build_path(f"{dispute_id}/evidence"), params)

    def upload_url(self, dispute_id: str | int, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Signed URL for uploading a dispute evidence file."""
        params = self._prepare(query or {}, ("upload_filename",))
        return self.http.get(self.build_path(f"{dispute_id}/upload_url"), params)

    def resolve(self, dispute_id: str | int, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            RESOLVE_FIELDS,
            required=("resolution", "message", "uploaded_filename"),
            amount_fields=("refund_amount",),
        )
        return self.http.put(self.build_path(f"{dispute_id}/resolve"), params)

    def export(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path("export"), self._prepare(query or {}, LIST_FIELDS))
