"""
Transfers: pay out from the balance to transfer recipients.

OTP-protected transfers come back with status "otp"; complete them with
finalize().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


INITIATE_FIELDS = ("source", "amount", "recipient", "reason", "currency", "reference", "metadata")
BULK_FIELDS = ("source", "currency", "transfers")
LIST_FIELDS = (*PAGINATION_FIELDS, "customer")
FINALIZE_FIELDS = ("transfer_code", "otp")
RESEND_OTP_FIELDS = ("transfer_code", "reason")


class TransferResource(BaseResource):
    base_path = "transfer"

    def initiate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            INITIATE_FIELDS,
            required=("source", "amount", "recipient"),
            amount_fields=("amount",),
        )
        return self.http.post(self.build_path(), params)

    def bulk_initiate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Initiate several transfers; each entry's ``amount`` is converted."""
        params = self._prepare(data, BULK_FIELDS, required=("source", "transfers"))
        currency = params.get("currency")
        params["transfers"] = [
            {**transfer, "amount": self._to_minor(transfer["amount"], transfer.get("currency") or currency)}
            if transfer.get("amount") is not None
            else dict(transfer)
            for transfer in params["transfers"]
        ]
        return self.http.post(self.build_path("bulk"), params)

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path(), self._prepare(query or {}, LIST_FIELDS))

    def fetch(self, id_or_code: str | int) -> dict[str, Any]:
        return self._fetch_one("transfer", id_or_code, str(id_or_code))

    def finalize(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, FINALIZE_FIELDS, required=FINALIZE_FIELDS)
        return self.http.post(self.build_path("finalize_transfer"), params)

    def verify(self, reference: str) -> dict[str, Any]:
        return self._fetch_one("transfer", reference, f"verify/{reference}")

    def resend_otp(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, RESEND_OTP_FIELDS, required=RESEND_OTP_FIELDS)
        return self.http.post(self.build_path("resend_otp"), params)

    def disable_otp(self) -> dict[str, Any]:
        """Request OTP removal; Paystack sends an OTP to confirm."""
        return self.http.post(self.build_path("disable_otp"))

    def finalize_disable_otp(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, ("otp",), required=("otp",))
        return self.http.post(self.build_path("disable_otp_finalize"), params)

    def enable_otp(self) -> dict[str, Any]:
        return self.http.post(self.build_path("enable_otp"))
