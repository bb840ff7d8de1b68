"""Transfer recipients: bank accounts and mobile wallets to pay out to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.resources.base import PAGINATION_FIELDS, BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


CREATE_FIELDS = (
    "type",
    "name",
    "account_number",
    "bank_code",
    "description",
    "currency",
    "authorization_code",
    "metadata",
)
UPDATE_FIELDS = ("name", "email", "metadata")


class TransferRecipientResource(BaseResource):
    base_path = "transferrecipient"

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            CREATE_FIELDS,
            required=("type", "name", "account_number", "bank_code"),
        )
        return self.http.post(self.build_path(), params)

    def bulk_create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, ("batch",), required=("batch",))
        return self.http.post(self.build_path("bulk"), params)

    def list(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.http.get(self.build_path(), self._prepare(query or {}, PAGINATION_FIELDS))

    def fetch(self, id_or_code: str | int) -> dict[str, Any]:
        return self._fetch_one("transferrecipient", id_or_code, str(id_or_code))

    def update(self, id_or_code: str | int, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(data, UPDATE_FIELDS)
        return self.http.put(self.build_path(str(id_or_code)), params)

    def delete(self, id_or_code: str | int) -> dict[str, Any]:
        return self.http.delete(self.build_path(str(id_or_code)))
