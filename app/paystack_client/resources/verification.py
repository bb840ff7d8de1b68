"""
Verification: bank accounts, card BINs, BVNs and address data.

Card BIN lookups and address state lists change rarely and are cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.cache import query_fingerprint
from paystack_client.resources.base import BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


RESOLVE_ACCOUNT_FIELDS = ("account_number", "bank_code")
VALIDATE_ACCOUNT_FIELDS = (
    "account_name",
    "account_number",
    "account_type",
    "bank_code",
    "country_code",
    "document_type",
    "document_number",
)
BVN_MATCH_FIELDS = ("bvn", "account_number", "bank_code", "first_name", "last_name")
ADDRESS_STATE_FIELDS = ("type", "country", "currency")

CARD_BIN_TTL = 86400
ADDRESS_STATES_TTL = 3600


class VerificationResource(BaseResource):
    base_path = "bank"

    def resolve_account_number(self, query: Mapping[str, Any]) -> dict[str, Any]:
        """Look up the account name behind an account number and bank code."""
        params = self._prepare(query, RESOLVE_ACCOUNT_FIELDS, required=RESOLVE_ACCOUNT_FIELDS)
        return self.http.get(self.build_path("resolve"), params)

    def validate_account(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            VALIDATE_ACCOUNT_FIELDS,
            required=VALIDATE_ACCOUNT_FIELDS[:-1],
        )
        return self.http.post(self.build_path("validate"), params)

    def resolve_card_bin(self, bin_: str) -> dict[str, Any]:
        """Card brand, issuer and country for the first six digits of a card."""
        return self._remember(
            f"card_bin:{bin_}",
            lambda: self.http.get(f"/decision/bin/{bin_}"),
            CARD_BIN_TTL,
        )

    def match_bvn(self, data: Mapping[str, Any]) -> dict[str, Any]:
        params = self._prepare(
            data,
            BVN_MATCH_FIELDS,
            required=("bvn", "account_number", "bank_code"),
        )
        return self.http.post("/bvn/match", params)

    def address_states(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, ADDRESS_STATE_FIELDS)
        return self._remember(
            f"address_states:{query_fingerprint(params)}",
            lambda: self.http.get("/address_verification/states", params),
            ADDRESS_STATES_TTL,
        )
