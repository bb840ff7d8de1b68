"""Reference data: banks, countries and states. Cached for a day."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.cache import query_fingerprint
from paystack_client.resources.base import BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


BANK_FIELDS = ("country", "use_cursor", "perPage", "next", "previous", "gateway", "type", "currency")

REFERENCE_DATA_TTL = 86400


class MiscellaneousResource(BaseResource):
    def list_banks(self, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        params = self._prepare(query or {}, BANK_FIELDS)
        return self._remember(
            f"banks:{query_fingerprint(params)}",
            lambda: self.http.get("/bank", params),
            REFERENCE_DATA_TTL,
        )

    def list_countries(self) -> dict[str, Any]:
        return self._remember(
            "countries",
            lambda: self.http.get("/country"),
            REFERENCE_DATA_TTL,
        )

    def list_states(self, country: str) -> dict[str, Any]:
        """States of ``country`` (ISO code) for address verification."""
        return self._remember(
            f"states:{country}",
            lambda: self.http.get("/address_verification/states", {"country": country}),
            REFERENCE_DATA_TTL,
        )
