"""
Base class for Paystack resource façades.

A façade is a thin, declarative wrapper over one API resource family: it
validates and filters parameters, normalizes amounts to minor units, and
sends the request through the shared HTTP client. Read-mostly endpoints
are memoized through the shared ResponseCache; mutating calls invalidate
the keys of their resource family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_client.amounts import to_minor_units
from paystack_client.cache import query_fingerprint
from paystack_client.exceptions import ErrorKind, PaystackError, PaystackNotFoundError
from paystack_client.params import filter_allowed, require_fields

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence
    from typing import Any

    from paystack_client.cache import ResponseCache
    from paystack_client.conf import PaystackConfig
    from paystack_client.http_client import PaystackHTTPClient


PAGINATION_FIELDS = ("perPage", "page", "from", "to")


class BaseResource:
    """
    Shared plumbing for resource façades.

    Subclasses set ``base_path`` and expose one method per endpoint.
    Every method returns the raw response envelope.
    """

    base_path: str = ""

    def __init__(
        self,
        http: PaystackHTTPClient,
        cache: ResponseCache,
        config: PaystackConfig,
    ) -> None:
        self.http = http
        self.cache = cache
        self.config = config

    def build_path(self, path: str = "") -> str:
        """Join ``path`` onto the resource base path: "/transaction/verify/ref"."""
        full_path = self.base_path
        if path:
            full_path = f"{full_path}/{path.lstrip('/')}"
        return "/" + full_path.strip("/")

    def _prepare(
        self,
        data: Mapping[str, Any],
        allowed: Iterable[str],
        required: Sequence[str] = (),
        amount_fields: Sequence[str] = (),
    ) -> dict[str, Any]:
        """Validate, convert amounts to minor units, then filter."""
        require_fields(data, required)
        params = dict(data)
        for amount_field in amount_fields:
            if params.get(amount_field) is not None:
                params[amount_field] = self._to_minor(params[amount_field], params.get("currency"))
        return filter_allowed(params, allowed)

    def _to_minor(self, amount: Any, currency: str | None = None) -> int:
        return to_minor_units(amount, currency or self.config.currency)

    def _list_key(self, family: str, query: Mapping[str, Any]) -> str:
        return self.cache.family_key(family, query_fingerprint(query))

    def _remember(self, key: str, compute: Callable[[], Any], ttl: int | None = None) -> Any:
        return self.cache.get_or_compute(key, compute, ttl)

    def _forget(self, *keys: str) -> None:
        for key in keys:
            self.cache.invalidate(key)

    def _forget_family(self, family: str) -> None:
        self.cache.invalidate_family(family)

    def _fetch_one(self, resource_type: str, resource_id: str | int, path: str) -> dict[str, Any]:
        """
        GET a single resource, turning a 404 into PaystackNotFoundError.

        The transport classifier reports 404 as a generic failure; here the
        resource type and id are known, so the error is made specific.
        """
        try:
            return self.http.get(self.build_path(path))
        except PaystackError as e:
            if e.kind is ErrorKind.GENERIC and e.code == 404:
                raise PaystackNotFoundError(
                    e.message,
                    404,
                    resource_type=resource_type,
                    resource_id=str(resource_id),
                    context=e.context,
                    response=e.response,
                ) from e
            raise
