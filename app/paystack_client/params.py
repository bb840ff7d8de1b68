"""
Request parameter helpers shared by the resource façades.

- filter_allowed: keep only allow-listed keys
- require_fields: fail with every missing field reported at once
- clean_nulls: drop None values
- pagination_params: build the page/perPage/from/to query fragment
- generate_reference / build_callback_url: transaction reference helpers
"""

from __future__ import annotations

import secrets
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING
from urllib.parse import urlencode, urlsplit

from paystack_client.exceptions import InvalidArgumentError, InvalidChoiceError

if TYPE_CHECKING:
    from typing import Any


def filter_allowed(data: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """
    Return the entries of ``data`` whose key is in ``allowed``.

    Insertion order of ``data`` is preserved. Never raises.
    """
    allowed_keys = set(allowed)
    return {key: value for key, value in data.items() if key in allowed_keys}


def require_fields(data: Mapping[str, Any], required: Sequence[str]) -> None:
    """
    Ensure every required field is present and non-empty.

    A field counts as missing when it is absent, None, or an empty string.
    All required fields are checked before failing.

    Raises:
        InvalidArgumentError: With ``missing_fields`` in the order given
    """
    missing = [
        name for name in required
        if name not in data or data[name] is None or data[name] == ""
    ]
    if missing:
        raise InvalidArgumentError(missing)


def require_choice(data: Mapping[str, Any], field: str, choices: Sequence[str]) -> None:
    """
    Ensure ``data[field]``, when present, is one of ``choices``.

    Comparison ignores case. An absent field passes; pair with
    require_fields() when the field is mandatory.

    Raises:
        InvalidChoiceError: When the value is not an allowed choice
    """
    value = data.get(field)
    if value is None:
        return
    if str(value).lower() not in {choice.lower() for choice in choices}:
        raise InvalidChoiceError(field, value, choices)


def clean_nulls(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is None, keeping order."""
    return {key: value for key, value in data.items() if value is not None}


def pagination_params(
    page: int | None = None,
    per_page: int | None = None,
    from_: str | None = None,
    to: str | None = None,
) -> dict[str, Any]:
    """Build list-endpoint pagination parameters, omitting unset ones."""
    return clean_nulls({"page": page, "perPage": per_page, "from": from_, "to": to})


def generate_reference(prefix: str = "PS") -> str:
    """
    Generate a unique transaction reference.

    Format: "{prefix}_{unix_seconds}_{16 hex chars}"
    """
    return f"{prefix}_{int(time.time())}_{secrets.token_hex(8)}"


def build_callback_url(base_url: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Append query parameters to a callback URL.

    Uses "&" when the URL already has a query string, "?" otherwise.
    """
    if not params:
        return base_url
    separator = "&" if urlsplit(base_url).query else "?"
    return f"{base_url}{separator}{urlencode(params)}"
