"""Normalization helpers for inbound appliance events.

Centralizes identifier parsing so the state layer only ever sees ``UUID``.
"""

from __future__ import annotations

import re
from typing import Any
from uuid import UUID

from smartfridge.exceptions import InvalidArgumentError

# Hyphenated, braced, parenthesised, or 32 bare hex digits.
_UUID_TEXT = re.compile(
    r"""
    ^(?:
        (?P<d>[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})
      | \{(?P<b>[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})\}
      | \((?P<p>[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})\)
      | (?P<n>[0-9a-f]{32})
    )$
    """,
    re.IGNORECASE | re.VERBOSE,
)


def safe_uuid(value: Any) -> UUID | None:
    """Parse identifier text, returning ``None`` when it is not a UUID."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    match = _UUID_TEXT.match(value.strip())
    if match is None:
        return None
    digits = next(group for group in match.groups() if group is not None)
    return UUID(digits)


def parse_item_uuid(value: Any, *, param: str = "item_uuid") -> UUID:
    """Parse identifier text the way the appliance reports it.

    Raises
    ------
    InvalidArgumentError
        When *value* is not one of the accepted UUID text forms.
    """
    parsed = safe_uuid(value)
    if parsed is None:
        raise InvalidArgumentError(param, "unable to parse value into UUID", value=value)
    return parsed
