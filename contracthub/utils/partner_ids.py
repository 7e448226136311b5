"""Serialization helpers for the comma-joined partner id column."""

from __future__ import annotations

import re
from collections.abc import Iterable

PERSISTED_SEPARATOR = ","
DISPLAY_SEPARATOR = ", "

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
# -1 is the failed-parse marker in existing rows, never a partner id.
_PARSE_FAILURE = -1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_token(token: str) -> int | None:
    token = token.strip()
    if not _INT_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if value == _PARSE_FAILURE or not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def decode_partner_ids(raw: str | None) -> list[int]:
    """Parse "1, 2,x,3" into [1, 2, 3].

    Tokens that are not ASCII 32-bit integers, and the -1 sentinel, are dropped
    without error. Order and duplicates are kept as given.
    """
    if not raw:
        return []
    ids: list[int] = []
    for token in raw.split(","):
        value = _parse_token(token)
        if value is not None:
            ids.append(value)
    return ids


def encode_partner_ids(ids: Iterable[int], separator: str = PERSISTED_SEPARATOR) -> str:
    return separator.join(str(partner_id) for partner_id in ids)
