"""Offset cursors and stateless page slicing.

A cursor is the URL-safe base64 encoding of the ASCII decimal start offset, e.g.
offset 0 is ``"MA=="``. It is only meaningful for the filter and sort that
produced it; nothing binds it to them.
"""

import base64
import binascii
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from fauxledger.domain.exceptions import ValidationError

T = TypeVar("T")

DEFAULT_LIMIT = 25
MIN_LIMIT = 1
MAX_LIMIT = 100


@dataclass
class Page(Generic[T]):
    """One window of an ordered collection. No total count is exposed."""

    data: list[T]
    has_more: bool
    next_cursor: str | None
    prev_cursor: str | None


def encode_cursor(offset: int) -> str:
    """Encode a non-negative offset."""
    if offset < 0:
        raise ValueError("Cursor offset must be non-negative")
    return base64.urlsafe_b64encode(str(offset).encode("ascii")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    """Decode a cursor back to its offset; raises ValidationError when malformed."""
    try:
        raw = base64.b64decode(cursor.encode("ascii"), altchars=b"-_", validate=True)
        text = raw.decode("ascii")
    except (binascii.Error, ValueError):
        raise ValidationError("Invalid cursor format", value=cursor) from None

    digits = text[1:] if text.startswith("-") else text
    if not digits.isdigit():
        raise ValidationError("Invalid cursor format", value=cursor)
    offset = int(text)
    if offset < 0:
        raise ValidationError("Invalid cursor value", value=cursor)
    return offset


def clamp_limit(limit: int | None, default: int = DEFAULT_LIMIT) -> int:
    """Clamp to [MIN_LIMIT, MAX_LIMIT]; out-of-range values are not rejected."""
    if limit is None:
        limit = default
    return min(max(limit, MIN_LIMIT), MAX_LIMIT)


def paginate(items: Sequence[T], limit: int, cursor: str | None = None) -> Page[T]:
    """Slice ``items`` starting at the cursor offset.

    ``prev_cursor`` is recomputed as ``max(0, start - limit)``; it reproduces the
    previous page only while the limit stays the same.
    """
    limit = clamp_limit(limit)
    start = decode_cursor(cursor) if cursor else 0
    end = start + limit
    has_more = end < len(items)
    return Page(
        data=list(items[start:end]),
        has_more=has_more,
        next_cursor=encode_cursor(end) if has_more else None,
        prev_cursor=encode_cursor(max(0, start - limit)) if start > 0 else None,
    )
