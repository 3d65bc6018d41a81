"""Signed offsets for the tail engine.

An offset is parsed once from user text and later resolved against the extent
(line or byte count) of each input separately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import MalformedOffset


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class ExplicitZero:
    """A literal `+0`: start at the first unit and emit everything."""


@dataclass(frozen=True, slots=True)
class Signed:
    """A count; positive means 1-based start, negative means "last n"."""

    n: int


Offset = ExplicitZero | Signed


def saturating_neg(n: int) -> int:
    """Negate `n`, clamping the result to the signed 64-bit range."""
    return max(INT64_MIN, min(INT64_MAX, -n))


def parse_offset(token: str, *, unit: str = "line") -> Offset:
    if _INT_RE.fullmatch(token) is None:
        raise MalformedOffset(token, unit)
    n = int(token)
    if not INT64_MIN <= n <= INT64_MAX:
        raise MalformedOffset(token, unit)

    if token.startswith("+"):
        return ExplicitZero() if n == 0 else Signed(n)
    if token.startswith("-"):
        return Signed(n)
    # A bare count means "the last n units".
    return Signed(saturating_neg(n))


def resolve(offset: Offset, total: int) -> int | None:
    """Turn an offset into a 0-based start index, or None for no output."""
    if isinstance(offset, ExplicitZero):
        return 0 if total > 0 else None

    n = offset.n
    if n == 0:
        return None
    if n > 0:
        if n > total:
            return None
        return n - 1
    return max(total + n, 0)
