"""Counter identity policy — turns an optional header value into a counter id."""

from __future__ import annotations

import re
from decimal import Decimal

E2E_ID_HEADER = "x-e2e-random-id"

# counters.id is a 32-bit INTEGER column
MIN_COUNTER_ID = -(2**31)
MAX_COUNTER_ID = 2**31 - 1

# ASCII decimal literal with optional fraction and exponent ("12", "1.0", "1e3")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_counter_id(raw: str | None) -> int | None:
    """Parse a raw header value into a counter id.

    Accepts any ASCII decimal literal whose value is a whole number inside the
    id column range, so ``"1.0"`` and ``"1e3"`` resolve to 1 and 1000. Returns
    None for anything else (``"1.5"``, ``"1_0"``, non-ASCII digits). An absent
    or empty value is not an error; callers check for that before parsing.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = Decimal(text)
    if not MIN_COUNTER_ID <= value <= MAX_COUNTER_ID:
        return None
    if value != value.to_integral_value():
        return None
    return int(value)


def is_blank(raw: str | None) -> bool:
    return raw is None or not raw.strip()
