"""Checked, defaulting lookups over untrusted scraper output.

Every helper returns a typed value or a default; none of them raise.
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Optional

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent.
# Rejects thousands separators, currency symbols, underscores, 'nan' and 'inf'.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def opt_str(doc: Mapping, key: str) -> Optional[str]:
    """Return doc[key] when it is a string, else None."""
    value = doc.get(key)
    return value if isinstance(value, str) else None


def flag(doc: Mapping, key: str) -> bool:
    """Return doc[key] when it is a bool, else False."""
    value = doc.get(key)
    return value if isinstance(value, bool) else False


def loose_flag(value: Any) -> bool:
    """Bool coercion that also accepts 'true'/'false' strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def loose_text(value: Any) -> str:
    """Render strings and plain numbers as text; anything else becomes ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(value)
    return ""


def parse_decimal(value: Any) -> Optional[float]:
    """Parse a price from a number or a numeric string.

    '129.99' → 129.99, 42 → 42.0, 'N/A' → None, True → None, 'NaN' → None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def string_keyed(entry: Mapping) -> dict[str, Any]:
    """Copy only the string-keyed items of a mapping."""
    return {k: v for k, v in entry.items() if isinstance(k, str)}
