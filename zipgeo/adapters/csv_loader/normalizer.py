"""Field value normalization — lenient numeric conversion for table fields."""

from __future__ import annotations

import re

# Leading integer, the way C's atoi reads it
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)

# Longest leading decimal literal with optional exponent
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def parse_int(value: str | None) -> int:
    """Parse the leading integer of *value*.

    - "94040"     -> 94040
    - " 02134 "   -> 2134
    - "94040-123" -> 94040
    - "abc", "", None -> 0
    """
    if not value:
        return 0
    match = _INT_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def parse_float(value: str | None) -> float:
    """Parse the leading decimal number of *value*, 0.0 if there is none.

    Only '.' is accepted as the decimal separator. "nan"/"inf" are not numbers here.
    """
    if not value:
        return 0.0
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return 0.0
    return float(match.group(1))


def is_int_text(value: str | None) -> bool:
    """True when *value* is, after trimming, entirely an integer literal."""
    text = clean_string(value)
    return text is not None and _INT_PREFIX.fullmatch(text) is not None


def is_float_text(value: str | None) -> bool:
    """True when *value* is, after trimming, entirely a decimal literal."""
    text = clean_string(value)
    return text is not None and _FLOAT_PREFIX.fullmatch(text) is not None
