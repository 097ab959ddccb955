# src/core/normalizer.py — v2
"""Input normalizer for human-entered level and repetition counts.

Accepts plain integers and decimal numbers with a K (thousand) or
M (million) suffix. Malformed input never raises: it degrades to 1.
Plain integers must fit a signed 32-bit int; digit separators, exponents
and non-ASCII digits are rejected.
"""

from __future__ import annotations

import re

_MULTIPLIERS = {"K": 1_000, "M": 1_000_000}

_PLAIN_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_NON_REPETITION_CHARS = re.compile(r"[^0-9kKmM.]")
_EXTRA_PERIODS = re.compile(r"\.(?=.*\.)")
_AFTER_SUFFIX = re.compile(r"(?<=[kKmM]).*")

MAX_LEVEL_DIGITS = 4
FALLBACK_VALUE = 1


def normalize(raw: str, max_value: int) -> int:
    """Parse a numeric string into an integer no greater than max_value.

    Args:
        raw: User-entered text such as "250", "1.5K" or "2m".
        max_value: Upper bound; larger values are clamped to it.

    Returns:
        Parsed value, or 1 if the text cannot be parsed. No lower bound
        is applied, so "0" yields 0.
    """
    text = raw.strip().upper()
    suffix = text[-1:]
    if suffix in _MULTIPLIERS:
        value = _parse_scaled(text[:-1], _MULTIPLIERS[suffix])
    else:
        value = _parse_int32(text)
    if value is None:
        value = FALLBACK_VALUE
    return min(value, max_value)


def _parse_scaled(prefix: str, multiplier: int) -> int | None:
    if _DECIMAL_PREFIX.fullmatch(prefix) is None:
        return None
    return int(float(prefix) * multiplier)


def _parse_int32(text: str) -> int | None:
    if _PLAIN_INTEGER.fullmatch(text) is None:
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def sanitize_levels_input(raw: str) -> str:
    """Keep only digits, at most four of them."""
    return "".join(ch for ch in raw if "0" <= ch <= "9")[:MAX_LEVEL_DIGITS]


def accept_levels_input(raw: str, previous: str, max_levels: int) -> str:
    """Sanitize a levels entry, keeping ``previous`` unless it lands in 1..max_levels."""
    candidate = sanitize_levels_input(raw)
    if candidate and 1 <= int(candidate) <= max_levels:
        return candidate
    return previous


def sanitize_repetitions_input(raw: str) -> str:
    """Keep digits, the last period and a K/M suffix; drop anything after it."""
    text = _NON_REPETITION_CHARS.sub("", raw)
    text = _EXTRA_PERIODS.sub("", text)
    return _AFTER_SUFFIX.sub("", text)
