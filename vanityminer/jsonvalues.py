"""Lenient decoding of numeric values that arrive from JSON-like inputs."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1

_UNSIGNED_DIGITS = re.compile(r"\+?[0-9]+")


def _saturate_float(value: float, maximum: int) -> int:
    """Truncate a float towards zero, clamping it into ``0..=maximum``."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value) or value >= maximum:
        return maximum
    return int(value)


def _parse_unsigned_string(text: str, maximum: int, message: str) -> int:
    if not _UNSIGNED_DIGITS.fullmatch(text):
        raise ValueError(message)
    number = int(text)
    if number > maximum:
        raise ValueError(message)
    return number


def parse_u64(value: Any) -> int:
    """Decode an unsigned 64-bit integer given as a number or a decimal string.

    Floats and out-of-range integers are truncated and clamped into range.
    """
    if isinstance(value, bool):
        raise ValueError("Expected number or string")
    if isinstance(value, int):
        if 0 <= value <= U64_MAX:
            return value
        return 0 if value < 0 else U64_MAX
    if isinstance(value, float):
        return _saturate_float(value, U64_MAX)
    if isinstance(value, str):
        return _parse_unsigned_string(value, U64_MAX, "Invalid u64 string")
    raise ValueError("Expected number or string")


def parse_optional_u128(value: Any) -> Optional[int]:
    """Decode an optional unsigned 128-bit integer; ``None`` stays ``None``.

    Numbers beyond the 64-bit range pass through floating point, as they
    would when read from JSON, and are clamped into range.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Expected number, string, or null")
    if isinstance(value, int):
        if 0 <= value <= U64_MAX:
            return value
        if value < 0:
            return 0
        if value > U128_MAX:
            return U128_MAX
        return _saturate_float(float(value), U128_MAX)
    if isinstance(value, float):
        return _saturate_float(value, U128_MAX)
    if isinstance(value, str):
        return _parse_unsigned_string(value, U128_MAX, "Invalid u128 string")
    raise ValueError("Expected number, string, or null")


def serialize_count(value: int) -> float:
    """Render a count as a floating-point number, as JavaScript expects it."""
    return float(value)