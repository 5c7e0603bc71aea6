"""Lenient numeric coercion for raw text values."""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def safe_non_negative(value: Any) -> float | None:
    number = safe_float(value)
    if number is None or number < 0:
        return None
    return number


def safe_int(value: Any) -> int | None:
    number = safe_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def format_number(value: float) -> str:
    """Render ``162.0`` as ``162`` and ``1.2`` as ``1.2``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
