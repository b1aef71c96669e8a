"""Coercion of raw calculator input into the ranges the calculators accept."""
from __future__ import annotations

import math

MIN_YEARS = 1
MAX_YEARS = 50


def coerce_amount(value: object) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(0.0, number)


def clamp_years(value: object, low: int = MIN_YEARS, high: int = MAX_YEARS) -> int:
    return int(max(low, min(high, coerce_amount(value))))


def clamp_months(value: object) -> int:
    return int(max(0, min(11, coerce_amount(value))))
