"""Whole-unit rounding shared by the simulators and the amortizer."""

from __future__ import annotations

import math


def round_currency(value: float) -> int:
    """Round half-up to the nearest whole currency unit (``round`` rounds halves to even)."""
    return int(math.floor(value + 0.5))
