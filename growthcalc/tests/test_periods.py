from __future__ import annotations

from decimal import Decimal

import pytest

from growthcalc.core.periods import period_label, resolve_months


@pytest.mark.parametrize(
    "period_years, expected",
    [
        (1.0, 12),
        (0.2, 2),
        (0.12, 12),
        (1.6, 18),
        (2.0, 24),
        (2, 24),
        (10, 120),
    ],
)
def test_fraction_digits_are_read_as_months(period_years, expected):
    assert resolve_months(period_years) == expected


def test_only_first_two_fraction_digits_count():
    # "12" months rolls over into one extra year; the trailing 3 is ignored
    assert resolve_months(1.123) == 24


def test_text_input_keeps_digits_as_written():
    # 1.60 written out means 60 months, not 6
    assert resolve_months("1.60") == 72
    assert resolve_months("1.6") == 18


def test_decimal_input():
    assert resolve_months(Decimal("0.2")) == 2
    assert resolve_months(Decimal("3")) == 36


def test_overflowing_months_normalize_into_years():
    assert resolve_months(0.15) == 15
    assert resolve_months(2.14) == 38


def test_period_labels():
    assert period_label(12) == "1y"
    assert period_label(6) == "6m"
    assert period_label(18) == "1y 6m"
    assert period_label(120) == "10y"


def test_exponent_floats_are_decoded_positionally():
    # 1.5e-05 is 0.000015: fraction digits "00" mean zero months
    assert resolve_months(1.5e-05) == 0
    assert resolve_months("1.5e-05") == 0
    assert resolve_months(1e16) == 12 * 10**16
