"""Period codec: decimal "years" inputs whose fraction digits are months."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

PeriodInput = Union[int, float, str, Decimal]


def _as_text(period_years: PeriodInput) -> str:
    """Positional decimal text; exponent forms like ``1.5e-05`` are expanded."""
    if isinstance(period_years, str):
        text = period_years.strip()
    elif isinstance(period_years, Decimal):
        text = format(period_years, "f")
    elif isinstance(period_years, float):
        # repr is the shortest round-tripping form, e.g. 1.6 -> "1.6"
        text = repr(period_years)
    else:
        text = str(period_years)

    if "e" in text.lower():
        text = format(Decimal(text), "f")
    return text


def resolve_months(period_years: PeriodInput) -> int:
    """
    Interpret ``period_years`` so that the digits after the decimal point are
    read literally as a month count (at most two digits), not as a fraction
    of a year:

      - 1     -> 12 months
      - 0.2   -> 2 months
      - 0.12  -> 12 months (1 year)
      - 1.6   -> 18 months (1 year + 6 months)
      - 1.123 -> 24 months ("12" months rolls over into a year)

    Callers are expected to have rejected non-positive values already.
    """
    text = _as_text(period_years)

    if "." not in text:
        return int(Decimal(text) * 12 + Decimal("0.5"))

    whole, _, fraction = text.partition(".")
    years = int(whole) if whole.strip("+-") else 0

    month_digits = fraction[:2]
    months = int(month_digits) if month_digits.isdigit() else 0

    extra_years, remaining_months = divmod(months, 12)
    return (years + extra_years) * 12 + remaining_months


def period_label(months_elapsed: int) -> str:
    """Label a snapshot as ``"Xy"``, ``"Ym"`` or ``"Xy Ym"``."""
    years, months = divmod(months_elapsed, 12)
    if months == 0:
        return f"{years}y"
    if years == 0:
        return f"{months}m"
    return f"{years}y {months}m"
