"""Arithmetic over dataset entries.

The dashboard shows authored display strings; these helpers derive the
same figures from the numeric series so the two can be compared, and
read the sign of a change string for trend arrows.
"""

import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from finpulse.core.models import DatasetEntry, DerivedSummary, Number, StatCheck

_PERCENT_RE = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)\s*%")


def series_total(values: Iterable[Number]) -> Decimal:
    """Sum a numeric series exactly."""
    return sum((Decimal(str(v)) for v in values), Decimal(0))


def percent_change(first: Number, last: Number) -> Decimal | None:
    """Calculate percentage change from first to last value.

    Returns:
        Change rounded to one decimal place, or None if first is zero.
    """
    start = Decimal(str(first))
    if start == 0:
        return None
    change = (Decimal(str(last)) - start) / start * 100
    return change.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def parse_percentage(text: str) -> Decimal:
    """Parse the leading percentage of a display string.

    "+12.5%" -> 12.5, "-3% from last period" -> -3.

    Raises:
        ValueError: If the text does not start with a percentage.
    """
    match = _PERCENT_RE.match(text)
    if match is None:
        raise ValueError(f"Not a percentage: '{text}'")
    return Decimal(match.group(1))


def is_positive_change(change: str) -> bool:
    """Tell whether a change string denotes growth (zero counts as positive)."""
    return parse_percentage(change) >= 0


def format_amount(thousands: Decimal) -> str:
    """Format an amount in thousands the way the stat cards show it.

    Amounts of a million or more switch to "M" with two decimals:
    506 -> "$506k", 1120 -> "$1.12M".
    """
    sign = "-" if thousands < 0 else ""
    thousands = abs(thousands)
    rounded = thousands.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if rounded >= 1000:
        millions = (thousands / 1000).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{sign}${millions}M"
    return f"{sign}${rounded}k"


def derive_summary(entry: DatasetEntry) -> DerivedSummary:
    """Compute totals and revenue growth from an entry's series."""
    total_revenue = series_total(entry.revenue)
    total_expenses = series_total(entry.expenses)
    return DerivedSummary(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_profit=total_revenue - total_expenses,
        growth_rate=percent_change(entry.revenue[0], entry.revenue[-1]),
    )


def check_stats(entry: DatasetEntry) -> list[StatCheck]:
    """Compare an entry's authored stats with figures derived from its series.

    Growth rate is derived as first-to-last revenue change, which the
    authored copy does not necessarily follow.
    """
    summary = derive_summary(entry)
    stats = entry.stats
    growth = f"{summary.growth_rate}%" if summary.growth_rate is not None else "n/a"
    return [
        StatCheck(
            metric="Total Revenue",
            authored=stats.total_revenue,
            derived=format_amount(summary.total_revenue),
        ),
        StatCheck(
            metric="Total Expenses",
            authored=stats.total_expenses,
            derived=format_amount(summary.total_expenses),
        ),
        StatCheck(
            metric="Net Profit",
            authored=stats.net_profit,
            derived=format_amount(summary.net_profit),
        ),
        StatCheck(metric="Growth Rate", authored=stats.growth_rate, derived=growth),
    ]
