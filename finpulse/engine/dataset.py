"""Static dataset table keyed by time range.

The table is process-wide constant data: a read-only mapping of frozen
DatasetEntry models. lookup() is total over TimeRangeKey.
"""

from types import MappingProxyType

from finpulse.core.exceptions import UnknownTimeRangeError
from finpulse.core.models import DatasetEntry, StatsBundle, TimeRangeKey

TIME_RANGES: tuple[TimeRangeKey, ...] = tuple(TimeRangeKey)

TIME_RANGE_DATA: MappingProxyType[TimeRangeKey, DatasetEntry] = MappingProxyType({
    TimeRangeKey.ONE_MONTH: DatasetEntry(
        labels=("Week 1", "Week 2", "Week 3", "Week 4"),
        revenue=(45, 52, 48, 58),
        expenses=(38, 42, 40, 45),
        stats=StatsBundle(
            total_revenue="$203k",
            total_expenses="$165k",
            net_profit="$38k",
            growth_rate="18.5%",
            revenue_change="+15.2%",
            expense_change="+9.8%",
            profit_change="+28.3%",
            growth_change="+3.1%",
        ),
    ),
    TimeRangeKey.THREE_MONTHS: DatasetEntry(
        labels=("Month 1", "Month 2", "Month 3"),
        revenue=(155, 178, 195),
        expenses=(142, 158, 170),
        stats=StatsBundle(
            total_revenue="$528k",
            total_expenses="$470k",
            net_profit="$58k",
            growth_rate="16.8%",
            revenue_change="+14.3%",
            expense_change="+10.5%",
            profit_change="+25.7%",
            growth_change="+2.8%",
        ),
    ),
    TimeRangeKey.SIX_MONTHS: DatasetEntry(
        labels=("Jan", "Feb", "Mar", "Apr", "May", "Jun"),
        revenue=(65, 78, 92, 85, 88, 98),
        expenses=(58, 65, 72, 75, 78, 82),
        stats=StatsBundle(
            total_revenue="$506k",
            total_expenses="$430k",
            net_profit="$76k",
            growth_rate="15.3%",
            revenue_change="+12.5%",
            expense_change="+8.2%",
            profit_change="+23.1%",
            growth_change="+2.4%",
        ),
    ),
    TimeRangeKey.ONE_YEAR: DatasetEntry(
        labels=("Q1", "Q2", "Q3", "Q4"),
        revenue=(245, 268, 295, 312),
        expenses=(215, 230, 248, 265),
        stats=StatsBundle(
            total_revenue="$1.12M",
            total_expenses="$958k",
            net_profit="$162k",
            growth_rate="17.2%",
            revenue_change="+16.8%",
            expense_change="+11.3%",
            profit_change="+31.5%",
            growth_change="+4.2%",
        ),
    ),
    TimeRangeKey.ALL: DatasetEntry(
        labels=("2021", "2022", "2023", "2024", "2025"),
        revenue=(580, 785, 1020, 1285, 1450),
        expenses=(520, 685, 865, 1095, 1220),
        stats=StatsBundle(
            total_revenue="$5.12M",
            total_expenses="$4.39M",
            net_profit="$730k",
            growth_rate="19.5%",
            revenue_change="+22.4%",
            expense_change="+15.8%",
            profit_change="+45.2%",
            growth_change="+5.8%",
        ),
    ),
})


def lookup(key: TimeRangeKey) -> DatasetEntry:
    """Get the dataset entry for a time range.

    Args:
        key: Time range key (enum member or its string value).

    Returns:
        The same immutable DatasetEntry on every call.
    """
    return TIME_RANGE_DATA[TimeRangeKey(key)]


def parse_time_range(value: str | TimeRangeKey) -> TimeRangeKey:
    """Parse user input such as "6m" or "all" into a TimeRangeKey.

    Raises:
        UnknownTimeRangeError: If the value names no known range.
    """
    if isinstance(value, TimeRangeKey):
        return value
    try:
        return TimeRangeKey(value.strip().upper())
    except ValueError:
        raise UnknownTimeRangeError(value, [k.value for k in TIME_RANGES]) from None
