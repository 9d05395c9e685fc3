"""Chart projection for the revenue vs expenses line chart.

Turns a DatasetEntry into chart-ready series with fixed styling, and builds
the chart-wide options object consumed by Chart.js on the generated page.
"""

from finpulse.core.models import (
    ChartSeries,
    ChartSeriesView,
    DatasetEntry,
    Number,
    SeriesStyle,
    TimeRangeKey,
)

VALUE_PREFIX = "$"
VALUE_SUFFIX = "k"

REVENUE_STYLE = SeriesStyle(
    backgroundColor="rgba(249, 115, 22, 0.1)",
    borderColor="rgba(249, 115, 22, 1)",
    pointBackgroundColor="rgba(249, 115, 22, 1)",
    pointHoverBackgroundColor="rgba(249, 115, 22, 1)",
)

EXPENSES_STYLE = SeriesStyle(
    backgroundColor="rgba(234, 88, 12, 0.1)",
    borderColor="rgba(234, 88, 12, 1)",
    pointBackgroundColor="rgba(234, 88, 12, 1)",
    pointHoverBackgroundColor="rgba(234, 88, 12, 1)",
)


def format_value(value: Number) -> str:
    """Format a chart value for ticks and tooltips: 65 -> "$65k".

    Integral floats drop their decimal part, matching how the page script
    stringifies numbers.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{VALUE_PREFIX}{value}{VALUE_SUFFIX}"


def format_tooltip_label(series_label: str, value: Number) -> str:
    """Format a tooltip line: "Revenue: $65k"."""
    return f"{series_label}: {format_value(value)}"


def get_chart_subtitle(key: TimeRangeKey) -> str:
    """Get the cosmetic subtitle shown above the chart."""
    return f"Revenue vs Expenses over time ({TimeRangeKey(key).value})"


def _series(label: str, data: tuple[Number, ...], style: SeriesStyle) -> ChartSeries:
    return ChartSeries(label=label, data=list(data), **style.model_dump())


def to_chart_series(entry: DatasetEntry) -> ChartSeriesView:
    """Project a dataset entry into the two styled chart series.

    Args:
        entry: Dataset entry for the selected range.

    Returns:
        ChartSeriesView with "Revenue" and "Expenses" datasets. Data lists
        are fresh copies, so callers can't mutate the dataset table.
    """
    return ChartSeriesView(
        labels=list(entry.labels),
        datasets=[
            _series("Revenue", entry.revenue, REVENUE_STYLE),
            _series("Expenses", entry.expenses, EXPENSES_STYLE),
        ],
    )


def get_chart_options(key: TimeRangeKey) -> dict:
    """Build the chart-wide display configuration.

    The options do not depend on the range's numbers; the key only feeds
    the subtitle. Tick and tooltip callbacks can't travel as JSON, so the
    "valueFormat" block describes them and the page script installs them.
    """
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "animation": {"duration": 750, "easing": "easeInOutQuart"},
        "valueFormat": {"prefix": VALUE_PREFIX, "suffix": VALUE_SUFFIX},
        "plugins": {
            "subtitle": {"display": False, "text": get_chart_subtitle(key)},
            "legend": {
                "display": True,
                "position": "top",
                "labels": {
                    "usePointStyle": True,
                    "padding": 20,
                    "font": {"size": 13, "weight": "500"},
                },
            },
            "tooltip": {
                "mode": "index",
                "intersect": False,
                "backgroundColor": "rgba(0, 0, 0, 0.8)",
                "padding": 12,
                "cornerRadius": 8,
                "titleFont": {"size": 14, "weight": "600"},
                "bodyFont": {"size": 13},
            },
        },
        "scales": {
            "x": {
                "grid": {"display": False},
                "ticks": {"font": {"size": 12}},
            },
            "y": {
                "grid": {"color": "rgba(0, 0, 0, 0.05)", "drawBorder": False},
                "ticks": {"font": {"size": 12}},
            },
        },
        "interaction": {"mode": "nearest", "axis": "x", "intersect": False},
    }
