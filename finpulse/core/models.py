"""Domain models for FinPulse.

All dashboard data structures are defined here using Pydantic v2 for validation.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

Number = int | float


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class TimeRangeKey(str, Enum):
    """Time range selectable in the dashboard header.

    The order of members is the order of the selector buttons.
    """

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "ALL"


class Theme(str, Enum):
    """Colour theme of the generated page."""

    LIGHT = "light"
    DARK = "dark"


# -----------------------------------------------------------------------------
# Dataset Table Models
# -----------------------------------------------------------------------------


class StatsBundle(BaseModel):
    """Pre-formatted summary strings shown in the stat cards.

    These are authored display copy ("$506k", "+12.5%"), not values
    computed from the revenue/expenses series.
    """

    model_config = ConfigDict(frozen=True)

    total_revenue: str
    total_expenses: str
    net_profit: str
    growth_rate: str
    revenue_change: str
    expense_change: str
    profit_change: str
    growth_change: str


class DatasetEntry(BaseModel):
    """Labels, two numeric series and the stats bundle for one time range.

    Attributes:
        labels: Category names along the x-axis ("Jan", "Q1", "2021", ...).
        revenue: Revenue per label, in thousands.
        expenses: Expenses per label, in thousands.
        stats: Display strings for the stat cards.
    """

    model_config = ConfigDict(frozen=True)

    labels: tuple[str, ...] = Field(min_length=1)
    revenue: tuple[Number, ...]
    expenses: tuple[Number, ...]
    stats: StatsBundle

    @model_validator(mode="after")
    def validate_lengths(self) -> "DatasetEntry":
        """Ensure labels, revenue and expenses are parallel sequences."""
        if not len(self.labels) == len(self.revenue) == len(self.expenses):
            raise ValueError(
                "labels, revenue and expenses must have the same length "
                f"(got {len(self.labels)}, {len(self.revenue)}, {len(self.expenses)})"
            )
        return self


# -----------------------------------------------------------------------------
# Chart Models
# -----------------------------------------------------------------------------


class SeriesStyle(BaseModel):
    """Fixed visual styling of one line series.

    Field names follow the chart library's dataset option names so that
    the dumped model can be handed to it unchanged.
    """

    model_config = ConfigDict(frozen=True)

    fill: bool = True
    backgroundColor: str
    borderColor: str
    borderWidth: int = 3
    tension: float = 0.4
    pointBackgroundColor: str
    pointBorderColor: str = "#fff"
    pointBorderWidth: int = 2
    pointRadius: int = 5
    pointHoverRadius: int = 7
    pointHoverBackgroundColor: str
    pointHoverBorderColor: str = "#fff"
    pointHoverBorderWidth: int = 3


class ChartSeries(SeriesStyle):
    """A named data series with its styling baked in."""

    label: str
    data: list[Number]


class ChartSeriesView(BaseModel):
    """Render-ready chart input: x-axis labels and the two series."""

    labels: list[str]
    datasets: list[ChartSeries]


# -----------------------------------------------------------------------------
# View Models
# -----------------------------------------------------------------------------


class StatCard(BaseModel):
    """One labeled metric shown in the stats grid."""

    model_config = ConfigDict(frozen=True)

    title: str
    value: str
    change: str
    is_positive: bool = True
    icon: str


class RangeButton(BaseModel):
    """A time-range selector button and whether it is highlighted."""

    model_config = ConfigDict(frozen=True)

    key: TimeRangeKey
    active: bool = False


class DashboardData(BaseModel):
    """Snapshot of one dashboard state, ready for HTML generation.

    Built by DashboardView.get_dashboard_data(); every field is derived from
    the selected time range except generated_at, which is taken at render time.
    """

    title: str = "Financial Overview"
    tagline: str = "Track your business performance metrics"
    active_range: TimeRangeKey
    range_buttons: list[RangeButton]
    stat_cards: list[StatCard]
    chart_title: str = "Performance Trends"
    chart_subtitle: str
    chart: ChartSeriesView
    chart_options: dict
    generated_at: datetime
    theme: Theme = Theme.LIGHT


# -----------------------------------------------------------------------------
# Consistency Check Models
# -----------------------------------------------------------------------------


class DerivedSummary(BaseModel):
    """Totals computed from the numeric series of one dataset entry.

    Amounts are in thousands, like the series they come from.
    """

    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    growth_rate: Decimal | None = None  # None when the first revenue value is 0


class StatCheck(BaseModel):
    """Authored display value next to the value derived from the series."""

    metric: str
    authored: str
    derived: str

    @computed_field
    @property
    def matches(self) -> bool:
        return self.authored == self.derived
