"""Dashboard view: the single stateful unit of the dashboard.

Holds the selected time range and derives everything else from the
dataset table on demand.
"""

import logging
from datetime import datetime

from finpulse.core.config import Settings
from finpulse.core.models import (
    ChartSeriesView,
    DashboardData,
    DatasetEntry,
    RangeButton,
    StatCard,
    StatsBundle,
    TimeRangeKey,
)
from finpulse.dashboard.cards import build_stat_cards
from finpulse.dashboard.chart import get_chart_options, get_chart_subtitle, to_chart_series
from finpulse.dashboard.generator import generate_dashboard_html
from finpulse.engine.dataset import TIME_RANGES, lookup, parse_time_range

logger = logging.getLogger(__name__)


class DashboardView:
    """Stateful dashboard component.

    The selected range is the only mutable state. Chart data is recomputed
    when the range changes and reused while it stays the same.
    """

    def __init__(
        self,
        default_range: TimeRangeKey | str | None = None,
        settings: Settings | None = None,
    ):
        """Mount the view.

        Args:
            default_range: Initially selected range. Falls back to
                settings.default_range.
            settings: Dashboard settings (default: Settings()).
        """
        self.settings = settings or Settings()
        initial = default_range if default_range is not None else self.settings.default_range
        self._time_range = parse_time_range(initial)
        self._chart_key: TimeRangeKey | None = None
        self._chart_data: ChartSeriesView | None = None

    @property
    def time_range(self) -> TimeRangeKey:
        """Currently selected range."""
        return self._time_range

    def select_range(self, key: TimeRangeKey | str) -> None:
        """Select a time range, replacing the current selection."""
        key = parse_time_range(key)
        logger.debug("Range selected: %s -> %s", self._time_range.value, key.value)
        self._time_range = key

    @property
    def entry(self) -> DatasetEntry:
        return lookup(self._time_range)

    @property
    def chart_data(self) -> ChartSeriesView:
        """Chart series for the selected range, rebuilt on range change."""
        if self._chart_data is None or self._chart_key != self._time_range:
            logger.debug("Building chart series for %s", self._time_range.value)
            self._chart_data = to_chart_series(self.entry)
            self._chart_key = self._time_range
        return self._chart_data

    @property
    def chart_options(self) -> dict:
        return get_chart_options(self._time_range)

    @property
    def stats(self) -> StatsBundle:
        return self.entry.stats

    @property
    def stat_cards(self) -> list[StatCard]:
        return build_stat_cards(self.stats, derive_direction=self.settings.derive_trend)

    @property
    def subtitle(self) -> str:
        return get_chart_subtitle(self._time_range)

    @property
    def range_buttons(self) -> list[RangeButton]:
        """Selector buttons in display order; exactly one is active."""
        return [RangeButton(key=key, active=key == self._time_range) for key in TIME_RANGES]

    def export_data(self) -> None:
        """Handle the "Export Data" button.

        The button is decorative: this does nothing.
        """
        return None

    def get_dashboard_data(self, now: datetime | None = None) -> DashboardData:
        """Snapshot the current state for rendering.

        Args:
            now: Timestamp for the footer (default: current time).
        """
        return DashboardData(
            active_range=self._time_range,
            range_buttons=self.range_buttons,
            stat_cards=self.stat_cards,
            chart_subtitle=self.subtitle,
            chart=self.chart_data.model_copy(deep=True),
            chart_options=self.chart_options,
            generated_at=now or datetime.now(),
            theme=self.settings.theme,
        )

    def render(self, now: datetime | None = None) -> str:
        """Render the current state as a standalone HTML page."""
        return generate_dashboard_html(
            self.get_dashboard_data(now),
            derive_direction=self.settings.derive_trend,
        )
