"""Tests for HTML dashboard generation."""

import json
import re
from datetime import datetime
from pathlib import Path

from finpulse.core.config import Settings
from finpulse.core.models import Theme
from finpulse.dashboard import DashboardView, generate_dashboard_html, save_dashboard
from finpulse.dashboard.generator import build_ranges_payload

NOW = datetime(2025, 6, 30, 14, 5, 9)


def _embedded(html: str, name: str):
    match = re.search(rf"const {name} = (.*?);\n", html)
    assert match is not None
    return json.loads(match.group(1))


class TestGenerateDashboardHtml:
    """Tests for generate_dashboard_html function."""

    def test_page_structure(self) -> None:
        """Test header, buttons, cards, chart and footer."""
        html = DashboardView().render(NOW)
        assert "<h1 class=\"dashboard-title\">Financial Overview</h1>" in html
        for key in ("1M", "3M", "6M", "1Y", "ALL"):
            assert f'data-range="{key}"' in html
        assert html.count('class="stat-card"') == 4
        assert 'id="chart-performance"' in html
        assert "Revenue vs Expenses over time (6M)" in html
        assert "Last updated: 2025-06-30 14:05:09" in html

    def test_active_button(self) -> None:
        """Test that only the selected range's button is active."""
        html = DashboardView("1Y").render(NOW)
        assert html.count("time-button active") == 1
        assert 'class="time-button active" data-range="1Y"' in html

    def test_export_button_has_no_handler(self) -> None:
        """Test that the export control is decorative."""
        html = DashboardView().render(NOW)
        button = re.search(r'<button class="export-button"[^>]*>', html)
        assert button is not None
        assert "onclick" not in button.group(0)
        assert "Export Data" in html

    def test_initial_chart_data(self) -> None:
        """Test the chart data embedded for the initial render."""
        html = DashboardView("ALL").render(NOW)
        match = re.search(r"data: (\{.*?\}),\n\s+options:", html, re.DOTALL)
        assert match is not None
        chart = json.loads(match.group(1))
        assert chart["labels"] == ["2021", "2022", "2023", "2024", "2025"]
        assert [d["label"] for d in chart["datasets"]] == ["Revenue", "Expenses"]

    def test_embedded_ranges(self) -> None:
        """Test that every range is embedded for client-side switching."""
        ranges = _embedded(DashboardView().render(NOW), "rangesData")
        assert list(ranges) == ["1M", "3M", "6M", "1Y", "ALL"]
        assert ranges["1Y"]["chart"]["datasets"][1]["data"] == [215, 230, 248, 265]
        assert ranges["ALL"]["cards"][3]["value"] == "19.5%"
        assert ranges["ALL"]["cards"][3]["change"] == "+5.8% from last period"
        assert ranges["3M"]["subtitle"] == "Revenue vs Expenses over time (3M)"

    def test_embedded_options(self) -> None:
        """Test the chart options and value format block."""
        options = _embedded(DashboardView().render(NOW), "chartOptions")
        assert options["valueFormat"] == {"prefix": "$", "suffix": "k"}
        assert options["interaction"]["mode"] == "nearest"

    def test_theme(self) -> None:
        """Test dark theme attribute."""
        html = DashboardView(settings=Settings(theme=Theme.DARK)).render(NOW)
        assert '<html lang="en" data-theme="dark">' in html

    def test_renders_snapshot(self) -> None:
        """Test direct rendering of a DashboardData snapshot."""
        data = DashboardView("3M").get_dashboard_data(NOW)
        html = generate_dashboard_html(data)
        assert "$528k" in html
        assert "let currentRange = '3M';" in html


class TestBuildRangesPayload:
    """Tests for build_ranges_payload function."""

    def test_default_trend(self) -> None:
        """Test that all cards are positive by default."""
        payload = build_ranges_payload()
        for data in payload.values():
            assert all(card["trend"] == "positive" for card in data["cards"])
            assert all(card["arrow"] == "↑" for card in data["cards"])


class TestSaveDashboard:
    """Tests for save_dashboard function."""

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        """Test writing into a missing directory."""
        output = tmp_path / "reports" / "nested" / "dashboard.html"
        save_dashboard("<html></html>", output)
        assert output.read_text(encoding="utf-8") == "<html></html>"
