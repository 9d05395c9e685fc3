"""HTML dashboard generator with a Chart.js line chart.

Generates a standalone HTML file with the header, range selector, stat cards
and chart. Every range's data is embedded so that switching ranges in the
browser re-renders without a round trip.
"""

import json
import logging
from html import escape
from pathlib import Path

from finpulse.core.models import DashboardData
from finpulse.dashboard.cards import build_stat_cards, get_trend_arrow, get_trend_class, render_stat_card
from finpulse.dashboard.chart import get_chart_subtitle, to_chart_series
from finpulse.engine.dataset import TIME_RANGES, lookup

logger = logging.getLogger(__name__)

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4.4.1/dist/chart.umd.min.js"


def _to_json(obj) -> str:
    """Serialize for embedding inside a <script> element."""
    return json.dumps(obj, ensure_ascii=False).replace("</", "<\\/")


def build_ranges_payload(derive_direction: bool = False) -> dict[str, dict]:
    """Collect chart data, subtitle and cards for every range.

    This is what the page script switches between; it is built from the
    same projections DashboardView uses.
    """
    payload = {}
    for key in TIME_RANGES:
        entry = lookup(key)
        cards = build_stat_cards(entry.stats, derive_direction=derive_direction)
        payload[key.value] = {
            "chart": to_chart_series(entry).model_dump(mode="json"),
            "subtitle": get_chart_subtitle(key),
            "cards": [
                {
                    "value": card.value,
                    "change": card.change,
                    "arrow": get_trend_arrow(card.is_positive),
                    "trend": get_trend_class(card.is_positive),
                }
                for card in cards
            ],
        }
    return payload


def _render_range_buttons(data: DashboardData) -> str:
    """Render the time range selector buttons."""
    buttons = []
    for button in data.range_buttons:
        css_class = "time-button active" if button.active else "time-button"
        buttons.append(
            f'<button class="{css_class}" data-range="{button.key.value}" '
            f'onclick="switchRange(\'{button.key.value}\')">{button.key.value}</button>'
        )
    return "\n                ".join(buttons)


def generate_dashboard_html(data: DashboardData, derive_direction: bool = False) -> str:
    """Generate complete dashboard HTML.

    Args:
        data: Snapshot of the view state to render initially.
        derive_direction: Whether card trends in the embedded range data
            follow the sign of the change strings.

    Returns:
        Complete HTML string.
    """
    cards_html = "\n            ".join(
        render_stat_card(card, index=i) for i, card in enumerate(data.stat_cards)
    )
    ranges_payload = build_ranges_payload(derive_direction)

    html = f"""<!DOCTYPE html>
<html lang="en" data-theme="{data.theme.value}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(data.title)}</title>
    <script src="{CHART_JS_URL}"></script>
    <style>
        :root {{
            --primary: #f97316;
            --primary-dark: #ea580c;
            --success: #16a34a;
            --danger: #dc2626;
            --bg-primary: #ffffff;
            --bg-secondary: #fff7ed;
            --text-primary: #1f2937;
            --text-secondary: #6b7280;
            --border-color: #e5e7eb;
            --card-bg: #ffffff;
            --card-shadow: 0 1px 3px rgba(0,0,0,0.1);
        }}
        [data-theme="dark"] {{
            --primary: #fb923c;
            --primary-dark: #f97316;
            --success: #22c55e;
            --danger: #ef4444;
            --bg-primary: #0d0f12;
            --bg-secondary: #141619;
            --text-primary: #d8d9da;
            --text-secondary: #8b8d8f;
            --border-color: #2c3039;
            --card-bg: #1e2126;
            --card-shadow: 0 1px 3px rgba(0,0,0,0.5);
        }}
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.5;
            color: var(--text-primary);
            background: var(--bg-secondary);
        }}
        .dashboard-container {{ max-width: 1400px; margin: 0 auto; padding: 2rem; }}
        .dashboard-header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            flex-wrap: wrap;
            gap: 1rem;
            margin-bottom: 2rem;
        }}
        .dashboard-title {{ font-size: 1.75rem; font-weight: 700; }}
        .dashboard-subtitle {{ color: var(--text-secondary); }}
        .time-range-selector {{
            display: flex;
            gap: 0.25rem;
            background: var(--card-bg);
            padding: 0.25rem;
            border-radius: 10px;
            box-shadow: var(--card-shadow);
        }}
        .time-button {{
            border: none;
            background: transparent;
            color: var(--text-secondary);
            padding: 0.5rem 1rem;
            border-radius: 8px;
            font-weight: 600;
            cursor: pointer;
            transition: all 0.2s;
        }}
        .time-button:hover {{ color: var(--primary); }}
        .time-button.active {{ background: var(--primary); color: #fff; }}

        .stats-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
            gap: 1rem;
            margin-bottom: 2rem;
        }}
        .stat-card {{
            background: var(--card-bg);
            border-radius: 12px;
            padding: 1.5rem;
            box-shadow: var(--card-shadow);
        }}
        .stat-header {{ display: flex; align-items: center; gap: 0.5rem; margin-bottom: 0.5rem; }}
        .stat-icon {{ font-size: 1.25rem; }}
        .stat-title {{ font-size: 0.875rem; color: var(--text-secondary); }}
        .stat-value {{ font-size: 1.75rem; font-weight: 600; }}
        .stat-change {{ font-size: 0.875rem; margin-top: 0.5rem; }}
        .stat-change.positive {{ color: var(--success); }}
        .stat-change.negative {{ color: var(--danger); }}
        .stat-change .arrow {{ margin-right: 0.25rem; }}

        .chart-container {{
            background: var(--card-bg);
            border-radius: 12px;
            padding: 1.5rem;
            box-shadow: var(--card-shadow);
            margin-bottom: 2rem;
        }}
        .chart-header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            margin-bottom: 1rem;
        }}
        .chart-title {{ font-size: 1.125rem; font-weight: 600; }}
        .chart-subtitle {{ font-size: 0.875rem; color: var(--text-secondary); }}
        .export-button {{
            border: 1px solid var(--border-color);
            background: var(--card-bg);
            color: var(--text-primary);
            padding: 0.5rem 1rem;
            border-radius: 8px;
            cursor: pointer;
        }}
        .export-icon {{ margin-right: 0.25rem; }}
        .chart-wrapper {{ position: relative; height: 400px; }}

        .dashboard-footer {{ text-align: center; color: var(--text-secondary); font-size: 0.875rem; }}
    </style>
</head>
<body>
    <div class="dashboard-container">
        <header class="dashboard-header">
            <div>
                <h1 class="dashboard-title">{escape(data.title)}</h1>
                <p class="dashboard-subtitle">{escape(data.tagline)}</p>
            </div>
            <div class="time-range-selector">
                {_render_range_buttons(data)}
            </div>
        </header>

        <div class="stats-grid">
            {cards_html}
        </div>

        <div class="chart-container">
            <div class="chart-header">
                <div>
                    <h2 class="chart-title">{escape(data.chart_title)}</h2>
                    <p id="chart-subtitle" class="chart-subtitle">{escape(data.chart_subtitle)}</p>
                </div>
                <button class="export-button" type="button">
                    <span class="export-icon">⬇</span>
                    Export Data
                </button>
            </div>
            <div class="chart-wrapper">
                <canvas id="chart-performance"></canvas>
            </div>
        </div>

        <footer class="dashboard-footer">
            <p>Last updated: {data.generated_at.strftime('%Y-%m-%d %H:%M:%S')}</p>
        </footer>
    </div>

    <script>
        const rangesData = {_to_json(ranges_payload)};
        const chartOptions = {_to_json(data.chart_options)};
        let currentRange = '{data.active_range.value}';

        // Tick and tooltip callbacks from the valueFormat block
        const valueFormat = chartOptions.valueFormat;
        delete chartOptions.valueFormat;
        const formatValue = (value) => valueFormat.prefix + value + valueFormat.suffix;
        chartOptions.scales.y.ticks.callback = formatValue;
        chartOptions.plugins.tooltip.callbacks = {{
            label: (context) => context.dataset.label + ': ' + formatValue(context.parsed.y),
        }};

        if (document.documentElement.getAttribute('data-theme') === 'dark') {{
            chartOptions.scales.y.grid.color = 'rgba(255, 255, 255, 0.05)';
            Chart.defaults.color = '#d8d9da';
        }}

        const performanceChart = new Chart(document.getElementById('chart-performance'), {{
            type: 'line',
            data: {_to_json(data.chart.model_dump(mode="json"))},
            options: chartOptions,
        }});

        function switchRange(range) {{
            const data = rangesData[range];
            if (!data || range === currentRange) return;
            currentRange = range;

            document.querySelectorAll('.time-button').forEach(btn => {{
                btn.classList.toggle('active', btn.dataset.range === range);
            }});
            document.getElementById('chart-subtitle').textContent = data.subtitle;

            data.cards.forEach((card, i) => {{
                document.getElementById(`stat-${{i}}-value`).textContent = card.value;
                document.getElementById(`stat-${{i}}-arrow`).textContent = card.arrow;
                document.getElementById(`stat-${{i}}-text`).textContent = card.change;
                const change = document.getElementById(`stat-${{i}}-change`);
                change.classList.remove('positive', 'negative');
                change.classList.add(card.trend);
            }});

            performanceChart.data = data.chart;
            performanceChart.update();
        }}
    </script>
</body>
</html>
"""
    return html


def save_dashboard(html: str, output_path: Path) -> None:
    """Save dashboard HTML to file.

    Args:
        html: HTML content.
        output_path: Output file path.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info("Dashboard written to %s", output_path)
