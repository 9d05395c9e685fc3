"""Dashboard module: view state, chart projection and HTML generation.

The page has a single view:
    - Header with the time range selector (1M, 3M, 6M, 1Y, ALL)
    - Four stat cards (revenue, expenses, net profit, growth rate)
    - Revenue vs Expenses line chart
"""

from finpulse.dashboard.generator import generate_dashboard_html, save_dashboard
from finpulse.dashboard.view import DashboardView

__all__ = [
    "DashboardView",
    "generate_dashboard_html",
    "save_dashboard",
]
