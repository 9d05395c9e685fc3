"""Stat card construction and rendering."""

from html import escape

from finpulse.core.models import StatCard, StatsBundle
from finpulse.engine.calculator import is_positive_change

ARROW_UP = "↑"
ARROW_DOWN = "↓"

# (title, value field, change field, icon) in display order
STAT_CARD_SPECS: tuple[tuple[str, str, str, str], ...] = (
    ("Total Revenue", "total_revenue", "revenue_change", "\U0001f4b0"),
    ("Total Expenses", "total_expenses", "expense_change", "\U0001f4ca"),
    ("Net Profit", "net_profit", "profit_change", "\U0001f4c8"),
    ("Growth Rate", "growth_rate", "growth_change", "\U0001f680"),
)


def format_change(change: str) -> str:
    """Append the comparison period to a change string."""
    return f"{change} from last period"


def build_stat_cards(stats: StatsBundle, derive_direction: bool = False) -> list[StatCard]:
    """Build the four stat cards from a stats bundle.

    Args:
        stats: Display strings for the selected range.
        derive_direction: If True, a card is positive only when its change
            string is non-negative. If False, every card is shown as
            positive regardless of sign.

    Returns:
        Cards in fixed order: revenue, expenses, net profit, growth rate.
    """
    cards = []
    for title, value_field, change_field, icon in STAT_CARD_SPECS:
        change = getattr(stats, change_field)
        cards.append(
            StatCard(
                title=title,
                value=getattr(stats, value_field),
                change=format_change(change),
                is_positive=is_positive_change(change) if derive_direction else True,
                icon=icon,
            )
        )
    return cards


def get_trend_arrow(is_positive: bool) -> str:
    """Get the arrow glyph for a trend direction."""
    return ARROW_UP if is_positive else ARROW_DOWN


def get_trend_class(is_positive: bool) -> str:
    """Get the CSS class for a trend direction."""
    return "positive" if is_positive else "negative"


def render_stat_card(card: StatCard, index: int | None = None) -> str:
    """Render one stat card as HTML.

    Args:
        card: Card to render.
        index: Position in the grid; adds element ids so the page script
            can update the card when the range changes.
    """
    ids = {"value": "", "change": "", "arrow": "", "text": ""}
    if index is not None:
        ids = {k: f' id="stat-{index}-{k}"' for k in ids}
    return f"""<div class="stat-card">
                <div class="stat-header">
                    <div class="stat-icon">{card.icon}</div>
                    <span class="stat-title">{escape(card.title)}</span>
                </div>
                <div class="stat-value"{ids["value"]}>{escape(card.value)}</div>
                <div class="stat-change {get_trend_class(card.is_positive)}"{ids["change"]}>
                    <span class="arrow"{ids["arrow"]}>{get_trend_arrow(card.is_positive)}</span>
                    <span{ids["text"]}>{escape(card.change)}</span>
                </div>
            </div>"""
