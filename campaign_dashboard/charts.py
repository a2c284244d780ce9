"""
Chart builders - proportional bar rows and display formatting.

Everything here is presentation on top of Stats; counts and totals come
from the aggregator unchanged.
"""

from typing import Dict, List, Optional, Sequence

from campaign_dashboard.config import DisplayConfig
from campaign_dashboard.models import Bar, Campaign, Stats

SUMMARY_STATUSES = ("active", "paused", "completed")


def bar_width_pct(value: float, maximum: float) -> float:
    """Width of a bar as a percentage of the largest value (0 when max is 0)."""
    if not maximum:
        return 0.0
    return (value / maximum) * 100.0


def truncate_name(name: str, max_length: int = 25) -> str:
    if len(name) > max_length:
        return name[:max_length] + "..."
    return name


def status_color(status: str, config: Optional[DisplayConfig] = None) -> str:
    config = config or DisplayConfig()
    return config.status_colors.get(status, config.fallback_status_color)


def platform_color(index: int, config: Optional[DisplayConfig] = None) -> str:
    palette = (config or DisplayConfig()).platform_palette
    return palette[index % len(palette)]


def status_bars(stats: Stats, config: Optional[DisplayConfig] = None) -> List[Bar]:
    """One bar per status, scaled by the largest status count."""
    largest = max(stats.status_counts.values(), default=0)
    return [
        Bar(
            label=status,
            value=count,
            width_pct=bar_width_pct(count, largest),
            color=status_color(status, config),
        )
        for status, count in stats.status_counts.items()
    ]


def platform_bars(stats: Stats, config: Optional[DisplayConfig] = None) -> List[Bar]:
    """One bar per platform, scaled by the largest platform count."""
    largest = max(stats.platform_counts.values(), default=0)
    return [
        Bar(
            label=platform,
            value=count,
            width_pct=bar_width_pct(count, largest),
            color=platform_color(index, config),
        )
        for index, (platform, count) in enumerate(stats.platform_counts.items())
    ]


def budget_bars(
    campaigns: Sequence[Campaign],
    stats: Stats,
    config: Optional[DisplayConfig] = None,
) -> List[Bar]:
    """
    Budget bars for the first N campaigns in list order (no sorting).

    Widths are scaled by stats.max_budget, computed once per aggregation.
    """
    config = config or DisplayConfig()
    return [
        Bar(
            label=truncate_name(c.name, config.name_max_length),
            value=c.budget,
            width_pct=bar_width_pct(c.budget, stats.max_budget),
            title=c.name,
        )
        for c in campaigns[:config.budget_bar_limit]
    ]


def status_summary(stats: Stats) -> Dict[str, int]:
    """Counts for the statistics panel; statuses not present show 0."""
    return {status: stats.status_counts.get(status, 0) for status in SUMMARY_STATUSES}


def format_currency(value: Optional[float]) -> str:
    """
    Format a budget for display.

      1234     -> $1,234
      1234.5   -> $1,234.5
      0.12345  -> $0.123

    Up to three decimals, trailing zeros dropped (en-US toLocaleString).
    """
    if value is None:
        return "$0"
    text = f"{float(value):,.3f}".rstrip("0").rstrip(".")
    return f"${text}"
