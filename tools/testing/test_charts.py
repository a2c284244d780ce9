"""
Test chart builders - bar widths, colours, truncation, currency formatting.

Run: python tools/testing/test_charts.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from campaign_dashboard.aggregator import aggregate
from campaign_dashboard.charts import (
    bar_width_pct, budget_bars, format_currency, platform_bars, platform_color,
    status_bars, status_color, status_summary, truncate_name,
)
from campaign_dashboard.config import DisplayConfig
from campaign_dashboard.models import Campaign


def make_campaign(cid, name, budget, status="active", platforms=("meta",)):
    return Campaign(
        id=cid, name=name, brand_id="b", status=status,
        budget=budget, daily_budget=0, platforms=tuple(platforms),
    )


def test_bar_width_zero_denominator():
    assert bar_width_pct(0, 0) == 0.0
    assert bar_width_pct(5, 0) == 0.0


def test_bar_width_proportional():
    assert bar_width_pct(150, 300) == 50.0
    assert bar_width_pct(300, 300) == 100.0


def test_truncate_name():
    assert truncate_name("Short name") == "Short name"
    assert truncate_name("x" * 25) == "x" * 25
    assert truncate_name("Back to School Mega Campaign 2026") == "Back to School Mega Campa..."


def test_status_colors_with_fallback():
    assert status_color("active") == "#10b981"
    assert status_color("paused") == "#f59e0b"
    assert status_color("completed") == "#6b7280"
    assert status_color("archived") == "#9ca3af"


def test_platform_colors_cycle():
    assert platform_color(0) == "#3b82f6"
    assert platform_color(5) == platform_color(0)


def test_budget_bars_first_five_in_list_order():
    campaigns = [make_campaign(str(i), f"Campaign {i}", (i + 1) * 100) for i in range(7)]
    stats = aggregate(campaigns)
    bars = budget_bars(campaigns, stats)

    assert [b.label for b in bars] == [f"Campaign {i}" for i in range(5)]
    # scaled by the max of the whole list, not just the first five
    assert bars[0].width_pct == bar_width_pct(100, 700)


def test_budget_bars_truncate_long_names():
    campaigns = [make_campaign("1", "A very long campaign name for testing", 100)]
    bars = budget_bars(campaigns, aggregate(campaigns))
    assert bars[0].label == "A very long campaign name..."
    assert bars[0].title == "A very long campaign name for testing"


def test_budget_bars_all_zero_budgets():
    campaigns = [make_campaign("1", "Zero", 0), make_campaign("2", "Also zero", 0)]
    bars = budget_bars(campaigns, aggregate(campaigns))
    assert [b.width_pct for b in bars] == [0.0, 0.0]


def test_budget_bar_limit_from_config():
    config = DisplayConfig(budget_bar_limit=2, name_max_length=3)
    campaigns = [make_campaign(str(i), "Campaign", 10) for i in range(4)]
    bars = budget_bars(campaigns, aggregate(campaigns), config)
    assert len(bars) == 2
    assert bars[0].label == "Cam..."


def test_status_and_platform_bars():
    campaigns = [
        make_campaign("1", "a", 1, "active", ["meta", "google"]),
        make_campaign("2", "b", 1, "active", ["meta"]),
        make_campaign("3", "c", 1, "mystery", ["meta"]),
    ]
    stats = aggregate(campaigns)

    s_bars = status_bars(stats)
    assert [(b.label, b.value, b.width_pct) for b in s_bars] == [
        ("active", 2, 100.0),
        ("mystery", 1, 50.0),
    ]
    assert s_bars[1].color == "#9ca3af"

    p_bars = platform_bars(stats)
    assert [(b.label, b.value) for b in p_bars] == [("meta", 3), ("google", 1)]
    assert p_bars[1].color == "#8b5cf6"


def test_bars_for_empty_stats():
    stats = aggregate([])
    assert status_bars(stats) == []
    assert platform_bars(stats) == []
    assert budget_bars([], stats) == []


def test_status_summary_defaults_to_zero():
    stats = aggregate([make_campaign("1", "a", 1, "paused")])
    assert status_summary(stats) == {"active": 0, "paused": 1, "completed": 0}


def test_format_currency():
    assert format_currency(0) == "$0"
    assert format_currency(1234) == "$1,234"
    assert format_currency(1234567.0) == "$1,234,567"
    assert format_currency(99.5) == "$99.5"
    assert format_currency(1234.5) == "$1,234.5"
    assert format_currency(0.12345) == "$0.123"
    assert format_currency(1000.0) == "$1,000"
    assert format_currency(None) == "$0"


if __name__ == "__main__":
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_")]
    failed = 0
    for t in tests:
        try:
            t()
            print(f"✅ PASS: {t.__name__}")
        except AssertionError as e:
            print(f"❌ FAIL: {t.__name__}: {e}")
            failed += 1
    print("=" * 60)
    print("✅ ALL TESTS PASSED" if not failed else f"❌ {failed} TEST(S) FAILED")
