"""
Test campaign aggregator - counts, totals, average, max budget.

Run: python tools/testing/test_aggregator.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from campaign_dashboard.aggregator import aggregate, round_half_up
from campaign_dashboard.models import Campaign, Stats


def make_campaign(cid, budget, status="active", platforms=("meta",), daily_budget=0, name=None):
    return Campaign(
        id=cid,
        name=name or f"Campaign {cid}",
        brand_id="brand-1",
        status=status,
        budget=budget,
        daily_budget=daily_budget,
        platforms=tuple(platforms),
    )


def test_empty_list_yields_zeros():
    """No division by zero on an empty list."""
    stats = aggregate([])
    assert stats.total_budget == 0
    assert stats.total_daily_budget == 0
    assert stats.average_budget == 0
    assert stats.max_budget == 0
    assert stats.campaign_count == 0
    assert stats.status_counts == {}
    assert stats.platform_counts == {}
    assert stats == Stats()


def test_two_campaign_scenario():
    campaigns = [
        make_campaign("1", 100, "active", ["meta"]),
        make_campaign("2", 300, "paused", ["meta", "google"]),
    ]
    stats = aggregate(campaigns)
    assert stats.total_budget == 400
    assert stats.average_budget == 200
    assert stats.status_counts == {"active": 1, "paused": 1}
    assert stats.platform_counts == {"meta": 2, "google": 1}
    assert stats.max_budget == 300


def test_status_counts_sum_to_campaign_count():
    campaigns = [
        make_campaign("1", 10, "active"),
        make_campaign("2", 20, "active"),
        make_campaign("3", 30, "completed"),
        make_campaign("4", 40, "draft"),
    ]
    stats = aggregate(campaigns)
    assert sum(stats.status_counts.values()) == len(campaigns)
    assert stats.status_counts["draft"] == 1, "Unknown statuses are still counted"
    assert "paused" not in stats.status_counts, "Unseen statuses are not zero-filled"


def test_platform_counts_are_memberships():
    single = [make_campaign(str(i), 10, platforms=["meta"]) for i in range(3)]
    assert sum(aggregate(single).platform_counts.values()) == 3

    multi = single + [make_campaign("9", 10, platforms=["google", "tiktok"])]
    # one extra membership beyond the campaign count
    assert sum(aggregate(multi).platform_counts.values()) == len(multi) + 1


def test_duplicate_platforms_do_not_break_counts():
    stats = aggregate([make_campaign("1", 10, platforms=["meta", "meta"])])
    assert stats.platform_counts == {"meta": 2}


def test_campaign_without_platforms():
    stats = aggregate([make_campaign("1", 10, platforms=[])])
    assert stats.platform_counts == {}
    assert stats.campaign_count == 1


def test_daily_budget_total():
    campaigns = [
        make_campaign("1", 100, daily_budget=5),
        make_campaign("2", 100, daily_budget=7.5),
    ]
    assert aggregate(campaigns).total_daily_budget == 12.5


def test_average_budget_rounds_to_nearest_integer():
    campaigns = [make_campaign("1", 100), make_campaign("2", 101), make_campaign("3", 101)]
    stats = aggregate(campaigns)
    assert stats.average_budget == round(stats.total_budget / len(campaigns)) == 101


def test_average_budget_half_rounds_up():
    stats = aggregate([make_campaign("1", 1), make_campaign("2", 2)])
    assert stats.average_budget == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(0.4) == 0


def test_round_half_up_just_below_half():
    """Largest double below 0.5 rounds down, like Math.round."""
    assert round_half_up(0.49999999999999994) == 0
    assert round_half_up(1.49999999999999978) == 1
    assert round_half_up(199.5) == 200


def test_max_budget():
    campaigns = [make_campaign("1", 50), make_campaign("2", 500), make_campaign("3", 0)]
    assert aggregate(campaigns).max_budget == 500


def test_zero_budgets():
    stats = aggregate([make_campaign("1", 0), make_campaign("2", 0)])
    assert stats.max_budget == 0
    assert stats.average_budget == 0


def test_status_counts_preserve_first_seen_order():
    campaigns = [
        make_campaign("1", 1, "paused"),
        make_campaign("2", 1, "active"),
        make_campaign("3", 1, "paused"),
    ]
    assert list(aggregate(campaigns).status_counts) == ["paused", "active"]


def test_to_dict():
    d = aggregate([make_campaign("1", 100)]).to_dict()
    assert d["total_budget"] == 100
    assert d["status_counts"] == {"active": 1}


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
