"""
Campaign aggregator - derived statistics for the metric cards and charts.
"""

import math
from typing import Dict, Sequence

from campaign_dashboard.models import Campaign, Stats


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    # floor(x + 0.5) is off by one for values just below .5
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def count_statuses(campaigns: Sequence[Campaign]) -> Dict[str, int]:
    """Count campaigns per status label, in first-seen order."""
    counts: Dict[str, int] = {}
    for campaign in campaigns:
        counts[campaign.status] = counts.get(campaign.status, 0) + 1
    return counts


def count_platforms(campaigns: Sequence[Campaign]) -> Dict[str, int]:
    """Count campaign-platform memberships, in first-seen order."""
    counts: Dict[str, int] = {}
    for campaign in campaigns:
        for platform in campaign.platforms:
            counts[platform] = counts.get(platform, 0) + 1
    return counts


def aggregate(campaigns: Sequence[Campaign]) -> Stats:
    """
    Compute aggregate statistics for a campaign list.

    Never raises: an empty list yields zeros everywhere.

    Args:
        campaigns: Campaign list (typically the filtered working subset)

    Returns:
        Stats instance
    """
    count = len(campaigns)
    if count == 0:
        return Stats()

    total_budget = sum(c.budget for c in campaigns)
    total_daily_budget = sum(c.daily_budget for c in campaigns)

    return Stats(
        campaign_count=count,
        status_counts=count_statuses(campaigns),
        platform_counts=count_platforms(campaigns),
        total_budget=total_budget,
        total_daily_budget=total_daily_budget,
        average_budget=round_half_up(total_budget / count),
        max_budget=max(c.budget for c in campaigns),
    )
