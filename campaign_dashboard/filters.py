"""
Campaign filter engine - search and status filtering over the fetched list.
"""

from typing import List, Sequence

from campaign_dashboard.models import ALL_STATUSES, Campaign, CampaignQuery


def filter_campaigns(
    campaigns: Sequence[Campaign],
    search_term: str = "",
    status_filter: str = ALL_STATUSES,
) -> List[Campaign]:
    """
    Return the campaigns matching both the search term and the status filter.

    Args:
        campaigns: Full campaign list (never modified)
        search_term: Case-insensitive substring of the campaign name ("" = any)
        status_filter: Exact status label, or "all" for any status

    Returns:
        New list in the original order
    """
    filtered = list(campaigns)

    if search_term:
        needle = search_term.lower()
        filtered = [c for c in filtered if needle in c.name.lower()]

    if status_filter != ALL_STATUSES:
        filtered = [c for c in filtered if c.status == status_filter]

    return filtered


def apply_query(campaigns: Sequence[Campaign], query: CampaignQuery) -> List[Campaign]:
    """Filter campaigns with a CampaignQuery."""
    return filter_campaigns(campaigns, query.search_term, query.status_filter)
