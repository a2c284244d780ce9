"""
Shared helper functions used across dashboard routes.
"""

from typing import Any, Dict, List

from flask import current_app, request

from campaign_dashboard.aggregator import aggregate
from campaign_dashboard.config import DisplayConfig
from campaign_dashboard.filters import apply_query
from campaign_dashboard.models import ALL_STATUSES, Campaign, CampaignQuery


def get_display_config() -> DisplayConfig:
    """Display config loaded at startup (defaults if none)."""
    return current_app.config.get("DISPLAY_CONFIG") or DisplayConfig()


def load_campaigns() -> List[Campaign]:
    """
    Fetch the canonical campaign list for this request.

    Raises:
        CampaignFetchError: Propagated from the campaign source
    """
    source = current_app.config["CAMPAIGN_SOURCE"]
    return source()


def get_query_from_request() -> CampaignQuery:
    """
    Build the search/status query from request args.

    Values are used verbatim: the search is a plain substring and the status
    must match exactly.

    Query params:
        search: free-text name filter (default "")
        status: status label or "all" (default "all")
    """
    return CampaignQuery(
        search_term=request.args.get("search", ""),
        status_filter=request.args.get("status", ALL_STATUSES),
    )


def build_view(campaigns: List[Campaign], query: CampaignQuery) -> Dict[str, Any]:
    """
    Filter the canonical list and aggregate the working subset.

    Recomputed on every request; nothing is cached between requests.

    Returns:
        Dict with 'campaigns' (filtered list) and 'stats'
    """
    filtered = apply_query(campaigns, query)
    return {
        "campaigns": filtered,
        "stats": aggregate(filtered),
    }
