"""Campaign Monitoring Dashboard."""
from .aggregator import aggregate
from .filters import apply_query, filter_campaigns
from .models import ALL_STATUSES, Bar, Campaign, CampaignQuery, Stats

__all__ = [
    "ALL_STATUSES",
    "Bar",
    "Campaign",
    "CampaignQuery",
    "Stats",
    "aggregate",
    "apply_query",
    "filter_campaigns",
]
