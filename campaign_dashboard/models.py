"""
Dashboard data models - Campaign, CampaignQuery, Stats, Bar.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

ALL_STATUSES = "all"


@dataclass(frozen=True)
class Campaign:
    """A single marketing campaign as returned by the campaign API."""
    id: str
    name: str
    brand_id: str
    status: str                         # active | paused | completed | anything else
    budget: float                       # total budget, currency units
    daily_budget: float                 # daily spend cap, currency units
    platforms: Tuple[str, ...] = ()     # e.g. ("meta", "google")
    created_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand_id": self.brand_id,
            "status": self.status,
            "budget": self.budget,
            "daily_budget": self.daily_budget,
            "platforms": list(self.platforms),
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class CampaignQuery:
    """Search/status query owned by the caller (request args, CLI flags)."""
    search_term: str = ""
    status_filter: str = ALL_STATUSES

    @property
    def is_inert(self) -> bool:
        return not self.search_term and self.status_filter == ALL_STATUSES


@dataclass(frozen=True)
class Stats:
    """Aggregate statistics derived from a campaign list."""
    campaign_count: int = 0
    status_counts: Dict[str, int] = field(default_factory=dict)
    platform_counts: Dict[str, int] = field(default_factory=dict)
    total_budget: float = 0
    total_daily_budget: float = 0
    average_budget: int = 0
    max_budget: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "campaign_count": self.campaign_count,
            "status_counts": dict(self.status_counts),
            "platform_counts": dict(self.platform_counts),
            "total_budget": self.total_budget,
            "total_daily_budget": self.total_daily_budget,
            "average_budget": self.average_budget,
            "max_budget": self.max_budget,
        }


@dataclass(frozen=True)
class Bar:
    """One row of a proportional bar chart."""
    label: str
    value: float
    width_pct: float                    # 0-100
    color: str = "#2563eb"
    title: str = ""                     # full label when `label` is truncated
