import math
from typing import List

from pydantic import BaseModel, Field, field_validator

from .models import Campaign


class CampaignRecord(BaseModel):
    id: str
    name: str
    brand_id: str
    status: str
    budget: float
    daily_budget: float
    platforms: List[str] = Field(default_factory=list)
    created_at: str = ""

    @field_validator("id", "brand_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v):
        # Some payloads send numeric ids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("budget", "daily_budget")
    @classmethod
    def finite_non_negative(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            raise ValueError("budget values must be finite and non-negative")
        return v

    def to_campaign(self) -> Campaign:
        return Campaign(
            id=self.id,
            name=self.name,
            brand_id=self.brand_id,
            status=self.status,
            budget=self.budget,
            daily_budget=self.daily_budget,
            platforms=tuple(self.platforms),
            created_at=self.created_at,
        )


class CampaignsPayload(BaseModel):
    campaigns: List[CampaignRecord]


def parse_campaigns_payload(data: dict) -> List[Campaign]:
    # Raises ValidationError if the payload is malformed
    payload = CampaignsPayload.model_validate(data)
    return [record.to_campaign() for record in payload.campaigns]
