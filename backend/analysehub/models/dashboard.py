"""
Pydantic models shared by the dashboard store, the data providers and the API.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from analysehub.models.campaign import Ad, AdSet, Campaign
from analysehub.models.metric import DEFAULT_METRICS, Metric


class SelectionKind(str, Enum):
    """Entity kinds that carry a multi-select set."""
    CAMPAIGNS = "campaigns"
    ADSETS = "adsets"
    ADS = "ads"
    METRICS = "metrics"


def align_timezones(start: datetime, end: datetime) -> Tuple[datetime, datetime]:
    """
    Make two bounds comparable.

    When exactly one bound carries a timezone the naive one is read as UTC.
    Two naive or two aware bounds are returned unchanged.
    """
    if (start.tzinfo is None) == (end.tzinfo is None):
        return start, end
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    else:
        end = end.replace(tzinfo=timezone.utc)
    return start, end


class DateRange(BaseModel):
    start: datetime = Field(..., description="Start of the reporting window")
    end: datetime = Field(..., description="End of the reporting window")

    @model_validator(mode="after")
    def align_bounds(self):
        self.start, self.end = align_timezones(self.start, self.end)
        return self


class DashboardData(BaseModel):
    """Everything one load populates. Replaced wholesale on reload."""
    campaigns: List[Campaign] = Field(default_factory=list)
    adsets: Dict[str, List[AdSet]] = Field(default_factory=dict, description="Keyed by campaign id")
    ads: Dict[str, List[Ad]] = Field(default_factory=dict, description="Keyed by ad set id")
    metrics: List[Metric] = Field(default_factory=list)


class FilterPayload(BaseModel):
    """Request body for the parametrized hierarchy endpoints."""
    date_range: Optional[DateRange] = Field(None, description="Reporting window")
    selected_metrics: List[str] = Field(default_factory=list)
    selected_campaigns: List[str] = Field(default_factory=list)
    selected_adsets: List[str] = Field(default_factory=list)
    selected_ads: List[str] = Field(default_factory=list)


def fallback_data() -> DashboardData:
    """Minimal dataset that keeps the hierarchy navigable after a failed load."""
    return DashboardData(
        campaigns=[Campaign(id="camp1", name="Example Campaign", status="ACTIVE")],
        adsets={"camp1": [AdSet(id="adset1", name="Example Ad Set", status="ACTIVE")]},
        ads={"adset1": [Ad(id="ad1", name="Example Ad", status="ACTIVE")]},
        metrics=list(DEFAULT_METRICS),
    )
