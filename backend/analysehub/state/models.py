"""
Dashboard state: drill-down focus, multi-select sets, date range and loaded data.
"""
from datetime import datetime, timedelta
from typing import Annotated, List, Literal, Optional, Set, Union
from pydantic import BaseModel, Field

from analysehub.models import Ad, AdSet, DashboardData, DateRange, SelectionKind


class NoFocus(BaseModel):
    level: Literal["none"] = "none"


class CampaignFocus(BaseModel):
    level: Literal["campaign"] = "campaign"
    campaign_id: str


class AdsetFocus(BaseModel):
    level: Literal["adset"] = "adset"
    campaign_id: str
    adset_id: str


Focus = Annotated[Union[NoFocus, CampaignFocus, AdsetFocus], Field(discriminator="level")]


def default_date_range(now: datetime, days: int = 30) -> DateRange:
    return DateRange(start=now - timedelta(days=days), end=now)


class DashboardState(BaseModel):
    """
    Snapshot of everything the presentation layer renders.

    Drill-down focus and the multi-select sets are independent axes: focusing a
    campaign to browse its ad sets never checks it, and checking a campaign never
    moves the focus.
    """

    focus: Focus = Field(default_factory=NoFocus)

    selected_campaigns: Set[str] = Field(default_factory=set)
    selected_adsets: Set[str] = Field(default_factory=set)
    selected_ads: Set[str] = Field(default_factory=set)
    selected_metrics: Set[str] = Field(default_factory=set)

    date_range: DateRange
    data: DashboardData = Field(default_factory=DashboardData)

    is_loading: bool = False
    error_message: Optional[str] = None

    @property
    def selected_campaign_id(self) -> Optional[str]:
        if isinstance(self.focus, (CampaignFocus, AdsetFocus)):
            return self.focus.campaign_id
        return None

    @property
    def selected_adset_id(self) -> Optional[str]:
        if isinstance(self.focus, AdsetFocus):
            return self.focus.adset_id
        return None

    def visible_adsets(self) -> List[AdSet]:
        """Ad sets of the focused campaign, or nothing when no campaign is focused."""
        campaign_id = self.selected_campaign_id
        if campaign_id is None:
            return []
        return list(self.data.adsets.get(campaign_id, []))

    def visible_ads(self) -> List[Ad]:
        """Ads of the focused ad set, or nothing when no ad set is focused."""
        adset_id = self.selected_adset_id
        if adset_id is None:
            return []
        return list(self.data.ads.get(adset_id, []))

    def items_for(self, kind: SelectionKind) -> list:
        """Current (unfiltered) list displayed for ``kind``."""
        kind = SelectionKind(kind)
        if kind == SelectionKind.CAMPAIGNS:
            return list(self.data.campaigns)
        if kind == SelectionKind.ADSETS:
            return self.visible_adsets()
        if kind == SelectionKind.ADS:
            return self.visible_ads()
        return list(self.data.metrics)

    def ids_for(self, kind: SelectionKind) -> Set[str]:
        return {item.id for item in self.items_for(kind)}

    def selection_for(self, kind: SelectionKind) -> Set[str]:
        return getattr(self, _SELECTION_FIELDS[SelectionKind(kind)])


_SELECTION_FIELDS = {
    SelectionKind.CAMPAIGNS: "selected_campaigns",
    SelectionKind.ADSETS: "selected_adsets",
    SelectionKind.ADS: "selected_ads",
    SelectionKind.METRICS: "selected_metrics",
}


def selection_field(kind: SelectionKind) -> str:
    """Name of the state attribute holding the multi-select set for ``kind``."""
    return _SELECTION_FIELDS[SelectionKind(kind)]
