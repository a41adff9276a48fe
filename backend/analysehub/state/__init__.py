from analysehub.state.models import (
    AdsetFocus,
    CampaignFocus,
    DashboardState,
    NoFocus,
)
from analysehub.state.reducer import reduce
from analysehub.state.search import filter_by_text
from analysehub.state.store import ChangeEvent, DashboardStore, View, affected_views

__all__ = [
    "AdsetFocus",
    "CampaignFocus",
    "DashboardState",
    "NoFocus",
    "reduce",
    "filter_by_text",
    "ChangeEvent",
    "DashboardStore",
    "View",
    "affected_views",
]
