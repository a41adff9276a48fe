"""
Selection & filter state store.

The store owns one ``DashboardState`` and is the only place it is replaced.
All operations are synchronous; listeners are told which views need to be
recomputed and decide for themselves what to redraw.
"""
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, List, Optional
from pydantic import BaseModel

from analysehub.models import DashboardData, SelectionKind
from analysehub.state.actions import (
    AcknowledgeError,
    ApplyPreset,
    ClearAll,
    DataLoaded,
    LoadFailed,
    LoadStarted,
    SelectAdset,
    SelectAllVisible,
    SelectCampaign,
    SetDateRange,
    ToggleSelection,
)
from analysehub.state.models import DashboardState, default_date_range
from analysehub.state.reducer import reduce
from analysehub.state.search import filter_by_text

logger = logging.getLogger(__name__)


class View(str, Enum):
    CAMPAIGNS = "campaigns"
    ADSETS = "adsets"
    ADS = "ads"
    METRICS = "metrics"
    COUNTS = "counts"
    DATE = "date"
    STATUS = "status"


_HIERARCHY_VIEWS = frozenset({View.CAMPAIGNS, View.ADSETS, View.ADS, View.COUNTS})
_ALL_VIEWS = frozenset(View)

_KIND_VIEWS = {
    SelectionKind.CAMPAIGNS: frozenset({View.CAMPAIGNS, View.COUNTS}),
    SelectionKind.ADSETS: frozenset({View.ADSETS, View.COUNTS}),
    SelectionKind.ADS: frozenset({View.ADS, View.COUNTS}),
    SelectionKind.METRICS: frozenset({View.METRICS}),
}


def affected_views(action) -> FrozenSet[View]:
    """Views that must be recomputed after ``action`` changed the state."""
    if isinstance(action, SelectCampaign):
        return _HIERARCHY_VIEWS
    if isinstance(action, SelectAdset):
        return frozenset({View.ADS, View.COUNTS})
    if isinstance(action, (ToggleSelection, SelectAllVisible, ClearAll)):
        return _KIND_VIEWS[action.kind]
    if isinstance(action, (SetDateRange, ApplyPreset)):
        return frozenset({View.DATE}) | _HIERARCHY_VIEWS
    if isinstance(action, AcknowledgeError):
        return frozenset({View.STATUS})
    return _ALL_VIEWS


class ChangeEvent(BaseModel):
    action: Any
    views: FrozenSet[View]


Listener = Callable[[ChangeEvent], None]


class DashboardStore:
    """
    Holds the dashboard state and applies actions to it.

    Args:
        clock: Returns the current time; read on every preset so presets are never memoized
        default_range_days: Length of the initial date range ending now
        data: Collections to start with (normally filled in later by the loader)
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        default_range_days: int = 30,
        data: Optional[DashboardData] = None,
    ):
        self.clock = clock
        self._state = DashboardState(
            date_range=default_date_range(clock(), default_range_days),
            data=data or DashboardData(),
        )
        self._listeners: List[Listener] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change events. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action) -> DashboardState:
        """Run ``action`` through the reducer and notify listeners if the state changed."""
        new_state = reduce(self._state, action, now=self.clock())
        if new_state is self._state:
            return self._state

        self._state = new_state
        self._notify(ChangeEvent(action=action, views=affected_views(action)))
        return self._state

    def _notify(self, event: ChangeEvent):
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"State listener failed on {type(event.action).__name__}: {e}")

    # Drill-down focus

    def select_campaign(self, campaign_id: str) -> DashboardState:
        return self.dispatch(SelectCampaign(campaign_id=campaign_id))

    def select_adset(self, adset_id: str) -> DashboardState:
        return self.dispatch(SelectAdset(adset_id=adset_id))

    # Multi-select sets

    def toggle_selection(self, kind: SelectionKind, item_id: str, checked: bool) -> DashboardState:
        return self.dispatch(ToggleSelection(kind=kind, item_id=item_id, checked=checked))

    def toggle_campaign_selection(self, campaign_id: str, checked: bool) -> DashboardState:
        return self.toggle_selection(SelectionKind.CAMPAIGNS, campaign_id, checked)

    def toggle_adset_selection(self, adset_id: str, checked: bool) -> DashboardState:
        return self.toggle_selection(SelectionKind.ADSETS, adset_id, checked)

    def toggle_ad_selection(self, ad_id: str, checked: bool) -> DashboardState:
        return self.toggle_selection(SelectionKind.ADS, ad_id, checked)

    def toggle_metric_selection(self, metric_id: str, checked: bool) -> DashboardState:
        return self.toggle_selection(SelectionKind.METRICS, metric_id, checked)

    def select_all_visible(self, kind: SelectionKind, visible_ids: Iterable[str]) -> DashboardState:
        return self.dispatch(SelectAllVisible(kind=kind, visible_ids=list(visible_ids)))

    def clear_all(self, kind: SelectionKind) -> DashboardState:
        return self.dispatch(ClearAll(kind=kind))

    # Date range

    def set_date_range(self, start: datetime, end: datetime) -> DashboardState:
        return self.dispatch(SetDateRange(start=start, end=end))

    def apply_preset(self, days: int) -> DashboardState:
        return self.dispatch(ApplyPreset(days=days))

    # Load lifecycle

    def start_loading(self) -> DashboardState:
        return self.dispatch(LoadStarted())

    def load_data(self, data: DashboardData) -> DashboardState:
        return self.dispatch(DataLoaded(data=data))

    def fail_loading(self, message: str, fallback: Optional[DashboardData] = None) -> DashboardState:
        return self.dispatch(LoadFailed(message=message, fallback=fallback))

    def cancel_loading(self) -> DashboardState:
        """End an interrupted load, keeping the current data and showing no error."""
        return self.dispatch(LoadFailed())

    def acknowledge_error(self) -> DashboardState:
        return self.dispatch(AcknowledgeError())

    # Read side

    def filter_by_text(self, kind: SelectionKind, query: str) -> list:
        """Items of ``kind`` currently displayed whose name (or metric label) matches ``query``."""
        return filter_by_text(self._state.items_for(kind), query)

    def visible_ids(self, kind: SelectionKind, query: str = "") -> List[str]:
        return [item.id for item in self.filter_by_text(kind, query)]
