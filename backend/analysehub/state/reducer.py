"""
Reducer for dashboard state transitions.

``reduce`` never mutates its input. It returns the very same state object when
an action is rejected or changes nothing, which lets the store skip change
notifications for no-ops.
"""
import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional

from analysehub.models import DashboardData, DateRange, SelectionKind
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
from analysehub.state.models import (
    AdsetFocus,
    CampaignFocus,
    DashboardState,
    NoFocus,
    selection_field,
)

logger = logging.getLogger(__name__)


def reduce(state: DashboardState, action, now: Optional[datetime] = None) -> DashboardState:
    """
    Apply ``action`` to ``state`` and return the resulting state.

    Args:
        state: Current state (left untouched)
        action: One of the models from ``analysehub.state.actions``
        now: Current time, required for ``ApplyPreset``

    Returns:
        DashboardState: New state, or ``state`` itself for a no-op
    """
    if isinstance(action, SelectCampaign):
        return _select_campaign(state, action.campaign_id)
    if isinstance(action, SelectAdset):
        return _select_adset(state, action.adset_id)
    if isinstance(action, ToggleSelection):
        return _toggle(state, action.kind, action.item_id, action.checked)
    if isinstance(action, SelectAllVisible):
        return _select_all_visible(state, action.kind, action.visible_ids)
    if isinstance(action, ClearAll):
        return _replace_selection(state, action.kind, set())
    if isinstance(action, SetDateRange):
        return _set_date_range(state, action.start, action.end)
    if isinstance(action, ApplyPreset):
        if now is None:
            raise ValueError("ApplyPreset requires the current time")
        return _set_date_range(state, now - timedelta(days=action.days), now)
    if isinstance(action, LoadStarted):
        return state.model_copy(update={"is_loading": True})
    if isinstance(action, DataLoaded):
        return _install_data(state, action.data, error_message=None)
    if isinstance(action, LoadFailed):
        data = action.fallback if action.fallback is not None else state.data
        return _install_data(state, data, error_message=action.message)
    if isinstance(action, AcknowledgeError):
        if state.error_message is None:
            return state
        return state.model_copy(update={"error_message": None})

    raise TypeError(f"Unsupported action: {type(action).__name__}")


def _select_campaign(state: DashboardState, campaign_id: str) -> DashboardState:
    # Moving the drill-down focus leaves the campaign multi-select alone
    logger.info(f"Campaign selected: {campaign_id}")
    return state.model_copy(update={
        "focus": CampaignFocus(campaign_id=campaign_id),
        "selected_adsets": set(),
        "selected_ads": set(),
    })


def _select_adset(state: DashboardState, adset_id: str) -> DashboardState:
    campaign_id = state.selected_campaign_id
    if campaign_id is None:
        logger.warning(f"Ignoring ad set selection {adset_id}: no campaign selected")
        return state

    if adset_id not in state.ids_for(SelectionKind.ADSETS):
        logger.warning(f"Ignoring ad set selection {adset_id}: not under campaign {campaign_id}")
        return state

    logger.info(f"Ad set selected: {adset_id}")
    return state.model_copy(update={
        "focus": AdsetFocus(campaign_id=campaign_id, adset_id=adset_id),
        "selected_ads": set(),
    })


def _toggle(state: DashboardState, kind: SelectionKind, item_id: str, checked: bool) -> DashboardState:
    if item_id not in state.ids_for(kind):
        logger.warning(f"Ignoring {kind.value} toggle for {item_id}: not in the current list")
        return state

    current = state.selection_for(kind)
    if (item_id in current) == checked:
        return state

    updated = set(current)
    if checked:
        updated.add(item_id)
    else:
        updated.discard(item_id)
    return _replace_selection(state, kind, updated)


def _select_all_visible(state: DashboardState, kind: SelectionKind, visible_ids: Iterable[str]) -> DashboardState:
    available = state.ids_for(kind)
    requested = set(visible_ids)
    unknown = requested - available
    if unknown:
        logger.warning(f"Dropping {len(unknown)} unknown {kind.value} id(s) from select-all: {sorted(unknown)}")
    return _replace_selection(state, kind, requested & available)


def _replace_selection(state: DashboardState, kind: SelectionKind, ids: set) -> DashboardState:
    if state.selection_for(kind) == ids:
        return state
    return state.model_copy(update={selection_field(kind): set(ids)})


def _set_date_range(state: DashboardState, start: datetime, end: datetime) -> DashboardState:
    if start > end:
        logger.warning(f"Date range starts after it ends: {start.isoformat()} > {end.isoformat()}")
    return state.model_copy(update={"date_range": DateRange(start=start, end=end)})


def _install_data(state: DashboardState, data: DashboardData, error_message: Optional[str]) -> DashboardState:
    """Replace the collections wholesale and drop focus or selections that no longer exist."""
    loaded = state.model_copy(update={
        "data": data,
        "is_loading": False,
        "error_message": error_message,
    })

    focus = loaded.focus
    campaign_ids = {campaign.id for campaign in data.campaigns}
    if isinstance(focus, (CampaignFocus, AdsetFocus)) and focus.campaign_id not in campaign_ids:
        focus = NoFocus()
    if isinstance(focus, AdsetFocus):
        adset_ids = {adset.id for adset in data.adsets.get(focus.campaign_id, [])}
        if focus.adset_id not in adset_ids:
            focus = CampaignFocus(campaign_id=focus.campaign_id)
    loaded = loaded.model_copy(update={"focus": focus})

    pruned = {
        selection_field(kind): loaded.selection_for(kind) & loaded.ids_for(kind)
        for kind in SelectionKind
    }
    return loaded.model_copy(update=pruned)
