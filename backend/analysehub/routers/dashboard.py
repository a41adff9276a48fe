"""
Dashboard API: read and drive the application's selection & filter state.
"""
import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import TypeAdapter, ValidationError

from analysehub.dependencies import get_loader, get_store
from analysehub.models import FilterPayload, SelectionKind
from analysehub.services import DashboardLoader
from analysehub.state import DashboardStore
from analysehub.state.actions import AcknowledgeError, UserAction
from analysehub.state.views import DashboardSnapshot, build_filter_payload, build_snapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

_user_action_adapter = TypeAdapter(UserAction)


@router.get("/state", response_model=DashboardSnapshot)
async def get_state(store: DashboardStore = Depends(get_store)):
    """
    Get the current dashboard state.

    Returns:
        Hierarchy lists with checked/focused flags, metric groups, counts,
        date range and load status
    """
    return build_snapshot(store.state)


@router.post("/actions", response_model=DashboardSnapshot)
async def dispatch_action(
    payload: Dict[str, Any] = Body(..., description="Action object with a 'type' discriminator"),
    store: DashboardStore = Depends(get_store),
    loader: DashboardLoader = Depends(get_loader),
):
    """
    Apply a user action to the dashboard state.

    Invalid selections (e.g. an ad set outside the focused campaign) are
    ignored and the unchanged state is returned.

    Args:
        payload: One of select_campaign, select_adset, toggle_selection,
            select_all_visible, clear_all, set_date_range, apply_preset,
            acknowledge_error

    Returns:
        State after the action
    """
    try:
        action = _user_action_adapter.validate_python(payload)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    if isinstance(action, AcknowledgeError):
        loader.acknowledge_error()
    else:
        store.dispatch(action)

    return build_snapshot(store.state)


@router.get("/search/{kind}")
async def search(
    kind: SelectionKind,
    q: str = Query(default="", description="Case-insensitive text to match"),
    store: DashboardStore = Depends(get_store),
):
    """
    Filter the list currently displayed for ``kind`` by text.

    Search only narrows what is shown; selections are left untouched.

    Args:
        kind: campaigns, adsets, ads or metrics
        q: Search text (empty returns the full list)

    Returns:
        Matching items in display order
    """
    items = store.filter_by_text(kind, q)
    return {
        "kind": kind.value,
        "query": q,
        "items": [item.model_dump(mode="json") for item in items],
    }


@router.get("/filters", response_model=FilterPayload)
async def get_filters(store: DashboardStore = Depends(get_store)):
    """Filters the next data refresh would send upstream."""
    return build_filter_payload(store.state)


@router.post("/reload", response_model=DashboardSnapshot)
async def reload_data(
    store: DashboardStore = Depends(get_store),
    loader: DashboardLoader = Depends(get_loader),
):
    """
    Reload every collection from the data provider.

    A failed reload installs the fallback dataset and sets an error message
    rather than returning an error status.
    """
    loaded = await loader.load()
    if not loaded:
        logger.warning("Dashboard reload fell back to example data")
    return build_snapshot(store.state)


@router.delete("/error", response_model=DashboardSnapshot)
async def acknowledge_error(
    store: DashboardStore = Depends(get_store),
    loader: DashboardLoader = Depends(get_loader),
):
    """Dismiss the current load error message."""
    loader.acknowledge_error()
    return build_snapshot(store.state)
