"""
Read models derived from dashboard state.

Everything here is a pure function of ``DashboardState``; the presentation
layer calls these after a change event instead of keeping its own copies.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from analysehub.models import (
    METRIC_CATEGORY_LABELS,
    DateRange,
    EntityStatus,
    FilterPayload,
    Metric,
    MetricCategory,
    SelectionKind,
)
from analysehub.state.models import DashboardState


class SelectionCounts(BaseModel):
    campaigns: int = 0
    adsets: int = 0
    ads: int = 0
    metrics: int = 0


class HierarchyRow(BaseModel):
    id: str
    name: str
    status: EntityStatus
    checked: bool = Field(False, description="Whether the row is in the multi-select set")
    focused: bool = Field(False, description="Whether the row is the drill-down focus")


class HierarchyList(BaseModel):
    rows: List[HierarchyRow] = Field(default_factory=list)
    all_selected: bool = False


class MetricGroup(BaseModel):
    category: MetricCategory
    label: str
    metrics: List[Metric] = Field(default_factory=list)


class DashboardSnapshot(BaseModel):
    """Everything a client needs to render the dashboard in one response."""
    selected_campaign_id: Optional[str] = None
    selected_adset_id: Optional[str] = None
    campaigns: HierarchyList
    adsets: HierarchyList
    ads: HierarchyList
    metric_groups: List[MetricGroup] = Field(default_factory=list)
    selected_metrics: List[str] = Field(default_factory=list)
    metrics_button_text: str
    counts: SelectionCounts
    date_range: DateRange
    date_range_text: str
    is_loading: bool = False
    error_message: Optional[str] = None


def selection_counts(state: DashboardState) -> SelectionCounts:
    return SelectionCounts(
        campaigns=len(state.selected_campaigns),
        adsets=len(state.selected_adsets),
        ads=len(state.selected_ads),
        metrics=len(state.selected_metrics),
    )


def is_all_selected(state: DashboardState, kind: SelectionKind) -> bool:
    """State of the "select all" checkbox heading a list."""
    items = state.items_for(kind)
    selected = state.selection_for(kind)
    if kind == SelectionKind.CAMPAIGNS:
        return len(selected) == len(items)
    return len(items) > 0 and len(selected) == len(items)


def metrics_button_text(state: DashboardState) -> str:
    count = len(state.selected_metrics)
    if count == 0:
        return "Select metrics"
    if count == 1:
        return "1 metric selected"
    return f"{count} metrics selected"


def metrics_by_category(state: DashboardState) -> List[MetricGroup]:
    """Metric catalog grouped in dropdown order. Empty categories are kept."""
    groups: Dict[MetricCategory, MetricGroup] = {
        category: MetricGroup(category=category, label=label)
        for category, label in METRIC_CATEGORY_LABELS.items()
    }
    for metric in state.data.metrics:
        groups[metric.category].metrics.append(metric)
    return list(groups.values())


def format_date_range(date_range: DateRange) -> str:
    """Format as e.g. ``01 Jan - 31 Jan 2026``."""
    start = date_range.start.strftime("%d %b")
    end = date_range.end.strftime("%d %b %Y")
    return f"{start} - {end}"


def build_filter_payload(state: DashboardState) -> FilterPayload:
    """Filters to send along with a data refresh."""
    return FilterPayload(
        date_range=state.date_range,
        selected_metrics=sorted(state.selected_metrics),
        selected_campaigns=sorted(state.selected_campaigns),
        selected_adsets=sorted(state.selected_adsets),
        selected_ads=sorted(state.selected_ads),
    )


def _hierarchy_list(state: DashboardState, kind: SelectionKind, focused_id: Optional[str]) -> HierarchyList:
    selected = state.selection_for(kind)
    rows = [
        HierarchyRow(
            id=item.id,
            name=item.name,
            status=item.status,
            checked=item.id in selected,
            focused=item.id == focused_id,
        )
        for item in state.items_for(kind)
    ]
    return HierarchyList(rows=rows, all_selected=is_all_selected(state, kind))


def build_snapshot(state: DashboardState) -> DashboardSnapshot:
    return DashboardSnapshot(
        selected_campaign_id=state.selected_campaign_id,
        selected_adset_id=state.selected_adset_id,
        campaigns=_hierarchy_list(state, SelectionKind.CAMPAIGNS, state.selected_campaign_id),
        adsets=_hierarchy_list(state, SelectionKind.ADSETS, state.selected_adset_id),
        ads=_hierarchy_list(state, SelectionKind.ADS, None),
        metric_groups=metrics_by_category(state),
        selected_metrics=sorted(state.selected_metrics),
        metrics_button_text=metrics_button_text(state),
        counts=selection_counts(state),
        date_range=state.date_range,
        date_range_text=format_date_range(state.date_range),
        is_loading=state.is_loading,
        error_message=state.error_message,
    )
