from analysehub.models.campaign import (
    Ad,
    AdSet,
    AdsResponse,
    AdsetsResponse,
    Campaign,
    CampaignsResponse,
    EntityStatus,
)
from analysehub.models.metric import (
    DEFAULT_METRICS,
    METRIC_CATEGORY_LABELS,
    Metric,
    MetricCategory,
    MetricsResponse,
)
from analysehub.models.dashboard import (
    DashboardData,
    DateRange,
    FilterPayload,
    SelectionKind,
    align_timezones,
    fallback_data,
)

__all__ = [
    "Ad",
    "AdSet",
    "AdsResponse",
    "AdsetsResponse",
    "Campaign",
    "CampaignsResponse",
    "EntityStatus",
    "DEFAULT_METRICS",
    "METRIC_CATEGORY_LABELS",
    "Metric",
    "MetricCategory",
    "MetricsResponse",
    "DashboardData",
    "DateRange",
    "FilterPayload",
    "SelectionKind",
    "align_timezones",
    "fallback_data",
]
