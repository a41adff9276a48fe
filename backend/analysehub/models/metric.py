"""
Metric catalog models.

Metrics are labels the user can pick for display. Nothing here computes a value.
"""
from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class MetricCategory(str, Enum):
    PERFORMANCE = "performance"
    FINANCIAL = "financial"
    AUDIENCE = "audience"
    CONVERSION = "conversion"


# Display order and labels of the metric dropdown groups
METRIC_CATEGORY_LABELS = {
    MetricCategory.PERFORMANCE: "Performance",
    MetricCategory.FINANCIAL: "Financial",
    MetricCategory.AUDIENCE: "Audience",
    MetricCategory.CONVERSION: "Conversion",
}


class Metric(BaseModel):
    id: str = Field(..., description="Metric identifier (e.g., 'ctr', 'roas')")
    label: str = Field(..., description="Short display label")
    category: MetricCategory = Field(..., description="Group the metric is listed under")
    description: str = Field("", description="One-line explanation shown under the label")


class MetricsResponse(BaseModel):
    metrics: List[Metric] = Field(default_factory=list, description="Available metrics")


def _metric(id: str, label: str, category: MetricCategory, description: str) -> Metric:
    return Metric(id=id, label=label, category=category, description=description)


DEFAULT_METRICS: List[Metric] = [
    # Performance
    _metric("impressions", "Impressions", MetricCategory.PERFORMANCE, "Total number of impressions"),
    _metric("clicks", "Clicks", MetricCategory.PERFORMANCE, "Total number of clicks"),
    _metric("ctr", "CTR", MetricCategory.PERFORMANCE, "Click-through rate"),
    _metric("reach", "Reach", MetricCategory.PERFORMANCE, "Unique people reached"),
    _metric("frequency", "Frequency", MetricCategory.PERFORMANCE, "Average impressions per person"),

    # Financial
    _metric("cpc", "CPC", MetricCategory.FINANCIAL, "Cost per click"),
    _metric("cpm", "CPM", MetricCategory.FINANCIAL, "Cost per thousand impressions"),
    _metric("cost", "Cost", MetricCategory.FINANCIAL, "Total cost"),
    _metric("budget", "Budget", MetricCategory.FINANCIAL, "Configured budget"),

    # Audience
    _metric("age", "Age", MetricCategory.AUDIENCE, "Distribution by age"),
    _metric("gender", "Gender", MetricCategory.AUDIENCE, "Distribution by gender"),
    _metric("location", "Location", MetricCategory.AUDIENCE, "Geographic distribution"),

    # Conversion
    _metric("conversions", "Conversions", MetricCategory.CONVERSION, "Number of conversions"),
    _metric("conversion_rate", "Conversion Rate", MetricCategory.CONVERSION, "Conversion rate"),
    _metric("roas", "ROAS", MetricCategory.CONVERSION, "Return on ad spend"),
]
