from enum import Enum
from typing import Dict, List
from pydantic import BaseModel, Field, field_validator


class EntityStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"
    UNKNOWN = "UNKNOWN"


class HierarchyEntity(BaseModel):
    id: str = Field(..., description="Unique identifier")
    name: str = Field(..., description="Display name")
    status: EntityStatus = Field(EntityStatus.UNKNOWN, description="Current delivery status")

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value):
        if isinstance(value, EntityStatus):
            return value
        try:
            return EntityStatus(str(value).upper())
        except ValueError:
            return EntityStatus.UNKNOWN


class Campaign(HierarchyEntity):
    """Top-level item of the advertising hierarchy."""


class AdSet(HierarchyEntity):
    """Belongs to exactly one campaign."""


class Ad(HierarchyEntity):
    """Belongs to exactly one ad set."""


class CampaignsResponse(BaseModel):
    campaigns: List[Campaign] = Field(default_factory=list, description="Ordered campaign list")


class AdsetsResponse(BaseModel):
    adsets: Dict[str, List[AdSet]] = Field(
        default_factory=dict,
        description="Ad sets keyed by parent campaign id"
    )


class AdsResponse(BaseModel):
    ads: Dict[str, List[Ad]] = Field(
        default_factory=dict,
        description="Ads keyed by parent ad set id"
    )
