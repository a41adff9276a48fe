"""
Actions accepted by the dashboard reducer.

Every user interaction and every load outcome is expressed as one of these
models, so state transitions can be driven (and tested) without a rendered UI.
"""
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator

from analysehub.models import DashboardData, SelectionKind, align_timezones

MAX_PRESET_DAYS = 36500


class SelectCampaign(BaseModel):
    type: Literal["select_campaign"] = "select_campaign"
    campaign_id: str = Field(..., description="Campaign to drill into")


class SelectAdset(BaseModel):
    type: Literal["select_adset"] = "select_adset"
    adset_id: str = Field(..., description="Ad set (under the focused campaign) to drill into")


class ToggleSelection(BaseModel):
    type: Literal["toggle_selection"] = "toggle_selection"
    kind: SelectionKind
    item_id: str
    checked: bool = Field(..., description="New checkbox state")


class SelectAllVisible(BaseModel):
    type: Literal["select_all_visible"] = "select_all_visible"
    kind: SelectionKind
    visible_ids: List[str] = Field(default_factory=list, description="Ids shown under the active search")


class ClearAll(BaseModel):
    type: Literal["clear_all"] = "clear_all"
    kind: SelectionKind


class SetDateRange(BaseModel):
    type: Literal["set_date_range"] = "set_date_range"
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def align_bounds(self):
        self.start, self.end = align_timezones(self.start, self.end)
        return self


class ApplyPreset(BaseModel):
    type: Literal["apply_preset"] = "apply_preset"
    days: int = Field(..., ge=0, le=MAX_PRESET_DAYS, description="Window length ending now")


class LoadStarted(BaseModel):
    type: Literal["load_started"] = "load_started"


class DataLoaded(BaseModel):
    type: Literal["data_loaded"] = "data_loaded"
    data: DashboardData


class LoadFailed(BaseModel):
    type: Literal["load_failed"] = "load_failed"
    message: Optional[str] = None
    fallback: Optional[DashboardData] = None


class AcknowledgeError(BaseModel):
    type: Literal["acknowledge_error"] = "acknowledge_error"


Action = Annotated[
    Union[
        SelectCampaign,
        SelectAdset,
        ToggleSelection,
        SelectAllVisible,
        ClearAll,
        SetDateRange,
        ApplyPreset,
        LoadStarted,
        DataLoaded,
        LoadFailed,
        AcknowledgeError,
    ],
    Field(discriminator="type"),
]

# Subset a client may dispatch over HTTP; load outcomes come from the loader only.
UserAction = Annotated[
    Union[
        SelectCampaign,
        SelectAdset,
        ToggleSelection,
        SelectAllVisible,
        ClearAll,
        SetDateRange,
        ApplyPreset,
        AcknowledgeError,
    ],
    Field(discriminator="type"),
]
