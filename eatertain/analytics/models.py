from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal, Union

from pydantic import Field

from ..recommendations.models import CamelModel, EnergyLevel, Platform


class EventType(str, Enum):
    open = "open"
    like = "like"
    dislike = "dislike"
    share = "share"
    save = "save"
    regenerate = "regenerate"
    view_results = "view-results"


class EventPayload(CamelModel):
    event_type: EventType
    food_mode: str | None = None
    energy: EnergyLevel | None = None
    platform: Platform | Literal["Any"] | None = None
    item_id: str | None = None
    session_id: str | None = None
    details: dict[str, Union[str, int, float, bool]] = Field(default_factory=dict)


class StoredEvent(EventPayload):
    created_at: datetime


class EventResponse(CamelModel):
    ok: bool
    event: StoredEvent


class EventSummary(CamelModel):
    total: int
    by_type: dict[str, int]
    by_food_mode: dict[str, int]


class EventSummaryResponse(CamelModel):
    summary: EventSummary
