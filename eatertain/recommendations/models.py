from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(frozen=True)


class EnergyLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Platform(str, Enum):
    youtube = "YouTube"
    netflix = "Netflix"
    prime_video = "Prime Video"
    hulu = "Hulu"
    max = "Max"
    disney_plus = "Disney+"


class QuickPresetId(str, Enum):
    ten_minutes = "ten-minutes"
    eating_alone = "eating-alone"
    with_kids = "with-kids"
    background_noise = "background-noise"


# ── Catalog ──────────────────────────────────────────────────────────────


class DurationWindow(FrozenCamelModel):
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> DurationWindow:
        if self.min > self.max:
            raise ValueError(f"duration window min {self.min} exceeds max {self.max}")
        return self

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2


class FoodModeDefaults(FrozenCamelModel):
    energy: EnergyLevel
    comfort: float
    chaos: float


class FoodMode(FrozenCamelModel):
    slug: str = Field(..., min_length=1)
    label: str
    emoji: str
    defaults: FoodModeDefaults
    duration_window: DurationWindow
    tag_boosts: tuple[str, ...] = ()
    tag_penalties: tuple[str, ...] = ()


class ContentItem(FrozenCamelModel):
    id: str = Field(..., min_length=1)
    title: str
    platform: Platform
    url: str
    duration_mins: int = Field(..., ge=0)
    tags: tuple[str, ...] = ()
    plot_density: int = Field(..., ge=1, le=5)
    intensity: int = Field(..., ge=1, le=5)
    audio_followable: bool
    drop_in_friendly: bool
    familiarity_score: float
    vibe_line: str = ""


class RankedItem(ContentItem):
    score: float
    why_this_match: str


# ── Requests / responses ─────────────────────────────────────────────────


class RecommendInput(CamelModel):
    food_mode: str = Field(..., min_length=1)
    energy: EnergyLevel | None = None
    platform: Platform | None = Field(
        default=None, description='Streaming platform; "Any" or omitted means no filter'
    )
    exclude_ids: list[str] = Field(
        default_factory=list, description="Ids already shown this session, for re-rolls"
    )
    max_duration_mins: int | None = Field(default=None, ge=6)
    max_intensity: int | None = Field(default=None, ge=1, le=5)
    max_plot_density: int | None = Field(default=None, ge=1, le=5)
    require_audio_followable: bool = False
    require_drop_in_friendly: bool = False
    required_tags: list[str] = Field(default_factory=list)
    preferred_tags: list[str] = Field(default_factory=list)
    preset: QuickPresetId | None = None

    @field_validator("platform", mode="before")
    @classmethod
    def _any_platform(cls, value: object) -> object:
        if isinstance(value, str) and value.strip().lower() in ("", "any"):
            return None
        return value


class RecommendResult(CamelModel):
    items: list[RankedItem]
    rationale: str
    hero_pick_id: str
    generated_at: datetime
    relaxation_stage: int = Field(..., ge=1, le=4)


class FoodModesResponse(CamelModel):
    food_modes: list[FoodMode]


class QuickPreset(CamelModel):
    id: QuickPresetId
    label: str
    subtitle: str
    food_mode: str | None = None
    energy: EnergyLevel | None = None
    platform: Platform | None = None


class PresetsResponse(CamelModel):
    presets: list[QuickPreset]
