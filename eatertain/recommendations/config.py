from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    data_dir: Path = _DATA_DIR
    content_items_filename: str = "content_items.csv"
    food_modes_filename: str = "food_modes.json"
    tag_separator: str = "|"

    @property
    def content_items_path(self) -> Path:
        return self.data_dir / self.content_items_filename

    @property
    def food_modes_path(self) -> Path:
        return self.data_dir / self.food_modes_filename


@dataclass(frozen=True)
class RelaxationConfig:
    """
    Tunable widenings for the candidate relaxation ladder.

    The numbers were picked by hand against the shipped catalog; change
    them together with the catalog rather than in isolation.
    """

    min_results: int = 3
    # stage 2
    loose_floor_drop: int = 2
    loose_ceiling_raise: int = 5
    # stage 3
    wide_floor_drop: int = 4
    wide_ceiling_raise: int = 8
    quality_relax_step: int = 1
    # stage 4
    fallback_window: tuple[int, int] = (10, 35)
    fallback_floor_drop: int = 2
    fallback_ceiling_raise: int = 12


@dataclass(frozen=True)
class ScoringWeights:
    base: float = 50.0
    duration_penalty_per_min: float = 1.1
    mode_boost: float = 8.0
    mode_penalty: float = 10.0
    energy_tag_boost: float = 4.0
    preferred_tag_boost: float = 6.0
    plot_density_penalty: float = 4.5
    heavy_intensity_threshold: int = 3
    heavy_intensity_penalty: float = 4.0
    light_intensity_penalty: float = 2.0
    audio_bonus: float = 8.0
    audio_penalty: float = 7.0
    drop_in_bonus: float = 6.0
    drop_in_penalty: float = 5.0
    chaos_match_weight: float = 6.0
    chaos_mismatch_weight: float = -2.0
    low_energy_intensity_floor: int = 4
    low_energy_intensity_penalty: float = 12.0
    high_energy_short_form_bonus: float = 5.0
    noise_span: float = 3.0
    energy_tags: dict[str, frozenset[str]] = field(
        default_factory=lambda: {
            "low": frozenset({"cozy", "calm", "familiar", "rewatch", "feel-good"}),
            "medium": frozenset({"dialogue", "episodic", "food", "travel", "light-comedy"}),
            "high": frozenset({"upbeat", "sketch", "standup", "high-chaos", "short-form"}),
        }
    )


DEFAULT_CATALOG_CONFIG = CatalogConfig()
DEFAULT_RELAXATION_CONFIG = RelaxationConfig()
DEFAULT_SCORING_WEIGHTS = ScoringWeights()
