from __future__ import annotations

from typing import AbstractSet, Protocol

from .config import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from .models import ContentItem, EnergyLevel, FoodMode, RankedItem

SHORT_MEAL_MINUTES = 20
LOW_PLOT_DENSITY = 2
REASON_SEPARATOR = " • "


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1): ``random.Random``,
    ``numpy.random.Generator``, or a fixed stub in tests."""

    def random(self) -> float: ...


def score_item(
    item: ContentItem,
    food_mode: FoodMode,
    energy: EnergyLevel,
    preferred_tags: AbstractSet[str],
    rng: RandomSource,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> RankedItem:
    """Compute an additive desirability score for one candidate."""
    w = weights
    boosts = set(food_mode.tag_boosts)
    penalties = set(food_mode.tag_penalties)
    energy_tags = w.energy_tags.get(energy.value, frozenset())

    score = w.base
    score -= abs(item.duration_mins - food_mode.duration_window.center) * w.duration_penalty_per_min

    mode_tag_matches = 0
    preferred_tag_matches = 0
    for tag in item.tags:
        if tag in boosts:
            score += w.mode_boost
            mode_tag_matches += 1
        if tag in penalties:
            score -= w.mode_penalty
        if tag in energy_tags:
            score += w.energy_tag_boost
        if tag in preferred_tags:
            score += w.preferred_tag_boost
            preferred_tag_matches += 1

    # Cognitive load
    score -= item.plot_density * w.plot_density_penalty
    if item.intensity > w.heavy_intensity_threshold:
        score -= item.intensity * w.heavy_intensity_penalty
    else:
        score -= item.intensity * w.light_intensity_penalty

    score += w.audio_bonus if item.audio_followable else -w.audio_penalty
    score += w.drop_in_bonus if item.drop_in_friendly else -w.drop_in_penalty

    # Comfort / chaos alignment
    score += item.familiarity_score * food_mode.defaults.comfort
    chaos_weight = w.chaos_match_weight if "high-chaos" in item.tags else w.chaos_mismatch_weight
    score += (food_mode.defaults.chaos - 0.5) * chaos_weight

    if energy is EnergyLevel.low and item.intensity >= w.low_energy_intensity_floor:
        score -= w.low_energy_intensity_penalty
    if energy is EnergyLevel.high and "short-form" in item.tags:
        score += w.high_energy_short_form_bonus

    # Tie-break noise so equal items don't always come out in catalog order
    score += rng.random() * w.noise_span

    return RankedItem(
        **item.model_dump(),
        score=round(score, 2),
        why_this_match=build_why_match(
            item, food_mode, energy, mode_tag_matches, preferred_tag_matches,
        ),
    )


def build_why_match(
    item: ContentItem,
    food_mode: FoodMode,
    energy: EnergyLevel,
    mode_tag_matches: int,
    preferred_tag_matches: int = 0,
) -> str:
    reasons: list[str] = []
    if item.duration_mins <= SHORT_MEAL_MINUTES:
        reasons.append("fits a short meal window")
    if item.audio_followable:
        reasons.append("easy to follow while eating")
    if item.plot_density <= LOW_PLOT_DENSITY:
        reasons.append("low plot density")
    if mode_tag_matches > 0:
        reasons.append(f"aligned with {food_mode.label.lower()} vibe")
    if preferred_tag_matches > 0:
        reasons.append("matches your quick preset")
    if len(reasons) < 2:
        reasons.append(f"{energy.value} energy pacing")
    return REASON_SEPARATOR.join(reasons[:2])
