from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

from .config import DEFAULT_RELAXATION_CONFIG, RelaxationConfig
from .models import ContentItem, FoodMode, Platform, RecommendInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    min_duration: int
    max_duration: int
    platform: Platform | None = None
    max_intensity: int | None = None
    max_plot_density: int | None = None
    require_audio_followable: bool = False
    require_drop_in_friendly: bool = False
    required_tags: frozenset[str] = frozenset()
    exclude_ids: frozenset[str] = frozenset()


def _matches(item: ContentItem, criteria: FilterCriteria) -> bool:
    if criteria.platform is not None and item.platform != criteria.platform:
        return False
    if not criteria.min_duration <= item.duration_mins <= criteria.max_duration:
        return False
    if criteria.max_intensity is not None and item.intensity > criteria.max_intensity:
        return False
    if criteria.max_plot_density is not None and item.plot_density > criteria.max_plot_density:
        return False
    if criteria.require_audio_followable and not item.audio_followable:
        return False
    if criteria.require_drop_in_friendly and not item.drop_in_friendly:
        return False
    if criteria.required_tags and criteria.required_tags.isdisjoint(item.tags):
        return False
    return item.id not in criteria.exclude_ids


def filter_candidates(items: Iterable[ContentItem], criteria: FilterCriteria) -> list[ContentItem]:
    """Return the items that satisfy every hard constraint, in catalog order."""
    return [item for item in items if _matches(item, criteria)]


def duration_cap(request: RecommendInput, food_mode: FoodMode) -> int | None:
    """Longest runtime the caller will accept, never below the mode's floor."""
    if request.max_duration_mins is None:
        return None
    return max(request.max_duration_mins, food_mode.duration_window.min)


def build_strict_criteria(request: RecommendInput, food_mode: FoodMode) -> FilterCriteria:
    window = food_mode.duration_window
    cap = duration_cap(request, food_mode)
    return FilterCriteria(
        min_duration=window.min,
        max_duration=window.max if cap is None else min(window.max, cap),
        platform=request.platform,
        max_intensity=request.max_intensity,
        max_plot_density=request.max_plot_density,
        require_audio_followable=request.require_audio_followable,
        require_drop_in_friendly=request.require_drop_in_friendly,
        required_tags=frozenset(request.required_tags),
        exclude_ids=frozenset(request.exclude_ids),
    )


def _bump(limit: int | None, step: int) -> int | None:
    return None if limit is None else min(5, limit + step)


def _capped(ceiling: int, cap: int | None) -> int:
    return ceiling if cap is None else min(ceiling, cap)


def relaxation_stages(
    strict: FilterCriteria,
    cap: int | None = None,
    config: RelaxationConfig = DEFAULT_RELAXATION_CONFIG,
) -> Iterator[FilterCriteria]:
    """
    Yield progressively looser criteria, strictest first.

    1. strict: everything the caller asked for
    2. wider runtime window, required tags dropped
    3. any platform, wider again, quality limits eased, drop-in not required
    4. fallback: generic window only; exclusions ignored

    Stages 1-3 keep the caller's duration cap.
    """
    yield strict

    loose = replace(
        strict,
        min_duration=max(0, strict.min_duration - config.loose_floor_drop),
        max_duration=_capped(strict.max_duration + config.loose_ceiling_raise, cap),
        required_tags=frozenset(),
    )
    yield loose

    default_min, default_max = config.fallback_window
    yield replace(
        loose,
        platform=None,
        min_duration=max(0, min(strict.min_duration - config.wide_floor_drop, default_min)),
        max_duration=_capped(max(strict.max_duration + config.wide_ceiling_raise, default_max), cap),
        max_intensity=_bump(strict.max_intensity, config.quality_relax_step),
        max_plot_density=_bump(strict.max_plot_density, config.quality_relax_step),
        require_drop_in_friendly=False,
    )

    yield FilterCriteria(
        min_duration=max(0, default_min - config.fallback_floor_drop),
        max_duration=default_max + config.fallback_ceiling_raise,
    )


def find_candidates(
    items: Iterable[ContentItem],
    request: RecommendInput,
    food_mode: FoodMode,
    config: RelaxationConfig = DEFAULT_RELAXATION_CONFIG,
) -> tuple[int, list[ContentItem]]:
    """
    Walk the relaxation ladder until a stage yields enough candidates.

    Returns ``(stage, candidates)``. When no stage is enough, the last
    stage's (short) list is returned and the caller decides what to do.
    """
    items = tuple(items)
    strict = build_strict_criteria(request, food_mode)
    cap = duration_cap(request, food_mode)

    stage = 0
    candidates: list[ContentItem] = []
    for stage, criteria in enumerate(relaxation_stages(strict, cap, config), start=1):
        candidates = filter_candidates(items, criteria)
        if len(candidates) >= config.min_results:
            break
        logger.debug(
            "Stage %d for %s produced %d candidates, relaxing",
            stage, food_mode.slug, len(candidates),
        )
    return stage, candidates
