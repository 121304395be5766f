from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

import numpy as np

from .config import (
    DEFAULT_RELAXATION_CONFIG,
    DEFAULT_SCORING_WEIGHTS,
    RelaxationConfig,
    ScoringWeights,
)
from .data_store import Catalog, get_catalog
from .errors import InsufficientCandidates, UnknownFoodMode
from .filtering import find_candidates
from .models import EnergyLevel, FoodMode, RankedItem, RecommendInput, RecommendResult
from .presets import apply_preset
from .scoring import RandomSource, score_item

logger = logging.getLogger(__name__)

PICK_COUNT = 3


def _normalize_tags(tags: Sequence[str]) -> list[str]:
    return [t.strip().lower() for t in tags if t and t.strip()]


def build_rationale(food_mode: FoodMode, energy: EnergyLevel) -> str:
    return (
        f"{food_mode.label} + {energy.value.capitalize()} energy: "
        "zero-scroll picks optimized for mealtime attention."
    )


def select_top(
    ranked: Sequence[RankedItem],
    food_mode: FoodMode,
    energy: EnergyLevel,
    stage: int,
    count: int = PICK_COUNT,
) -> RecommendResult:
    """Take the best ``count`` items; the first becomes the hero pick."""
    # sorted() is stable, so equal scores keep catalog order
    top = sorted(ranked, key=lambda r: r.score, reverse=True)[:count]
    if len(top) < count:
        raise InsufficientCandidates(food_mode.slug, len(top), count)

    return RecommendResult(
        items=top,
        rationale=build_rationale(food_mode, energy),
        hero_pick_id=top[0].id,
        generated_at=datetime.now(timezone.utc),
        relaxation_stage=stage,
    )


class RecommendationEngine:
    """Stateless recommender over an immutable :class:`Catalog`."""

    def __init__(
        self,
        catalog: Catalog,
        relaxation: RelaxationConfig = DEFAULT_RELAXATION_CONFIG,
        weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
    ) -> None:
        self.catalog = catalog
        self.relaxation = relaxation
        self.weights = weights

    def list_food_modes(self) -> list[FoodMode]:
        return list(self.catalog.food_modes)

    def recommend(
        self,
        request: RecommendInput,
        rng: RandomSource | None = None,
    ) -> RecommendResult:
        """
        Pick three items for the request.

        ``rng`` drives the tie-break noise. Each call without one gets
        its own fresh generator, so concurrent callers share no state.
        """
        food_mode = self.catalog.get_food_mode(request.food_mode)
        if food_mode is None:
            raise UnknownFoodMode(request.food_mode)

        request = apply_preset(request)
        request = request.model_copy(update={
            "required_tags": _normalize_tags(request.required_tags),
            "preferred_tags": _normalize_tags(request.preferred_tags),
        })
        energy = request.energy or food_mode.defaults.energy
        if rng is None:
            rng = np.random.default_rng()

        stage, candidates = find_candidates(
            self.catalog.items, request, food_mode, self.relaxation,
        )
        if len(candidates) < PICK_COUNT:
            logger.error(
                "Catalog exhausted for %s: %d candidates after fallback",
                food_mode.slug, len(candidates),
            )
            raise InsufficientCandidates(food_mode.slug, len(candidates), PICK_COUNT)

        logger.debug("Using relaxation stage %d for %s (%d candidates)",
                     stage, food_mode.slug, len(candidates))

        preferred = frozenset(request.preferred_tags)
        ranked = [
            score_item(item, food_mode, energy, preferred, rng, self.weights)
            for item in candidates
        ]
        return select_top(ranked, food_mode, energy, stage)


_engine: RecommendationEngine | None = None


def get_engine() -> RecommendationEngine:
    """Return the process-wide engine built over :func:`get_catalog`."""
    global _engine
    if _engine is None:
        _engine = RecommendationEngine(get_catalog())
    return _engine
