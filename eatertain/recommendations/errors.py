from __future__ import annotations


class RecommendationError(Exception):
    """Base class for recommendation engine errors."""


class UnknownFoodMode(RecommendationError):
    """The requested food mode slug is not in the catalog."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Unknown food mode: {slug!r}")
        self.slug = slug


class InsufficientCandidates(RecommendationError):
    """Even the loosest filter stage produced fewer items than required."""

    def __init__(self, food_mode: str, found: int, required: int = 3) -> None:
        super().__init__(
            f"Not enough content items to recommend for {food_mode!r}: "
            f"found {found}, need {required}"
        )
        self.food_mode = food_mode
        self.found = found
        self.required = required


class CatalogError(ValueError):
    """The catalog data is malformed or inconsistent."""
