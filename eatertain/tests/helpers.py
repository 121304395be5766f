from __future__ import annotations

from eatertain.recommendations.models import ContentItem, FoodMode


class FixedRandom:
    """Stand-in random source that always returns the same value."""

    def __init__(self, value: float = 0.25) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def make_item(item_id: str, **overrides) -> ContentItem:
    data = {
        "id": item_id,
        "title": item_id.replace("-", " ").title(),
        "platform": "Netflix",
        "url": f"https://example.com/{item_id}",
        "duration_mins": 15,
        "tags": (),
        "plot_density": 1,
        "intensity": 1,
        "audio_followable": True,
        "drop_in_friendly": True,
        "familiarity_score": 3.0,
        "vibe_line": "",
    }
    data.update(overrides)
    return ContentItem.model_validate(data)


def make_mode(slug: str = "test-mode", **overrides) -> FoodMode:
    data = {
        "slug": slug,
        "label": "Comfort Meal",
        "emoji": "🍲",
        "defaults": {"energy": "low", "comfort": 0.5, "chaos": 0.5},
        "duration_window": {"min": 10, "max": 20},
        "tag_boosts": ("cozy",),
        "tag_penalties": ("high-chaos",),
    }
    data.update(overrides)
    return FoodMode.model_validate(data)
