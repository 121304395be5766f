from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogError
from .models import ContentItem, FoodMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Immutable set of food modes and content items, keyed by slug and id."""

    food_modes: tuple[FoodMode, ...]
    items: tuple[ContentItem, ...]
    _modes_by_slug: dict[str, FoodMode] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "food_modes", tuple(self.food_modes))
        object.__setattr__(self, "items", tuple(self.items))
        _check_unique("food mode slug", (m.slug for m in self.food_modes))
        _check_unique("content item id", (i.id for i in self.items))
        object.__setattr__(self, "_modes_by_slug", {m.slug: m for m in self.food_modes})

    def get_food_mode(self, slug: str) -> FoodMode | None:
        return self._modes_by_slug.get(slug)


def _check_unique(what: str, keys: Iterable[str]) -> None:
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise CatalogError(f"duplicate {what}: {key!r}")
        seen.add(key)


def _load_items(config: CatalogConfig) -> list[ContentItem]:
    df = pd.read_csv(config.content_items_path, dtype={"id": str})

    # Tags are stored pipe-separated; normalise to lowercase tuples
    df["tags"] = (
        df["tags"]
        .fillna("")
        .apply(lambda s: tuple(t.strip().lower() for t in s.split(config.tag_separator) if t.strip()))
    )
    df["vibe_line"] = df["vibe_line"].fillna("")

    items: list[ContentItem] = []
    for record in df.to_dict(orient="records"):
        try:
            items.append(ContentItem.model_validate(record))
        except ValidationError as exc:
            raise CatalogError(f"invalid content item {record.get('id')!r}: {exc}") from exc
    return items


def _load_food_modes(config: CatalogConfig) -> list[FoodMode]:
    with open(config.food_modes_path, encoding="utf-8") as fh:
        raw = json.load(fh)

    modes: list[FoodMode] = []
    for entry in raw:
        try:
            modes.append(FoodMode.model_validate(entry))
        except ValidationError as exc:
            raise CatalogError(f"invalid food mode {entry.get('slug')!r}: {exc}") from exc
    return modes


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """Read and validate the shipped catalog files."""
    catalog = Catalog(
        food_modes=tuple(_load_food_modes(config)),
        items=tuple(_load_items(config)),
    )
    logger.info(
        "Loaded catalog: %d food modes, %d content items",
        len(catalog.food_modes),
        len(catalog.items),
    )
    return catalog


_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog
