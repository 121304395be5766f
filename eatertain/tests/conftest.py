from __future__ import annotations

import pytest

from eatertain.recommendations.data_store import Catalog

from helpers import FixedRandom, make_item, make_mode


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.25)


@pytest.fixture
def tiny_catalog() -> Catalog:
    return Catalog(
        food_modes=(make_mode(),),
        items=(
            make_item("a", platform="YouTube", tags=("cozy",)),
            make_item("b"),
            make_item("c"),
            make_item("d", duration_mins=22),
        ),
    )
