from __future__ import annotations

import pytest

from eatertain.recommendations.models import EnergyLevel
from eatertain.recommendations.scoring import build_why_match, score_item

from helpers import FixedRandom, make_item, make_mode

NO_NOISE = FixedRandom(0.0)


def test_score_adds_up_known_example():
    mode = make_mode()
    item = make_item("calm-one", tags=("cozy", "calm"), familiarity_score=4.0)
    ranked = score_item(item, mode, EnergyLevel.low, frozenset(), NO_NOISE)
    # 50 + 8 boost + 4 + 4 energy - 4.5 plot - 2 intensity + 8 audio + 6 drop-in + 2 familiarity
    assert ranked.score == 75.5


def test_noise_is_scaled_into_three_points():
    mode = make_mode()
    item = make_item("calm-one", tags=("cozy", "calm"), familiarity_score=4.0)
    ranked = score_item(item, mode, EnergyLevel.low, frozenset(), FixedRandom(0.5))
    assert ranked.score == 77.0


def test_duration_distance_from_window_center():
    mode = make_mode()
    centered = score_item(make_item("x", duration_mins=15), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    off = score_item(make_item("y", duration_mins=25), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    assert centered.score - off.score == pytest.approx(11.0)


def test_mode_penalty_tags_cost_points():
    mode = make_mode(tag_penalties=("dark",))
    plain = score_item(make_item("x"), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    dark = score_item(make_item("y", tags=("dark",)), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    assert plain.score - dark.score == pytest.approx(10.0)


def test_heavy_intensity_costs_double():
    mode = make_mode()
    light = score_item(make_item("x", intensity=3), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    heavy = score_item(make_item("y", intensity=4), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    assert light.score - heavy.score == pytest.approx(16 - 6)


def test_low_energy_penalizes_intense_items():
    mode = make_mode()
    item = make_item("intense", intensity=4)
    low = score_item(item, mode, EnergyLevel.low, frozenset(), NO_NOISE)
    medium = score_item(item, mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    assert medium.score - low.score == pytest.approx(12.0)


def test_high_energy_rewards_short_form():
    mode = make_mode()
    item = make_item("short", tags=("short-form",))
    high = score_item(item, mode, EnergyLevel.high, frozenset(), NO_NOISE)
    medium = score_item(item, mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    # energy tag +4 and short-form bonus +5
    assert high.score - medium.score == pytest.approx(9.0)


def test_chaotic_modes_reward_chaotic_content():
    mode = make_mode(defaults={"energy": "medium", "comfort": 0.0, "chaos": 0.8}, tag_penalties=())
    chaotic = score_item(make_item("x", tags=("high-chaos",)), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    calm = score_item(make_item("y"), mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    assert chaotic.score - calm.score == pytest.approx(0.3 * 6 + 0.3 * 2)


def test_preferred_tags_boost_and_explain():
    mode = make_mode(tag_boosts=())
    item = make_item(
        "slow", duration_mins=30, audio_followable=False, plot_density=3, tags=("docu",),
    )
    plain = score_item(item, mode, EnergyLevel.medium, frozenset(), NO_NOISE)
    preferred = score_item(item, mode, EnergyLevel.medium, frozenset({"docu"}), NO_NOISE)
    assert preferred.score - plain.score == pytest.approx(6.0)
    assert preferred.why_this_match == "matches your quick preset • medium energy pacing"


def test_why_match_prefers_first_two_reasons():
    mode = make_mode()
    item = make_item("easy", duration_mins=12, tags=("cozy",))
    assert build_why_match(item, mode, EnergyLevel.low, 1) == (
        "fits a short meal window • easy to follow while eating"
    )


def test_why_match_mentions_mode_vibe():
    mode = make_mode()
    item = make_item("long", duration_mins=30, audio_followable=False, plot_density=3)
    assert build_why_match(item, mode, EnergyLevel.low, 2) == (
        "aligned with comfort meal vibe • low energy pacing"
    )


def test_ranked_item_keeps_content_fields():
    mode = make_mode()
    item = make_item("keep", vibe_line="hello")
    ranked = score_item(item, mode, EnergyLevel.low, frozenset(), NO_NOISE)
    assert ranked.id == "keep"
    assert ranked.vibe_line == "hello"
    assert isinstance(ranked.score, float)
