from __future__ import annotations

from eatertain.recommendations.models import QuickPresetId, RecommendInput
from eatertain.recommendations.presets import apply_preset, list_presets


def test_presets_are_listed_in_order():
    ids = [p.id for p in list_presets()]
    assert ids == [
        QuickPresetId.ten_minutes,
        QuickPresetId.eating_alone,
        QuickPresetId.with_kids,
        QuickPresetId.background_noise,
    ]


def test_no_preset_is_a_no_op():
    request = RecommendInput(food_mode="snack-break")
    assert apply_preset(request) is request


def test_preset_fills_unset_fields():
    request = apply_preset(RecommendInput(food_mode="snack-break", preset="ten-minutes"))
    assert request.max_duration_mins == 15
    assert request.max_plot_density == 2
    assert "short-form" in request.preferred_tags


def test_explicit_fields_win_over_preset():
    request = apply_preset(
        RecommendInput(food_mode="snack-break", preset="ten-minutes", max_duration_mins=25),
    )
    assert request.max_duration_mins == 25
    assert request.max_plot_density == 2


def test_background_noise_requires_easy_viewing():
    request = apply_preset(RecommendInput(food_mode="late-night-bite", preset="background-noise"))
    assert request.require_audio_followable is True
    assert request.require_drop_in_friendly is True
    assert request.max_intensity == 3
