"""
Quick presets.

A preset is a named bundle of constraints ("I have 10 minutes") that a
client can send instead of spelling every field out. Presets also carry
suggested picker defaults, served to clients by ``GET /presets``.
"""
from __future__ import annotations

from typing import Any

from .models import EnergyLevel, Platform, QuickPreset, QuickPresetId, RecommendInput

QUICK_PRESETS: list[QuickPreset] = [
    QuickPreset(
        id=QuickPresetId.ten_minutes,
        label="I have 10 minutes",
        subtitle="Fast, short picks",
        food_mode="snack-break",
        energy=EnergyLevel.high,
        platform=Platform.youtube,
    ),
    QuickPreset(
        id=QuickPresetId.eating_alone,
        label="I'm eating alone",
        subtitle="Calm solo vibe",
        food_mode="healthy-meal",
        energy=EnergyLevel.low,
    ),
    QuickPreset(
        id=QuickPresetId.with_kids,
        label="I'm with kids",
        subtitle="Family-safe choices",
        food_mode="family-dinner",
        energy=EnergyLevel.medium,
    ),
    QuickPreset(
        id=QuickPresetId.background_noise,
        label="Background noise only",
        subtitle="Audio-friendly content",
        energy=EnergyLevel.low,
    ),
]

PRESET_CONSTRAINTS: dict[QuickPresetId, dict[str, Any]] = {
    QuickPresetId.ten_minutes: {
        "max_duration_mins": 15,
        "max_plot_density": 2,
        "preferred_tags": ["short-form", "upbeat", "standup", "sketch"],
    },
    QuickPresetId.eating_alone: {
        "max_intensity": 3,
        "preferred_tags": ["docu", "educational", "calm", "travel"],
    },
    QuickPresetId.with_kids: {
        "max_intensity": 2,
        "max_plot_density": 2,
        "required_tags": ["feel-good", "familiar", "episodic"],
        "preferred_tags": ["feel-good", "familiar", "episodic"],
    },
    QuickPresetId.background_noise: {
        "require_audio_followable": True,
        "require_drop_in_friendly": True,
        "max_intensity": 3,
        "max_plot_density": 2,
        "preferred_tags": ["dialogue", "cozy", "rewatch"],
    },
}


def list_presets() -> list[QuickPreset]:
    return list(QUICK_PRESETS)


def apply_preset(request: RecommendInput) -> RecommendInput:
    """Fill in the preset's constraints for every field the caller left unset."""
    if request.preset is None:
        return request

    explicit = request.model_fields_set
    updates = {
        name: value
        for name, value in PRESET_CONSTRAINTS[request.preset].items()
        if name not in explicit
    }
    return request.model_copy(update=updates)
