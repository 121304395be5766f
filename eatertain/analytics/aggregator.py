from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import EventSummary, StoredEvent


def compute_event_summary(events: Iterable[StoredEvent]) -> EventSummary:
    type_counter: Counter[str] = Counter()
    mode_counter: Counter[str] = Counter()
    total = 0
    for event in events:
        total += 1
        type_counter[event.event_type.value] += 1
        if event.food_mode:
            mode_counter[event.food_mode] += 1

    return EventSummary(
        total=total,
        by_type=dict(type_counter),
        by_food_mode=dict(mode_counter),
    )
