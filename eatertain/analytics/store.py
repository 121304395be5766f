from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone

from .config import DEFAULT_EVENT_LOG_CONFIG
from .models import EventPayload, StoredEvent


class EventLog:
    """Fixed-capacity event buffer; the oldest event drops out first."""

    def __init__(self, max_events: int = DEFAULT_EVENT_LOG_CONFIG.max_events) -> None:
        if max_events < 1:
            raise ValueError("max_events must be positive")
        self.max_events = max_events
        self._events: deque[StoredEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def record(self, payload: EventPayload) -> StoredEvent:
        event = StoredEvent(
            **payload.model_dump(),
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._events.append(event)
        return event

    def events(self) -> list[StoredEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


_default_log = EventLog()


def get_event_log() -> EventLog:
    return _default_log


def record_event(payload: EventPayload) -> StoredEvent:
    return _default_log.record(payload)


def get_events() -> list[StoredEvent]:
    return _default_log.events()


def clear_events() -> None:
    _default_log.clear()
