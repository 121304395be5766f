from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EventLogConfig:
    max_events: int = int(os.getenv("EATERTAIN_EVENT_LOG_MAX", "3000"))


DEFAULT_EVENT_LOG_CONFIG = EventLogConfig()
