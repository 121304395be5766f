from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException

from .analytics.aggregator import compute_event_summary
from .analytics.models import (
    EventPayload,
    EventResponse,
    EventSummaryResponse,
)
from .analytics.store import get_events, record_event
from .recommendations.engine import RecommendationEngine, get_engine
from .recommendations.errors import UnknownFoodMode
from .recommendations.models import (
    FoodModesResponse,
    PresetsResponse,
    RecommendInput,
    RecommendResult,
)
from .recommendations.presets import list_presets

logger = logging.getLogger(__name__)

app = FastAPI(title="Eatertain Recommendation API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/food-modes", response_model=FoodModesResponse)
def food_modes(engine: RecommendationEngine = Depends(get_engine)) -> FoodModesResponse:
    return FoodModesResponse(food_modes=engine.list_food_modes())


@app.get("/presets", response_model=PresetsResponse)
def presets() -> PresetsResponse:
    return PresetsResponse(presets=list_presets())


# ── Recommendations ──────────────────────────────────────────────────────


@app.post("/recommend", response_model=RecommendResult)
def recommend(
    body: RecommendInput,
    engine: RecommendationEngine = Depends(get_engine),
) -> RecommendResult:
    try:
        return engine.recommend(body)
    except UnknownFoodMode as exc:
        logger.warning("Rejected recommend request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Recommendation failed for food mode %r", body.food_mode)
        raise HTTPException(
            status_code=500, detail="Failed to generate recommendations",
        ) from exc


# ── Events ───────────────────────────────────────────────────────────────


@app.post("/event", response_model=EventResponse)
def event(body: EventPayload) -> EventResponse:
    return EventResponse(ok=True, event=record_event(body))


@app.get("/event", response_model=EventSummaryResponse)
def event_summary() -> EventSummaryResponse:
    return EventSummaryResponse(summary=compute_event_summary(get_events()))
