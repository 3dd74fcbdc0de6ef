"""FastAPI server exposing the chromatic engine for deployment."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from chromatic_app.app import ChromaticEngineApp
from chromatic_app.logging_config import configure_logging, log_event
from logic.validation import DominantColorSchema
from memory.season_preview import SeasonPreviewSession
from tools.observability import operation_stats

LOGGER = logging.getLogger(__name__)


class ClassifyRequest(BaseModel):
    """Request payload for classifying one garment against a season."""

    season_id: Optional[str] = Field(None, description="Catalog season id; unknown ids classify as unknown")
    dominant_colors: List[DominantColorSchema] = Field(default_factory=list)


class ClosestRequest(BaseModel):
    temperature: Optional[str] = None
    depth: Optional[str] = None
    chroma: Optional[str] = None


class SessionRequest(BaseModel):
    """Request payload for starting a preview session."""

    user_id: Optional[str] = Field(
        None,
        pattern=r"^[A-Za-z0-9_-]+$",
        max_length=128,
        description="Identified user; anonymous sessions cannot promote",
    )


class PreviewRequest(BaseModel):
    season_id: str


def create_app(engine: ChromaticEngineApp | None = None) -> FastAPI:
    """Build the ASGI app around an engine instance."""

    engine = engine or ChromaticEngineApp()
    engine.init()
    sessions: "OrderedDict[str, SeasonPreviewSession]" = OrderedDict()
    app = FastAPI(title="Chromatic Compatibility Engine", version="0.1.0")

    def _session(session_id: str) -> SeasonPreviewSession:
        session = sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="unknown session")
        return session

    def _session_state(session: SeasonPreviewSession) -> dict:
        persisted = session.persisted_season()
        effective = session.get_effective_season(persisted)
        return {
            "state": session.state,
            "preview_season_id": session.preview.id if session.preview else None,
            "persisted_season_id": persisted.id if persisted else None,
            "effective_season_id": effective.id if effective else None,
        }

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Readiness check reporting whether the catalog has loaded."""

        return {
            "status": "ok" if engine.is_ready() else "loading",
            "service": "chromatic-engine",
            "environment": engine.config.environment or "local",
            "seasons": len(engine.catalog.seasons()),
            "operations": operation_stats(),
        }

    @app.get("/seasons")
    async def list_seasons() -> list:
        return [engine.describe_season(season.id) for season in engine.catalog.seasons()]

    @app.get("/seasons/{season_id}")
    async def get_season(season_id: str) -> dict:
        described = engine.describe_season(season_id)
        if described is None:
            raise HTTPException(status_code=404, detail=f"unknown season '{season_id}'")
        return described

    @app.post("/seasons/closest")
    async def closest_seasons(request: ClosestRequest) -> dict:
        matches = engine.catalog.find_closest(request.model_dump())
        return {"season_ids": [season.id for season in matches]}

    @app.post("/classify")
    async def classify(request: ClassifyRequest) -> dict:
        label = engine.classify(dominant_colors=request.dominant_colors, season_id=request.season_id)
        return {"season_id": request.season_id, "label": label}

    @app.get("/wardrobe/{user_id}/stats")
    async def wardrobe_stats(user_id: str) -> dict:
        return engine.aggregate_wardrobe(user_id).to_dict()

    @app.post("/sessions")
    async def create_session(request: SessionRequest) -> dict:
        """Start a preview session and return its identifier for later calls."""

        session_id = uuid.uuid4().hex
        sessions[session_id] = engine.open_session(request.user_id)
        while len(sessions) > engine.config.max_preview_sessions:
            evicted, _ = sessions.popitem(last=False)
            log_event(LOGGER, logging.INFO, "preview_session_evicted", session_id=evicted)
        return {"session_id": session_id}

    @app.delete("/sessions/{session_id}")
    async def close_session(session_id: str) -> dict:
        """Drop a preview session; an unsaved preview is discarded with it."""

        if sessions.pop(session_id, None) is None:
            raise HTTPException(status_code=404, detail="unknown session")
        return {"deleted": True}

    @app.get("/sessions/{session_id}/season")
    async def session_season(session_id: str) -> dict:
        return _session_state(_session(session_id))

    @app.put("/sessions/{session_id}/preview")
    async def set_preview(session_id: str, request: PreviewRequest) -> dict:
        session = _session(session_id)
        season = engine.catalog.by_id(request.season_id)
        if season is None:
            raise HTTPException(status_code=404, detail=f"unknown season '{request.season_id}'")
        session.set_preview(season)
        return _session_state(session)

    @app.delete("/sessions/{session_id}/preview")
    async def clear_preview(session_id: str) -> dict:
        session = _session(session_id)
        session.clear_preview()
        return _session_state(session)

    @app.post("/sessions/{session_id}/promote")
    async def promote(session_id: str) -> dict:
        """Persist the previewed season and report the wardrobe relabel pass."""

        outcome = _session(session_id).promote_to_persisted()
        if not outcome.ok:
            raise HTTPException(status_code=409, detail=outcome.reason or "promotion failed")
        summary = outcome.recompute
        return {
            "season_id": outcome.season_id,
            "recompute": {
                "total": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
            }
            if summary
            else None,
        }

    return app


def get_app() -> FastAPI:
    """Expose a configured FastAPI instance for ASGI servers."""

    configure_logging()
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
