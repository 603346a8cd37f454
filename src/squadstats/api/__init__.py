"""REST API for squadstats."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from squadstats.api.schemas import (
    MatchPayload,
    PlayerPayload,
    RegistrationPayload,
    RegistrationResponse,
    RosterResponse,
)
from squadstats.config import load_settings
from squadstats.models import PlayerRecord, TeamSummary
from squadstats.persistence import PlayerStore, RegistrationError
from squadstats.service import build_team_report, register_user, team_summary


logger = logging.getLogger("uvicorn.error")


def create_app(store: Optional[PlayerStore] = None) -> FastAPI:
    app = FastAPI(title="squadstats")
    if store is None:
        store = PlayerStore(load_settings().db_path)
    app.state.player_store = store

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/coaches/{coach_id}/players", response_model=RosterResponse)
    async def list_players(coach_id: str):
        return RosterResponse(coach_id=coach_id, players=store.get_roster_for_coach(coach_id))

    @app.post("/coaches/{coach_id}/players", response_model=PlayerRecord, status_code=201)
    async def add_player(coach_id: str, payload: PlayerPayload):
        data = payload.model_dump()
        data["player_id"] = data["player_id"] or uuid4().hex
        record = PlayerRecord(coach_id=coach_id, **data)
        return store.upsert_player(record)

    @app.post("/players/{player_id}/matches", response_model=PlayerRecord)
    async def add_match(player_id: str, payload: MatchPayload):
        try:
            return store.record_match(player_id, payload.score)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Player not found") from exc

    @app.get("/coaches/{coach_id}/summary", response_model=TeamSummary)
    async def get_summary(coach_id: str):
        return team_summary(store, coach_id)

    @app.get("/coaches/{coach_id}/report.csv")
    async def export_report(
        coach_id: str,
        coach_name: str = Query("", description="Name printed in the report header"),
        report_date: Optional[date] = Query(None, description="Defaults to today"),
    ):
        report = build_team_report(store, coach_id, coach_name, report_date)
        return Response(
            content=report.document,
            media_type=report.media_type,
            headers={"Content-Disposition": f"attachment; filename={report.filename}"},
        )

    @app.post("/register", response_model=RegistrationResponse, status_code=201)
    async def register(payload: RegistrationPayload):
        try:
            outcome = register_user(store, payload.to_candidate())
        except RegistrationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        if not outcome.accepted:
            return JSONResponse(status_code=422, content={"errors": outcome.errors})
        logger.info("Registered user %s", outcome.user_id)
        return RegistrationResponse(user_id=outcome.user_id)

    return app
