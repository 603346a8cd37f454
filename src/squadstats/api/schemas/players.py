from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from squadstats.models import PlayerRecord, Sport


class PlayerPayload(BaseModel):
    player_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    email: str = ""
    sport: Optional[Sport] = None
    current_score: Optional[float] = None
    match_count: Optional[int] = Field(default=None, ge=0)
    total_score: Optional[float] = Field(default=None, ge=0.0)
    average_score: Optional[float] = None


class MatchPayload(BaseModel):
    score: float


class RosterResponse(BaseModel):
    coach_id: str
    players: List[PlayerRecord]
