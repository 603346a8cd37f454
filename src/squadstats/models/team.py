from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import PlayerRecord


class TeamSummary(BaseModel):
    """Roster-wide statistics, recomputed on every aggregation."""

    total_players: int = Field(default=0, ge=0)
    average_score: float = 0.0
    total_matches: int = 0
    top_performer: Optional[PlayerRecord] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> "TeamSummary":
        return cls(total_players=0, average_score=0.0, total_matches=0, top_performer=None)
