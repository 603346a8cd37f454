"""Player performance snapshot read from the roster store."""

from __future__ import annotations

import logging
import math
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

Sport = Literal["cricket", "football", "basketball"]

SPORT_CHOICES: list[tuple[str, str]] = [
    ("cricket", "Cricket"),
    ("football", "Football"),
    ("basketball", "Basketball"),
]

# Storage documents use camelCase keys; the model uses snake_case.
_DOCUMENT_ALIASES: Mapping[str, tuple[str, ...]] = {
    "player_id": ("player_id", "playerId", "uid", "id"),
    "name": ("name",),
    "email": ("email",),
    "sport": ("sport",),
    "coach_id": ("coach_id", "coachId"),
    "current_score": ("current_score", "currentScore"),
    "match_count": ("match_count", "matchCount"),
    "total_score": ("total_score", "totalScore"),
    "average_score": ("average_score", "averageScore"),
}


def _lenient_number(value: Any, field_name: str, *, integral: bool = False) -> float | int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid number for %s: %r; treating as missing", field_name, value)
        return None
    if not math.isfinite(number):
        logger.warning("Invalid number for %s: %r; treating as missing", field_name, value)
        return None
    if integral:
        return int(number)
    return number


class PlayerRecord(BaseModel):
    """One player's accumulated performance state.

    Numeric fields are optional; anything that cannot be read as a number is
    stored as ``None`` and counted as 0 by the aggregation and report layers.
    """

    player_id: str = Field(..., min_length=1)
    name: str = ""
    email: str = ""
    sport: Optional[Sport] = None
    coach_id: Optional[str] = None
    current_score: Optional[float] = None
    match_count: Optional[int] = None
    total_score: Optional[float] = None
    average_score: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "email", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("sport", mode="before")
    @classmethod
    def _known_sport(cls, value: Any) -> Any:
        if value in (None, ""):
            return None
        lowered = str(value).strip().lower()
        if lowered not in {key for key, _ in SPORT_CHOICES}:
            logger.warning("Invalid sport for player: %r; leaving unset", value)
            return None
        return lowered

    @field_validator("current_score", "total_score", "average_score", mode="before")
    @classmethod
    def _lenient_float(cls, value: Any, info) -> Any:
        return _lenient_number(value, info.field_name)

    @field_validator("match_count", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any, info) -> Any:
        return _lenient_number(value, info.field_name, integral=True)

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any]) -> "PlayerRecord":
        """Build a record from a storage document with either key style."""

        data: dict[str, Any] = {}
        for field_name, keys in _DOCUMENT_ALIASES.items():
            for key in keys:
                if key in doc:
                    data[field_name] = doc[key]
                    break
        if data.get("player_id") is not None:
            data["player_id"] = str(data["player_id"])
        return cls(**data)
