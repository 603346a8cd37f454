"""Roster aggregation producing the coach dashboard summary."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from squadstats.models import PlayerRecord, TeamSummary


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    The value is scaled by 100 in float arithmetic before rounding, so
    ``round2(201 / 200)`` is ``1.0``. Non-finite values round to 0.
    """

    value = float(value)
    if not math.isfinite(value):
        return 0.0
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        # Already far past float precision; nothing left to round.
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / 100


def _top_performer(records: Sequence[PlayerRecord]) -> Optional[PlayerRecord]:
    best: Optional[PlayerRecord] = None
    for record in records:
        if (record.match_count or 0) <= 0:
            continue
        # Strictly greater, so the earliest record keeps a tie.
        if best is None or (record.average_score or 0) > (best.average_score or 0):
            best = record
    return best


def aggregate(records: Sequence[PlayerRecord]) -> TeamSummary:
    """Summarize a roster snapshot.

    Missing or malformed numeric fields count as 0. The team average is
    weighted by matches played: ``sum(total_score) / sum(match_count)``.
    """

    total_players = len(records)
    if total_players == 0:
        return TeamSummary.empty()

    total_matches = sum(record.match_count or 0 for record in records)
    total_score = sum(record.total_score or 0 for record in records)
    average_score = 0.0
    if total_matches > 0:
        try:
            average_score = total_score / total_matches
        except OverflowError:
            average_score = 0.0

    return TeamSummary(
        total_players=total_players,
        average_score=round2(average_score),
        total_matches=total_matches,
        top_performer=_top_performer(records),
    )


__all__ = ["aggregate", "round2"]
