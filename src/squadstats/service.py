"""Pipelines joining the pure core to its storage collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from squadstats.models import RegistrationCandidate, TeamSummary
from squadstats.persistence import RegistrationSink, RosterSource
from squadstats.report import REPORT_MEDIA_TYPE, ReportMetadata, report_filename, serialize
from squadstats.stats import aggregate
from squadstats.validation import ValidationResult, validate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamReport:
    summary: TeamSummary
    document: str
    filename: str
    media_type: str = REPORT_MEDIA_TYPE


@dataclass(frozen=True)
class RegistrationOutcome:
    user_id: Optional[str] = None
    errors: ValidationResult = field(default_factory=dict)

    @property
    def accepted(self) -> bool:
        return self.user_id is not None


def team_summary(source: RosterSource, coach_id: str) -> TeamSummary:
    return aggregate(source.get_roster_for_coach(coach_id))


def build_team_report(
    source: RosterSource,
    coach_id: str,
    generated_by_name: str,
    generated_at: Optional[date] = None,
) -> TeamReport:
    """Fetch the coach's roster, summarize it and render the CSV report.

    Errors from the roster fetch propagate; nothing is rendered without a roster.
    """

    roster = tuple(source.get_roster_for_coach(coach_id))
    day = generated_at or date.today()
    summary = aggregate(roster)
    document = serialize(
        summary,
        roster,
        ReportMetadata(generated_by_name=generated_by_name, generated_at=day),
    )
    logger.info(
        "Built team report for coach %s: %d players, %d matches",
        coach_id,
        summary.total_players,
        summary.total_matches,
    )
    return TeamReport(
        summary=summary,
        document=document,
        filename=report_filename(day),
    )


def register_user(sink: RegistrationSink, candidate: RegistrationCandidate) -> RegistrationOutcome:
    """Validate ``candidate`` and hand it to ``sink`` only when it is clean."""

    errors = validate(candidate)
    if errors:
        logger.info("Registration rejected for fields: %s", ", ".join(sorted(errors)))
        return RegistrationOutcome(errors=errors)
    user_id = sink.submit(candidate)
    return RegistrationOutcome(user_id=user_id)


__all__ = [
    "RegistrationOutcome",
    "TeamReport",
    "build_team_report",
    "register_user",
    "team_summary",
]
