"""Team performance tracking for coaches and players."""

from squadstats.models import PlayerRecord, RegistrationCandidate, TeamSummary
from squadstats.report import ReportMetadata, serialize
from squadstats.stats import aggregate, classify
from squadstats.validation import validate

__all__ = [
    "PlayerRecord",
    "RegistrationCandidate",
    "ReportMetadata",
    "TeamSummary",
    "aggregate",
    "classify",
    "serialize",
    "validate",
]
