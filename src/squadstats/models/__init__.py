"""Canonical models shared by the stats, report and validation layers."""

from .player import SPORT_CHOICES, PlayerRecord, Sport
from .registration import ROLE_CHOICES, RegistrationCandidate, Role
from .team import TeamSummary

__all__ = [
    "PlayerRecord",
    "RegistrationCandidate",
    "Role",
    "ROLE_CHOICES",
    "Sport",
    "SPORT_CHOICES",
    "TeamSummary",
]
