"""Pydantic models for API I/O."""

from .players import MatchPayload, PlayerPayload, RosterResponse
from .registration import RegistrationPayload, RegistrationResponse

__all__ = [
    "MatchPayload",
    "PlayerPayload",
    "RegistrationPayload",
    "RegistrationResponse",
    "RosterResponse",
]
