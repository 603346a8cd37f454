"""Field-level validation for registration candidates.

Every rule runs on every call, so the caller gets all field errors at once.
An empty result means the candidate may be submitted.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from squadstats.models import RegistrationCandidate


ValidationResult = Dict[str, str]

NAME_REQUIRED = "Full name is required"
NAME_TOO_SHORT = "Name must be at least 2 characters long"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = "Password must be at least 6 characters long"
CONFIRM_PASSWORD_REQUIRED = "Please confirm your password"
CONFIRM_PASSWORD_MISMATCH = "Passwords do not match"
ROLE_REQUIRED = "Please select your role"
SPORT_REQUIRED = "Please select your sport"

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def _check_name(candidate: RegistrationCandidate) -> Optional[str]:
    name = candidate.name.strip()
    if not name:
        return NAME_REQUIRED
    if len(name) < MIN_NAME_LENGTH:
        return NAME_TOO_SHORT
    return None


def _check_email(candidate: RegistrationCandidate) -> Optional[str]:
    if not candidate.email.strip():
        return EMAIL_REQUIRED
    if not _EMAIL_PATTERN.search(candidate.email):
        return EMAIL_INVALID
    return None


def _check_password(candidate: RegistrationCandidate) -> Optional[str]:
    if not candidate.password:
        return PASSWORD_REQUIRED
    if len(candidate.password) < MIN_PASSWORD_LENGTH:
        return PASSWORD_TOO_SHORT
    return None


def _check_confirm_password(candidate: RegistrationCandidate) -> Optional[str]:
    if not candidate.confirm_password:
        return CONFIRM_PASSWORD_REQUIRED
    if candidate.confirm_password != candidate.password:
        return CONFIRM_PASSWORD_MISMATCH
    return None


def _check_role(candidate: RegistrationCandidate) -> Optional[str]:
    if not candidate.role:
        return ROLE_REQUIRED
    return None


def _check_sport(candidate: RegistrationCandidate) -> Optional[str]:
    # Only players pick a sport; any other role ignores the field.
    if candidate.role == "player" and not candidate.sport:
        return SPORT_REQUIRED
    return None


_RULES: tuple[tuple[str, Callable[[RegistrationCandidate], Optional[str]]], ...] = (
    ("name", _check_name),
    ("email", _check_email),
    ("password", _check_password),
    ("confirm_password", _check_confirm_password),
    ("role", _check_role),
    ("sport", _check_sport),
)


def validate(candidate: RegistrationCandidate) -> ValidationResult:
    errors: ValidationResult = {}
    for field_name, rule in _RULES:
        message = rule(candidate)
        if message is not None:
            errors[field_name] = message
    return errors


def is_valid(candidate: RegistrationCandidate) -> bool:
    return not validate(candidate)


__all__ = [
    "CONFIRM_PASSWORD_MISMATCH",
    "CONFIRM_PASSWORD_REQUIRED",
    "EMAIL_INVALID",
    "EMAIL_REQUIRED",
    "NAME_REQUIRED",
    "NAME_TOO_SHORT",
    "PASSWORD_REQUIRED",
    "PASSWORD_TOO_SHORT",
    "ROLE_REQUIRED",
    "SPORT_REQUIRED",
    "ValidationResult",
    "is_valid",
    "validate",
]
