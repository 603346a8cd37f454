"""Registration form validation."""

from .registration import (
    CONFIRM_PASSWORD_MISMATCH,
    CONFIRM_PASSWORD_REQUIRED,
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    NAME_TOO_SHORT,
    PASSWORD_REQUIRED,
    PASSWORD_TOO_SHORT,
    ROLE_REQUIRED,
    SPORT_REQUIRED,
    ValidationResult,
    is_valid,
    validate,
)

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
