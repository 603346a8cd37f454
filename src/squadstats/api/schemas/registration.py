from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from squadstats.models import ROLE_CHOICES, RegistrationCandidate


class RegistrationPayload(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: Optional[str] = None
    sport: Optional[str] = None

    def to_candidate(self) -> RegistrationCandidate:
        role = self.role if self.role in {key for key, _ in ROLE_CHOICES} else ""
        candidate = RegistrationCandidate(
            name=self.name,
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
            sport=self.sport or "",
        )
        return candidate.with_role(role)


class RegistrationResponse(BaseModel):
    user_id: str
