"""Registration form input, validated before it reaches the user store."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict


Role = Literal["coach", "player", ""]

ROLE_CHOICES: list[tuple[str, str]] = [
    ("coach", "Coach"),
    ("player", "Player"),
]


class RegistrationCandidate(BaseModel):
    """Fixed-shape registration input; ``sport`` is always present."""

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: Role = ""
    sport: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "email", "password", "confirm_password", "sport", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("role", mode="before")
    @classmethod
    def _role_none_to_unset(cls, value):
        return "" if value is None else value

    def with_role(self, role: Role) -> "RegistrationCandidate":
        """Return a copy with ``role`` set; switching to coach drops the sport."""

        update: dict[str, str] = {"role": role}
        if role == "coach":
            update["sport"] = ""
        return self.model_copy(update=update)

    def submission_fields(self) -> tuple[str, str, str, str, Optional[str]]:
        sport = self.sport if self.role == "player" and self.sport else None
        return self.email, self.password, self.name.strip(), self.role, sport
