"""Persistence layer for rosters and registered users."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Protocol
from uuid import uuid4

from passlib.context import CryptContext

from squadstats.models import PlayerRecord, RegistrationCandidate
from squadstats.stats import round2


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class RegistrationError(RuntimeError):
    """Raised when the user store refuses a validated registration."""


class RosterSource(Protocol):
    def get_roster_for_coach(self, coach_id: str) -> List[PlayerRecord]:
        ...


class RegistrationSink(Protocol):
    def submit(self, candidate: RegistrationCandidate) -> str:
        ...


@dataclass
class UserRecord:
    user_id: str
    created_at: datetime
    email: str
    name: str
    role: str
    sport: Optional[str]
    password_hash: str


_PLAYER_COLUMNS = (
    "id",
    "coach_id",
    "name",
    "email",
    "sport",
    "current_score",
    "match_count",
    "total_score",
    "average_score",
)


class PlayerStore:
    """SQLite-backed store for player records and user accounts."""

    def __init__(self, db_path: Path | str):
        self._use_uri = isinstance(db_path, str) and db_path.startswith("file:")
        self.db_path = db_path if self._use_uri else Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS players (
                    id TEXT PRIMARY KEY,
                    coach_id TEXT,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    sport TEXT,
                    current_score REAL,
                    match_count INTEGER,
                    total_score REAL,
                    average_score REAL,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    email TEXT NOT NULL UNIQUE,
                    name TEXT NOT NULL,
                    role TEXT NOT NULL,
                    sport TEXT,
                    password_hash TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.commit()

    def upsert_player(self, record: PlayerRecord) -> PlayerRecord:
        created_at = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO players (
                    id, coach_id, name, email, sport, current_score,
                    match_count, total_score, average_score, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    coach_id = excluded.coach_id,
                    name = excluded.name,
                    email = excluded.email,
                    sport = excluded.sport,
                    current_score = excluded.current_score,
                    match_count = excluded.match_count,
                    total_score = excluded.total_score,
                    average_score = excluded.average_score
                """,
                (
                    record.player_id,
                    record.coach_id,
                    record.name,
                    record.email,
                    record.sport,
                    record.current_score,
                    record.match_count,
                    record.total_score,
                    record.average_score,
                    created_at,
                ),
            )
            conn.commit()
        return record

    def get_player(self, player_id: str) -> Optional[PlayerRecord]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
            if row is None:
                return None
            return self._row_to_player(row)

    def get_roster_for_coach(self, coach_id: str) -> List[PlayerRecord]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM players WHERE coach_id = ? ORDER BY datetime(created_at), rowid",
                (coach_id,),
            ).fetchall()
        return [self._row_to_player(row) for row in rows]

    def record_match(self, player_id: str, score: float) -> PlayerRecord:
        """Add one match result and refresh the player's running totals."""

        with self._connect() as conn:
            row = conn.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
            if row is None:
                raise KeyError(f"Unknown player {player_id!r}")
            current = self._row_to_player(row)
            match_count = (current.match_count or 0) + 1
            total_score = (current.total_score or 0) + score
            average_score = round2(total_score / match_count)
            conn.execute(
                """
                UPDATE players
                SET current_score = ?, match_count = ?, total_score = ?, average_score = ?
                WHERE id = ?
                """,
                (score, match_count, total_score, average_score, player_id),
            )
            conn.commit()
        return current.model_copy(
            update={
                "current_score": float(score),
                "match_count": match_count,
                "total_score": float(total_score),
                "average_score": average_score,
            }
        )

    def submit(self, candidate: RegistrationCandidate) -> str:
        email, password, name, role, sport = candidate.submission_fields()
        if self.get_user_by_email(email) is not None:
            raise RegistrationError("Email already registered")
        user_id = uuid4().hex
        with self._connect() as conn:
            try:
                conn.execute(
                    """
                    INSERT INTO users (id, email, name, role, sport, password_hash, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user_id,
                        email,
                        name,
                        role,
                        sport,
                        pwd_context.hash(password),
                        datetime.now(timezone.utc).isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as exc:
                raise RegistrationError("Email already registered") from exc
            conn.commit()
        return user_id

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    def verify_password(self, email: str, password: str) -> bool:
        user = self.get_user_by_email(email)
        if user is None:
            return False
        return pwd_context.verify(password, user.password_hash)

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> PlayerRecord:
        data = {column: row[column] for column in _PLAYER_COLUMNS}
        data["player_id"] = data.pop("id")
        return PlayerRecord(**data)

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRecord:
        return UserRecord(
            user_id=row["id"],
            created_at=datetime.fromisoformat(row["created_at"]),
            email=row["email"],
            name=row["name"],
            role=row["role"],
            sport=row["sport"],
            password_hash=row["password_hash"],
        )


__all__ = [
    "PlayerStore",
    "RegistrationError",
    "RegistrationSink",
    "RosterSource",
    "UserRecord",
    "pwd_context",
]
