"""CSV export of the team summary and per-player details."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence

from squadstats.models import PlayerRecord, TeamSummary
from squadstats.stats import classify


REPORT_MEDIA_TYPE = "text/csv"

REPORT_HEADERS: tuple[str, ...] = (
    "Player Name",
    "Email",
    "Sport",
    "Current Score (%)",
    "Performance Status",
    "Total Matches",
    "Average Score",
)

_QUOTE_TRIGGERS = (",", '"', "\n")


@dataclass(frozen=True)
class ReportMetadata:
    """Who generated the report, and on which day."""

    generated_by_name: str
    generated_at: date


def report_filename(day: date) -> str:
    return f"team-report-{day.isoformat()}.csv"


def _format_value(value: Any) -> str:
    # Integral floats print without a trailing ".0" (75, not 75.0).
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return ""
    return str(value)


def escape_cell(value: Any) -> str:
    """Quote a cell only when it holds a comma, a double quote or a newline."""

    text = _format_value(value)
    if any(trigger in text for trigger in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def _player_row(record: PlayerRecord) -> list[Any]:
    current_score = record.current_score or 0
    return [
        record.name or "",
        record.email or "",
        record.sport or "",
        current_score,
        classify(current_score).label,
        record.match_count or 0,
        record.average_score or 0,
    ]


def build_rows(
    summary: TeamSummary,
    records: Sequence[PlayerRecord],
    metadata: ReportMetadata,
) -> list[list[Any]]:
    """Return the report as unescaped rows, summary block first."""

    top_name = summary.top_performer.name if summary.top_performer is not None else ""
    rows: list[list[Any]] = [
        ["Team Performance Report"],
        ["Coach Name", metadata.generated_by_name or ""],
        ["Report Date", metadata.generated_at.isoformat()],
        [""],
        ["Team Statistics"],
        ["Total Players", summary.total_players],
        ["Team Average Score", f"{_format_value(summary.average_score)}%"],
        ["Total Matches", summary.total_matches],
        ["Top Performer", top_name or "N/A"],
        [""],
        ["Player Details"],
        list(REPORT_HEADERS),
    ]
    rows.extend(_player_row(record) for record in records)
    return rows


def serialize(
    summary: TeamSummary,
    records: Sequence[PlayerRecord],
    metadata: ReportMetadata,
) -> str:
    """Render the report document. Rows end with ``\\n`` except the last."""

    rows = build_rows(summary, records, metadata)
    return "\n".join(",".join(escape_cell(cell) for cell in row) for row in rows)


__all__ = [
    "REPORT_HEADERS",
    "REPORT_MEDIA_TYPE",
    "ReportMetadata",
    "build_rows",
    "escape_cell",
    "report_filename",
    "serialize",
]
