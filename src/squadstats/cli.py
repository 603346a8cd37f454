"""Command-line interface for team summaries and report export."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from squadstats.config import load_settings
from squadstats.persistence import PlayerStore
from squadstats.service import build_team_report, team_summary


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Team performance summaries and reports")
    parser.add_argument("--db", type=Path, default=None, help="SQLite database path (overrides SQUADSTATS_DB_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser("summary", help="Print the team summary as JSON")
    summary.add_argument("--coach-id", required=True, help="Coach whose roster is summarized")

    report = subparsers.add_parser("report", help="Write the team CSV report")
    report.add_argument("--coach-id", required=True, help="Coach whose roster is exported")
    report.add_argument("--coach-name", default="", help="Name printed in the report header")
    report.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Report date as YYYY-MM-DD (defaults to today)",
    )
    report.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output CSV path (defaults to team-report-<date>.csv)",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level_value, format="%(levelname)s %(name)s: %(message)s")

    store = PlayerStore(args.db or settings.db_path)

    if args.command == "summary":
        summary = team_summary(store, args.coach_id)
        print(json.dumps(summary.model_dump(), indent=2))
        return

    if args.command == "report":
        report = build_team_report(store, args.coach_id, args.coach_name, args.date)
        output = args.output or Path(report.filename)
        output.write_text(report.document, encoding="utf-8")
        print(f"Report for {report.summary.total_players} players written to {output}")
        return

    if args.command == "serve":
        import uvicorn

        from squadstats.api import create_app

        uvicorn.run(create_app(store), host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
