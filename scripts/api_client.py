"""Lightweight REST client for the squadstats API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the squadstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("coach_id", help="Coach whose roster is queried")
    parser.add_argument("--coach-name", default="", help="Name printed in the report header")
    parser.add_argument("--list-players", action="store_true", help="List the coach's roster and exit")
    parser.add_argument("--export-report", action="store_true", help="Download the team CSV report")
    parser.add_argument("--export-path", type=Path, help="Destination path for exported CSV")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_players:
            resp = client.get(f"/coaches/{args.coach_id}/players")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.export_report:
            resp = client.get(
                f"/coaches/{args.coach_id}/report.csv",
                params={"coach_name": args.coach_name},
            )
            resp.raise_for_status()
            if args.export_path:
                args.export_path.write_text(resp.text, encoding="utf-8")
                print(f"CSV export saved to {args.export_path}")
            else:
                print(resp.text)
            return

        resp = client.get(f"/coaches/{args.coach_id}/summary")
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
