#!/usr/bin/env python3
"""Smoke test for the demo collection.

Validates that the demo matches were seeded and that the API serves them
and summarizes them consistently. Runs the app in-process.

Usage:
    python scripts/seed_demo.py && python scripts/smoke_demo.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

from fastapi.testclient import TestClient

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from matchlog.api.app import create_app  # noqa: E402
from matchlog.config import load_settings  # noqa: E402


def check_matches_exist(client: TestClient) -> list[dict]:
    """Check that the collection is non-empty and ordered."""
    matches = client.get("/api/matches").json()

    if not matches:
        print("FAIL: No matches found (run scripts/seed_demo.py first)")
        return []

    print(f"OK: Found {len(matches)} matches")

    stamps = [m["createdAt"] for m in matches]
    if stamps != sorted(stamps):
        print("FAIL: Matches are not ordered by createdAt")
        return []

    print("OK: Matches ordered by createdAt")
    return matches


def check_summary(client: TestClient, matches: list[dict]) -> bool:
    """Check that summary totals agree with the raw collection."""
    summary = client.get("/api/summary").json()
    totals = summary["totals"]
    wins = sum(1 for m in matches if m["result"] == "win")

    all_ok = True
    if totals["games"] != len(matches) or totals["wins"] != wins:
        print(f"FAIL: Totals {totals} disagree with {len(matches)} matches / {wins} wins")
        all_ok = False
    else:
        print(f"OK: Totals {totals['wins']}W/{totals['losses']}L ratio={totals['ratio']:.3f}")

    daily_games = sum(d["games"] for d in summary["daily"])
    if daily_games != len(matches):
        print(f"FAIL: Daily buckets hold {daily_games} games, expected {len(matches)}")
        all_ok = False
    else:
        print(f"OK: {len(summary['daily'])} daily buckets")

    return all_ok


def check_backup(client: TestClient, matches: list[dict]) -> bool:
    """Check that the backup export carries the full collection."""
    backup = client.get("/api/backup").json()
    if backup["matches"] != matches:
        print("FAIL: Backup does not match /api/matches")
        return False
    print(f"OK: Backup exported at {backup['exportedAt']}")
    return True


def main() -> int:
    """Run all smoke checks.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    print("=" * 60)
    print("Matchlog Demo Smoke Test")
    print("=" * 60)
    print()

    client = TestClient(create_app(load_settings()))

    matches = check_matches_exist(client)
    if not matches:
        return 1

    all_passed = check_summary(client, matches) and check_backup(client, matches)

    print()
    print("=" * 60)
    print("All checks passed!" if all_passed else "Some checks failed!")
    print("=" * 60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
