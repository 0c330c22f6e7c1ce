#!/usr/bin/env python3
"""Seed demo match history into the configured backend.

Replaces the whole collection with two weeks of deterministic demo
matches so the summary and the front-end have something to show.

Usage:
    python scripts/seed_demo.py            # file backend under ./data
    DATABASE_URL=sqlite:///demo.db python scripts/seed_demo.py

This script:
1. Loads settings from the environment
2. Initializes the selected backend
3. Replaces all matches with the demo set
"""

from __future__ import annotations

import random
import sys
import uuid
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from matchlog.config import load_settings  # noqa: E402
from matchlog.models.domain import MatchEntity, format_timestamp  # noqa: E402
from matchlog.storage import build_store  # noqa: E402

# Constants
DEMO_DAYS = 14
DEMO_SEED = 42
DEMO_START = date(2024, 1, 1)

# Chance of a win on any given match
DEMO_WIN_RATE = 0.55


def build_demo_matches() -> list[MatchEntity]:
    """Build the demo set: 2-6 matches per day, oldest first."""
    rng = random.Random(DEMO_SEED)
    matches = []

    for offset in range(DEMO_DAYS):
        day = DEMO_START + timedelta(days=offset)
        evening = datetime.combine(day, time(19, 0), tzinfo=timezone.utc)
        for game in range(rng.randint(2, 6)):
            matches.append(
                MatchEntity(
                    id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                    date=day.isoformat(),
                    result="win" if rng.random() < DEMO_WIN_RATE else "loss",
                    created_at=format_timestamp(evening + timedelta(minutes=20 * game)),
                )
            )

    return matches


def main() -> int:
    """Seed the demo collection.

    Returns:
        Exit code (0 for success).
    """
    settings = load_settings()
    store = build_store(settings)
    store.init()

    matches = build_demo_matches()
    store.replace_all(matches)

    wins = sum(1 for m in matches if m.result == "win")
    print(f"Seeded {len(matches)} matches ({wins} wins) into {store.describe()} storage")
    return 0


if __name__ == "__main__":
    sys.exit(main())
