"""Daily and total win-ratio aggregation.

Pure function - no storage access, no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from matchlog.models.domain import MatchEntity
from matchlog.models.types import DailySummary, Summary, SummaryTotals


@dataclass
class _Tally:
    """Mutable win/loss counter for one bucket."""

    wins: int = 0
    losses: int = 0

    def add(self, result: str) -> None:
        if result == "win":
            self.wins += 1
        else:
            self.losses += 1

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def ratio(self) -> float:
        # Zero games reports a ratio of 0 rather than NaN
        return self.wins / self.games if self.games else 0.0


def summarize(matches: Iterable[MatchEntity]) -> Summary:
    """Compute per-day and total win/loss/ratio summaries.

    Result is independent of input order: days are grouped by date and
    sorted ascending (lexicographic order is chronological for YYYY-MM-DD).

    Args:
        matches: Match entities in any order.

    Returns:
        Summary with totals and daily entries.
    """
    totals = _Tally()
    by_day: dict[str, _Tally] = {}

    for match in matches:
        by_day.setdefault(match.date, _Tally()).add(match.result)
        totals.add(match.result)

    daily = [
        DailySummary(
            date=day,
            wins=tally.wins,
            losses=tally.losses,
            games=tally.games,
            ratio=tally.ratio,
        )
        for day, tally in sorted(by_day.items())
    ]

    return Summary(
        totals=SummaryTotals(
            wins=totals.wins,
            losses=totals.losses,
            games=totals.games,
            ratio=totals.ratio,
        ),
        daily=daily,
    )
