"""Domain models for Matchlog.

Pure Python dataclasses independent of SQLAlchemy and of the wire format.
Storage backends return these; the API layer converts them to pydantic
response models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

MatchResult = Literal["win", "loss"]

RESULTS: tuple[str, ...] = ("win", "loss")


@dataclass(frozen=True)
class MatchEntity:
    """Domain model for one logged match outcome.

    created_at is kept as the ISO-8601 string the record was created or
    restored with, so file-backed records round-trip unchanged.
    """

    id: str
    date: str
    result: MatchResult
    created_at: str

    def to_json(self) -> dict:
        """Serialize using the wire/file key names."""
        return {
            "id": self.id,
            "date": self.date,
            "result": self.result,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_json(cls, data: dict) -> MatchEntity:
        """Build from a wire/file mapping. Caller validates first."""
        return cls(
            id=data["id"],
            date=data["date"],
            result=data["result"],
            created_at=data["createdAt"],
        )


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with millisecond precision and Z.

    Naive datetimes are treated as UTC (SQLite drops tzinfo on read).
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current time as a createdAt/exportedAt string."""
    return format_timestamp(datetime.now(timezone.utc))


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 createdAt string into an aware UTC datetime.

    Naive values are treated as UTC.

    Raises:
        ValueError: If value is not an ISO-8601 timestamp.
    """
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def created_at_sort_key(match: MatchEntity) -> tuple[int, datetime, str]:
    """Order by instant; unparseable createdAt strings go last, by raw text."""
    try:
        return (0, parse_timestamp(match.created_at), "")
    except ValueError:
        return (1, _EPOCH, match.created_at)
