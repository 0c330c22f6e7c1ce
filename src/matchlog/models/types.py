"""Pydantic models for the Matchlog API.

Request bodies are deliberately loose (plain strings / Any) so that the
validation module owns the error messages clients see.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from matchlog.models.domain import MatchEntity


class MatchCreate(BaseModel):
    """Body of POST /api/matches."""

    date: str | None = None
    result: str | None = None


class MatchReplace(BaseModel):
    """Body of POST /api/matches/replace."""

    matches: Any = None


class MatchRecord(BaseModel):
    """A stored match as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    result: Literal["win", "loss"]
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, entity: MatchEntity) -> MatchRecord:
        return cls(
            id=entity.id,
            date=entity.date,
            result=entity.result,
            created_at=entity.created_at,
        )


class DailySummary(BaseModel):
    """Win/loss counts for one calendar date."""

    date: str
    wins: int
    losses: int
    games: int
    ratio: float


class SummaryTotals(BaseModel):
    """Win/loss counts over the whole collection."""

    wins: int
    losses: int
    games: int
    ratio: float


class Summary(BaseModel):
    """Response of GET /api/summary."""

    totals: SummaryTotals
    daily: list[DailySummary]


class Backup(BaseModel):
    """Response of GET /api/backup."""

    model_config = ConfigDict(populate_by_name=True)

    exported_at: str = Field(alias="exportedAt")
    matches: list[MatchRecord]


class OkResponse(BaseModel):
    ok: bool = True


class ReplaceResponse(BaseModel):
    ok: bool = True
    count: int


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str = "ok"
    storage: str
