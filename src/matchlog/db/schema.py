"""Database schema for Matchlog.

A single table; the CHECK constraint mirrors the result enum so the
database rejects rows the validation layer would reject.
"""

from datetime import date, datetime

from sqlalchemy import CheckConstraint, Date, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Match(Base):
    """One logged match outcome."""

    __tablename__ = "matches"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    match_date: Mapped[date] = mapped_column(Date, nullable=False)
    result: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint("result IN ('win', 'loss')", name="ck_matches_result"),
    )
