"""Relational backend on SQLAlchemy.

replace_all runs delete-all plus inserts in one transaction; append and
delete_by_id are single statements, each committed on its own.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date, datetime

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError

from matchlog.db.schema import Match
from matchlog.db.session import init_db, make_session_factory, session_scope
from matchlog.errors import StorageError
from matchlog.models.domain import MatchEntity, format_timestamp, parse_timestamp
from matchlog.storage.base import MatchStore

# ============================================================================
# Converters: SQLAlchemy <-> Domain
# ============================================================================


def _row_to_entity(row: Match) -> MatchEntity:
    """Convert SQLAlchemy Match to domain entity."""
    return MatchEntity(
        id=row.id,
        date=row.match_date.isoformat(),
        result=row.result,
        created_at=format_timestamp(row.created_at),
    )


def _parse_created_at(value: str) -> datetime:
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise StorageError(f"Unparseable createdAt {value!r}") from e


def _entity_to_row(entity: MatchEntity) -> Match:
    """Convert domain entity to SQLAlchemy Match."""
    return Match(
        id=entity.id,
        match_date=date.fromisoformat(entity.date),
        result=entity.result,
        created_at=_parse_created_at(entity.created_at),
    )


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Re-raise database failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        raise StorageError(f"Database error during {action}: {e}") from e


class SqlMatchStore(MatchStore):
    """Stores matches in the `matches` table of a SQL database."""

    def __init__(self, engine: Engine):
        """Initialize store.

        Args:
            engine: SQLAlchemy engine (see matchlog.db.session.get_engine).
        """
        self.engine = engine
        self._session_factory = make_session_factory(engine)
        self.label = "PostgreSQL" if engine.dialect.name == "postgresql" else engine.dialect.name

    def init(self) -> None:
        with _storage_errors("schema creation"):
            init_db(self.engine)

    def list_matches(self) -> list[MatchEntity]:
        with _storage_errors("list"), session_scope(self._session_factory) as session:
            rows = session.scalars(select(Match).order_by(Match.created_at, Match.id)).all()
            return [_row_to_entity(r) for r in rows]

    def append(self, match: MatchEntity) -> None:
        row = _entity_to_row(match)
        with _storage_errors("insert"), session_scope(self._session_factory) as session:
            session.add(row)

    def delete_by_id(self, match_id: str) -> bool:
        with _storage_errors("delete"), session_scope(self._session_factory) as session:
            result = session.execute(delete(Match).where(Match.id == match_id))
            return result.rowcount > 0

    def replace_all(self, matches: Sequence[MatchEntity]) -> None:
        # Convert up front so a bad timestamp fails before the transaction starts
        rows = [_entity_to_row(m) for m in matches]
        with _storage_errors("replace"), session_scope(self._session_factory) as session:
            session.execute(delete(Match))
            session.add_all(rows)
