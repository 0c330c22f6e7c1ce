"""Database engine and session management.

Engines are cached per URL so the relational backend and tests pointing at
the same database share one connection pool.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from matchlog.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}


def get_engine(url: str) -> Engine:
    """Get SQLAlchemy engine for a database URL.

    SQLite needs check_same_thread=False because FastAPI runs sync routes in
    a thread pool; in-memory SQLite additionally needs StaticPool so every
    session sees the same database.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    if url in _engine_cache:
        return _engine_cache[url]

    kwargs: dict = {"echo": False}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **kwargs)
    _engine_cache[url] = engine
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with session_scope(factory) as session:
            session.add(record)
            # Auto-commits on exit, rolls back on exception
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """Create tables that do not exist yet. Idempotent."""
    Base.metadata.create_all(engine)

