"""Shared pytest fixtures for matchlog tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from matchlog.api.app import create_app
from matchlog.config import Settings
from matchlog.db.schema import Base
from matchlog.storage import FileMatchStore, SqlMatchStore


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing.

    StaticPool and check_same_thread=False let TestClient's worker threads
    share the one in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the file backend and static dir into tmp_path."""
    return Settings(
        data_dir=tmp_path / "data",
        public_dir=tmp_path / "public",
        database_url=None,
    )


@pytest.fixture
def file_store(settings):
    store = FileMatchStore(settings.data_file)
    store.init()
    return store


@pytest.fixture
def sql_store(engine):
    store = SqlMatchStore(engine)
    store.init()
    return store


@pytest.fixture(params=["file", "sql"])
def store(request):
    """Each backend in turn, initialized and empty."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(settings, store):
    """TestClient for an app backed by the parametrized store."""
    app = create_app(settings, store=store)
    return TestClient(app)
