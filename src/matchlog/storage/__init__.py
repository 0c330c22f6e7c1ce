"""Storage backends for match records.

build_store() picks the backend once from Settings: a configured
DATABASE_URL selects the relational backend, otherwise the JSON file.
"""

from __future__ import annotations

from matchlog.config import Settings
from matchlog.db.session import get_engine
from matchlog.storage.base import MatchStore
from matchlog.storage.file_store import FileMatchStore
from matchlog.storage.sql_store import SqlMatchStore

__all__ = ["FileMatchStore", "MatchStore", "SqlMatchStore", "build_store"]


def build_store(settings: Settings) -> MatchStore:
    """Create the backend selected by settings (not yet initialized)."""
    if settings.uses_database:
        return SqlMatchStore(get_engine(settings.database_url))
    return FileMatchStore(settings.data_file)
