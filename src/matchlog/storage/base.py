"""Base storage interface.

Exactly one backend is active per process, chosen at startup by
build_store(). Route handlers only ever see MatchStore.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from matchlog.models.domain import MatchEntity


class MatchStore(ABC):
    """Abstract base class for match persistence backends.

    Implementations raise StorageError for I/O or database failures and
    never raise for a missing id.
    """

    label: str = "unknown"

    @abstractmethod
    def init(self) -> None:
        """Prepare the backend before it accepts traffic. Idempotent."""
        pass

    @abstractmethod
    def list_matches(self) -> list[MatchEntity]:
        """Return all matches ordered by createdAt ascending."""
        pass

    @abstractmethod
    def append(self, match: MatchEntity) -> None:
        """Persist a new match."""
        pass

    @abstractmethod
    def delete_by_id(self, match_id: str) -> bool:
        """Remove the match with match_id.

        Returns:
            True if a match was removed, False if none had that id.
        """
        pass

    @abstractmethod
    def replace_all(self, matches: Sequence[MatchEntity]) -> None:
        """Discard the whole collection and install matches in its place."""
        pass

    def describe(self) -> str:
        """Short label for logs and the health endpoint."""
        return self.label
