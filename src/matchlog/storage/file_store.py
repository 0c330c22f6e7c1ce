"""JSON file backend.

The whole collection lives in one pretty-printed JSON array that is fully
rewritten on every mutation.

Known limitation: writes are not locked. Two concurrent appends can both
read the old array and the second write drops the first record.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from matchlog.errors import StorageError
from matchlog.models.domain import MatchEntity, created_at_sort_key
from matchlog.storage.base import MatchStore
from matchlog.validation import is_valid_match

logger = logging.getLogger(__name__)


class FileMatchStore(MatchStore):
    """Stores matches in a single JSON document."""

    label = "file"

    def __init__(self, path: Path):
        """Initialize store.

        Args:
            path: Location of the JSON document (e.g. data/matches.json).
        """
        self.path = Path(path)

    def init(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot prepare {self.path}: {e}") from e

    def _load_raw(self) -> list:
        """Read the document as parsed JSON, degrading to [] on corrupt content.

        Entries are returned untouched, including ones that are not valid
        matches, so read-modify-write never drops them from disk.
        """
        self.init()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning("Corrupt match file %s, treating as empty", self.path)
            return []

        if not isinstance(parsed, list):
            logger.warning("Match file %s does not hold an array, treating as empty", self.path)
            return []
        return parsed

    def _save_raw(self, entries: list) -> None:
        payload = json.dumps(entries, indent=2)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def list_matches(self) -> list[MatchEntity]:
        matches = []
        for item in self._load_raw():
            if is_valid_match(item):
                matches.append(MatchEntity.from_json(item))
            else:
                logger.warning("Skipping malformed entry in %s: %r", self.path, item)
        # sorted() is stable, so equal timestamps keep file order
        return sorted(matches, key=created_at_sort_key)

    def append(self, match: MatchEntity) -> None:
        entries = self._load_raw()
        entries.append(match.to_json())
        self._save_raw(entries)

    def delete_by_id(self, match_id: str) -> bool:
        entries = self._load_raw()
        remaining = [e for e in entries if not (isinstance(e, dict) and e.get("id") == match_id)]
        if len(remaining) == len(entries):
            return False
        self._save_raw(remaining)
        return True

    def replace_all(self, matches: Sequence[MatchEntity]) -> None:
        self._save_raw([m.to_json() for m in matches])
