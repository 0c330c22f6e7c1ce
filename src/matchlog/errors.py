"""Error taxonomy for Matchlog.

The API layer maps these to HTTP responses in one place:
ValidationError -> 400, NotFoundError -> 404, StorageError -> 500.
"""

from __future__ import annotations


class MatchlogError(Exception):
    """Base class for all Matchlog errors."""


class ValidationError(MatchlogError):
    """Malformed or out-of-range input. Message is safe to show clients."""


class NotFoundError(MatchlogError):
    """Requested match does not exist."""


class StorageError(MatchlogError):
    """I/O or database failure in a storage backend."""
