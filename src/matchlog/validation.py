"""Structural checks on inbound match payloads.

All checks run before any storage mutation, so a rejected request never
leaves a partial write behind.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date as Date
from typing import Any

from matchlog.errors import ValidationError
from matchlog.models.domain import RESULTS, MatchEntity

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_valid_date(value: Any) -> bool:
    """True for a YYYY-MM-DD string naming a real calendar day."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        Date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_match(candidate: Any) -> bool:
    """True when candidate looks like a complete stored match."""
    return (
        isinstance(candidate, Mapping)
        and isinstance(candidate.get("id"), str)
        and is_valid_date(candidate.get("date"))
        and candidate.get("result") in RESULTS
        and isinstance(candidate.get("createdAt"), str)
    )


def validate_new_match(date: Any, result: Any) -> None:
    """Validate the client-supplied fields of a new match.

    Raises:
        ValidationError: If date or result is malformed.
    """
    if not is_valid_date(date):
        raise ValidationError("Date must be YYYY-MM-DD")
    if result not in RESULTS:
        raise ValidationError("Result must be win or loss")


def validate_replacement(matches: Any) -> list[MatchEntity]:
    """Validate a bulk-replace payload and convert it to entities.

    Rejects the whole payload if any element is invalid or if two elements
    share an id.

    Raises:
        ValidationError: If matches is not a list, holds an invalid element,
            or repeats an id.
    """
    if not isinstance(matches, list):
        raise ValidationError("matches must be an array")
    if not all(is_valid_match(m) for m in matches):
        raise ValidationError("Invalid match object(s) in payload")
    ids = [m["id"] for m in matches]
    if len(set(ids)) != len(ids):
        raise ValidationError("Duplicate match id(s) in payload")
    return [MatchEntity.from_json(m) for m in matches]
