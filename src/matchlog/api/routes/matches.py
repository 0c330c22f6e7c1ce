"""Matches API endpoints.

GET /api/matches - List all matches, oldest first
POST /api/matches - Log a new match
POST /api/matches/replace - Replace the whole collection
DELETE /api/matches/{match_id} - Delete one match
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from matchlog.api.app import get_store
from matchlog.errors import NotFoundError
from matchlog.models.domain import MatchEntity, utc_now_iso
from matchlog.models.types import (
    ErrorResponse,
    MatchCreate,
    MatchRecord,
    MatchReplace,
    OkResponse,
    ReplaceResponse,
)
from matchlog.storage import MatchStore
from matchlog.validation import validate_new_match, validate_replacement

router = APIRouter()


@router.get("/matches", response_model=list[MatchRecord])
def list_matches(store: MatchStore = Depends(get_store)) -> list[MatchRecord]:
    """List all matches ordered by createdAt ascending."""
    return [MatchRecord.from_entity(m) for m in store.list_matches()]


@router.post(
    "/matches",
    response_model=OkResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_match(
    body: MatchCreate,
    store: MatchStore = Depends(get_store),
) -> OkResponse:
    """Log a new match.

    The server assigns id and createdAt.

    Raises:
        ValidationError: 400 if date or result is malformed.
    """
    validate_new_match(body.date, body.result)

    store.append(
        MatchEntity(
            id=str(uuid.uuid4()),
            date=body.date,
            result=body.result,
            created_at=utc_now_iso(),
        )
    )
    return OkResponse()


@router.post(
    "/matches/replace",
    response_model=ReplaceResponse,
    responses={400: {"model": ErrorResponse}},
)
def replace_matches(
    body: MatchReplace,
    store: MatchStore = Depends(get_store),
) -> ReplaceResponse:
    """Atomically replace the whole collection (restore from backup).

    Raises:
        ValidationError: 400 if the payload or any element is invalid;
            nothing is written in that case.
    """
    matches = validate_replacement(body.matches)
    store.replace_all(matches)
    return ReplaceResponse(count=len(matches))


@router.delete(
    "/matches/{match_id}",
    response_model=OkResponse,
    responses={404: {"model": ErrorResponse}},
)
def delete_match(
    match_id: str,
    store: MatchStore = Depends(get_store),
) -> OkResponse:
    """Delete a match by id.

    Raises:
        NotFoundError: 404 if no match has that id.
    """
    if not store.delete_by_id(match_id):
        raise NotFoundError("Match not found")
    return OkResponse()
