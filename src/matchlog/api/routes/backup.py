"""Backup API endpoint.

GET /api/backup - Export every match as downloadable JSON
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from matchlog.api.app import get_store
from matchlog.models.domain import utc_now_iso
from matchlog.models.types import Backup, MatchRecord
from matchlog.storage import MatchStore

router = APIRouter()


@router.get("/backup", response_model=Backup)
def export_backup(store: MatchStore = Depends(get_store)) -> JSONResponse:
    """Export all matches with an export timestamp.

    The body can be posted back to /api/matches/replace to restore.

    Returns:
        JSON response with Content-Disposition header for download.
    """
    exported_at = utc_now_iso()
    backup = Backup(
        exported_at=exported_at,
        matches=[MatchRecord.from_entity(m) for m in store.list_matches()],
    )

    return JSONResponse(
        content=backup.model_dump(by_alias=True),
        headers={
            "Content-Disposition": f'attachment; filename="matches-backup-{exported_at[:10]}.json"'
        },
    )
