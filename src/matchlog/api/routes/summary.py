"""Summary API endpoint.

GET /api/summary - Daily and total win ratios
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from matchlog.aggregation.summary import summarize
from matchlog.api.app import get_store
from matchlog.models.types import Summary
from matchlog.storage import MatchStore

router = APIRouter()


@router.get("/summary", response_model=Summary)
def get_summary(store: MatchStore = Depends(get_store)) -> Summary:
    """Aggregate all matches into daily and total win/loss/ratio."""
    return summarize(store.list_matches())
