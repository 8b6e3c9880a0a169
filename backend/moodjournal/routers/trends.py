# trends router — weekly trend and recommendations over the stored history

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from moodjournal.dependencies import get_store
from moodjournal.models.trend import TrendSnapshot
from moodjournal.services.entry_store import EntryStore
from moodjournal.services.trend_aggregator import aggregate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/trends", tags=["trends"])


@router.get("", response_model=TrendSnapshot)
async def get_trends(
    now: Optional[int] = Query(None, ge=0, description="reference time in ms since epoch, defaults to now"),
    store: EntryStore = Depends(get_store),
):
    """trend snapshot over the most recent entries"""
    return aggregate(store.entries(), now=now)
