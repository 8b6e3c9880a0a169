# fastapi dependency injection
# provides the process-wide entry store and narrative generator built in the lifespan

import logging
from fastapi import Request

from moodjournal.services.entry_store import EntryStore
from moodjournal.services.narrative_service import NarrativeGenerator

logger = logging.getLogger(__name__)


async def get_store(request: Request) -> EntryStore:
    """entry store owned by the running app"""
    return request.app.state.entry_store


async def get_narrator(request: Request) -> NarrativeGenerator:
    """narrative generator owned by the running app"""
    return request.app.state.narrator
