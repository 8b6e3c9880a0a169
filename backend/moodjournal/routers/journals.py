# journals router — save new entries and list the stored history
# saving runs the same analysis as /mood-analysis and appends to the entry store

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from moodjournal.config import settings
from moodjournal.dependencies import get_narrator, get_store
from moodjournal.models.emotion import SentimentResult
from moodjournal.models.journal import JournalCreate, JournalEntry
from moodjournal.services.entry_store import EntryStore
from moodjournal.services.mood_analysis import FALLBACK_ENTRY_INSIGHT, analyze_entry, create_entry
from moodjournal.services.narrative_service import NarrativeGenerator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/journals", tags=["journals"])


@router.get("", response_model=list[JournalEntry])
async def list_journals(store: EntryStore = Depends(get_store)):
    """list all stored journal entries, oldest first"""
    return store.entries()


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def save_journal(
    body: JournalCreate,
    store: EntryStore = Depends(get_store),
    narrator: NarrativeGenerator = Depends(get_narrator),
):
    """create, analyze and store a new journal entry"""

    text = body.entry.strip()
    if len(text) < settings.JOURNAL_MIN_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Journal entries need at least {settings.JOURNAL_MIN_LENGTH} characters "
                   f"(got {len(text)})",
        )

    entry = create_entry(body.entry, body.is_incident, body.response_role)
    history = store.entries()
    previous = [e.sentiment_result for e in history[-settings.CONTEXT_ENTRIES:] if e.analyzed]

    try:
        analysis = await analyze_entry(
            entry.text,
            narrator,
            is_incident=entry.is_incident,
            response_role=entry.response_role,
            previous=previous,
        )
        entry.attach_analysis(analysis.sentiment, analysis.insight, analysis.suggestions)
    except Exception as e:
        # the entry is still saved, just without analysis
        logger.error(f"Analysis failed for journal {entry.id}: {e}")
        entry.attach_analysis(SentimentResult.placeholder(), FALLBACK_ENTRY_INSIGHT, [])

    # full-file rewrite, kept off the event loop
    await run_in_threadpool(store.append, entry)
    logger.info(f"Journal saved: {entry.id} ({len(history) + 1} entries)")
    return entry
