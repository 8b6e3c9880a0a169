# mood analysis service — detect, classify, then ask the narrator for insight + suggestions
# shared by the analysis endpoint and the save-entry flow

import asyncio
import hashlib
import logging
import time
from datetime import datetime, timezone
from typing import Optional, Sequence

from moodjournal.models.emotion import SentimentResult
from moodjournal.models.journal import JournalEntry, MoodAnalysisResponse
from moodjournal.services.lexicon import emoji_for
from moodjournal.services.narrative_service import NarrativeGenerator
from moodjournal.services.sentiment import analyze

logger = logging.getLogger(__name__)

FALLBACK_ENTRY_INSIGHT = (
    "Thanks for sharing your thoughts. Reflecting on your feelings is an important step in emotional wellness."
)


def now_ms() -> int:
    return int(time.time() * 1000)


async def analyze_entry(
    text: str,
    narrator: NarrativeGenerator,
    is_incident: bool = False,
    response_role: str = "close_friend",
    previous: Sequence[Optional[SentimentResult]] = (),
) -> MoodAnalysisResponse:
    """full analysis of one entry. narrator failures are absorbed into default copy."""
    logger.info(
        f"Analyzing mood entry: length={len(text)}, incident={is_incident}, role={response_role}"
    )

    result = analyze(text)

    # insight and suggestions are independent llm calls
    insight, suggestions = await asyncio.gather(
        narrator.generate_insight(text, result, response_role, is_incident, previous),
        narrator.generate_suggestions(text, result, response_role, is_incident),
    )

    return MoodAnalysisResponse(
        sentiment=result,
        insight=insight,
        suggestions=suggestions,
        emoji=emoji_for(result.dominant_emotion),
        isIncident=is_incident,
        responseRole=response_role,
        timestamp=now_ms(),
    )


def create_entry(text: str, is_incident: bool, response_role: str) -> JournalEntry:
    """new unanalyzed entry. id is a short md5 of content + creation time."""
    timestamp = now_ms()
    raw = f"{text}:{timestamp}"
    entry_id = hashlib.md5(raw.encode()).hexdigest()[:12]
    date = datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).strftime("%Y-%m-%d")

    return JournalEntry(
        id=entry_id,
        timestamp=timestamp,
        date=date,
        text=text,
        isIncident=is_incident,
        responseRole=response_role,
    )
