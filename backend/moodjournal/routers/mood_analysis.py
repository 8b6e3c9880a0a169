# mood analysis router — keyword emotion detection + role-flavored llm insight
# stateless: nothing is stored, the client keeps its own history

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from moodjournal.dependencies import get_narrator
from moodjournal.models.journal import MoodAnalysisRequest, MoodAnalysisResponse
from moodjournal.services.mood_analysis import analyze_entry
from moodjournal.services.narrative_service import NarrativeGenerator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/mood-analysis", tags=["mood-analysis"])

EMPTY_ENTRY_ERROR = "Hey, you gotta write something for me to help you with!"
ANALYSIS_FAILED_ERROR = "Failed to analyze mood entry"
ANALYSIS_FAILED_MESSAGE = "Oops! Something went wrong while analyzing your mood. Please try again."


@router.post("", response_model=MoodAnalysisResponse)
async def analyze_mood(
    body: MoodAnalysisRequest,
    narrator: NarrativeGenerator = Depends(get_narrator),
):
    """analyze one journal entry: emotions, sentiment, insight and suggestions"""

    if not body.entry.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_ENTRY_ERROR)

    previous = [p.sentiment_result for p in body.previous_entries]

    try:
        return await analyze_entry(
            body.entry,
            narrator,
            is_incident=body.is_incident,
            response_role=body.response_role,
            previous=previous,
        )
    except Exception:
        logger.exception("Mood analysis failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ANALYSIS_FAILED_ERROR, "message": ANALYSIS_FAILED_MESSAGE},
        )
