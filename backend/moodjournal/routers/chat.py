# chat router — free-form companion chat in a general or wellness tone

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from moodjournal.dependencies import get_narrator
from moodjournal.models.chat import ChatRequest, ChatResponse
from moodjournal.services.narrative_service import NarrativeGenerator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    narrator: NarrativeGenerator = Depends(get_narrator),
):
    """reply to a single chat message"""

    if not body.message.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message is required")

    try:
        reply = await narrator.chat(body.message, body.context)
    except Exception:
        logger.exception("Chat failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Failed to process message",
                "message": "I'm having trouble responding right now. Please try again.",
            },
        )

    return ChatResponse(message=reply, context=body.context)
