# chat models — companion chat request and response schemas

from typing import Literal
from pydantic import BaseModel, Field

from moodjournal.config import settings

ChatContext = Literal["general", "wellness"]


class ChatRequest(BaseModel):
    """single chat message with a tone context"""
    message: str = Field(..., max_length=settings.JOURNAL_MAX_LENGTH)
    context: ChatContext = "general"


class ChatResponse(BaseModel):
    message: str
    context: ChatContext = "general"
