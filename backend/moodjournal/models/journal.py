# journal models — entry, analysis request and response schemas
# mirrors the client's stored entry shape (camelCase on the wire)

from typing import Optional, Literal
from pydantic import BaseModel, Field

from moodjournal.config import settings
from moodjournal.models.emotion import SentimentResult

ResponseRole = Literal[
    "mom",
    "dad",
    "sibling",
    "close_friend",
    "lover",
    "counselor",
    "supportive_friend",
]


class JournalEntry(BaseModel):
    """one journaling submission as held by the entry store"""
    id: str
    timestamp: int = Field(..., description="creation instant, ms since epoch")
    date: str = ""
    text: str
    is_incident: bool = Field(False, alias="isIncident")
    response_role: ResponseRole = Field("close_friend", alias="responseRole")
    sentiment_result: SentimentResult = Field(
        default_factory=SentimentResult.placeholder, alias="sentimentResult"
    )
    narrative_insight: str = Field("", alias="narrativeInsight")
    suggestions: list[str] = Field(default_factory=list, max_length=6)
    analyzed: bool = False

    model_config = {"populate_by_name": True}

    def attach_analysis(
        self,
        sentiment_result: SentimentResult,
        insight: str,
        suggestions: list[str],
    ) -> None:
        """attach analysis results. an entry is analyzed at most once."""
        if self.analyzed:
            raise ValueError(f"Journal entry {self.id} already has analysis attached")
        self.sentiment_result = sentiment_result
        self.narrative_insight = insight
        self.suggestions = list(suggestions)
        self.analyzed = True


class JournalCreate(BaseModel):
    """payload for the save-entry action"""
    entry: str = Field(..., max_length=settings.JOURNAL_MAX_LENGTH, description="journal entry text")
    is_incident: bool = Field(False, alias="isIncident")
    response_role: ResponseRole = Field("close_friend", alias="responseRole")

    model_config = {"populate_by_name": True}


class PreviousEntry(BaseModel):
    """prior analyzed entry sent along as context; only its sentiment is read"""
    id: Optional[str] = None
    text: str = ""
    sentiment_result: Optional[SentimentResult] = Field(None, alias="sentimentResult")

    model_config = {"populate_by_name": True}


class MoodAnalysisRequest(BaseModel):
    """payload for the analysis endpoint"""
    entry: str = Field(..., max_length=settings.JOURNAL_MAX_LENGTH, description="journal entry text")
    previous_entries: list[PreviousEntry] = Field(default_factory=list, alias="previousEntries")
    is_incident: bool = Field(False, alias="isIncident")
    response_role: ResponseRole = Field("close_friend", alias="responseRole")

    model_config = {"populate_by_name": True}


class MoodAnalysisResponse(BaseModel):
    """analysis result returned to the client"""
    sentiment: SentimentResult
    insight: str
    suggestions: list[str] = Field(default_factory=list)
    emoji: str = ""
    is_incident: bool = Field(False, alias="isIncident")
    response_role: ResponseRole = Field("close_friend", alias="responseRole")
    timestamp: int

    model_config = {"populate_by_name": True}
