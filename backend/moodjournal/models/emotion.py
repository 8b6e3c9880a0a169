# emotion models — detector output and sentiment result schemas
# mirrors the client's aiSentiment shape

from typing import Literal
from pydantic import BaseModel, Field

Sentiment = Literal["positive", "negative", "neutral"]


class EmotionAnalysis(BaseModel):
    """keyword detector output for one text"""
    emotions: list[str] = Field(default_factory=list)
    dominant_emotion: str = Field("neutral", alias="dominantEmotion")
    intensity: int = Field(1, ge=1, le=10)

    model_config = {"populate_by_name": True}


class SentimentResult(BaseModel):
    """detected emotions plus polarity, attached to a journal entry after analysis"""
    emotions: list[str] = Field(default_factory=list)
    dominant_emotion: str = Field("neutral", alias="dominantEmotion")
    intensity: int = Field(1, ge=1, le=10)
    sentiment: Sentiment = "neutral"

    model_config = {"populate_by_name": True}

    @classmethod
    def placeholder(cls) -> "SentimentResult":
        """result carried by an entry whose analysis has not attached (or failed)"""
        return cls(emotions=[], dominantEmotion="neutral", intensity=5, sentiment="neutral")
