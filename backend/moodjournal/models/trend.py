# trend models — derived trend snapshot over the entry history

from typing import Literal
from pydantic import BaseModel, Field

WeeklyTrend = Literal["improving", "declining", "stable"]


class EmotionCount(BaseModel):
    """how often an emotion appeared in the recent window"""
    emotion: str
    count: int
    emoji: str = ""


class TrendSnapshot(BaseModel):
    """weekly trend, emotion histogram and recommendations for the recent window"""
    weekly_trend: WeeklyTrend = Field("stable", alias="weeklyTrend")
    emotion_frequency: dict[str, int] = Field(default_factory=dict, alias="emotionFrequency")
    top_emotions: list[EmotionCount] = Field(default_factory=list, alias="topEmotions")
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=3)
    monthly_comparison: str = Field("0 entries this month", alias="monthlyComparison")
    total_entries: int = Field(0, alias="totalEntries")

    model_config = {"populate_by_name": True}
