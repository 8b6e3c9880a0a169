# trend aggregator — weekly trend, emotion histogram and recommendations
# pure function of the entry history (oldest first) and the current time

import logging
import math
import time
from collections import Counter
from typing import Optional, Sequence

from moodjournal.models.journal import JournalEntry
from moodjournal.models.trend import EmotionCount, TrendSnapshot, WeeklyTrend
from moodjournal.services.lexicon import emoji_for

logger = logging.getLogger(__name__)

RECENT_WINDOW = 7
MIN_WEEK_ENTRIES = 3
TREND_MARGIN = 1.0
REPEAT_THRESHOLD = 2
MAX_RECOMMENDATIONS = 3

DAY_MS = 24 * 60 * 60 * 1000
WEEK_MS = 7 * DAY_MS
MONTH_MS = 30 * DAY_MS

POSITIVE_INSIGHT = "You've been experiencing more positive emotions recently!"
NEGATIVE_INSIGHT = "You've been having some challenging times lately."

# (emotion, message) rules fired when the emotion shows up more than REPEAT_THRESHOLD times
EMOTION_RULES = (
    ("stressed", "Consider stress management techniques like deep breathing or meditation"),
    ("anxious", "Try grounding exercises: name 5 things you can see, 4 you can touch, etc."),
    ("sad", "Reach out to friends or family, or engage in activities you enjoy"),
)
TREND_RULES = (
    ("declining", "Your mood seems to be declining. Consider talking to someone or practicing self-care"),
    ("improving", "Great progress! Keep doing what you're doing"),
)


def _mean_intensity(entries: Sequence[JournalEntry]) -> float:
    return sum(e.sentiment_result.intensity for e in entries) / len(entries)


def compute_weekly_trend(this_week: Sequence[JournalEntry]) -> WeeklyTrend:
    """compare mean intensity of the older and newer half of this week's entries"""
    if len(this_week) < MIN_WEEK_ENTRIES:
        return "stable"

    split = math.ceil(len(this_week) / 2)
    first_avg = _mean_intensity(this_week[:split])
    second_avg = _mean_intensity(this_week[split:])

    if second_avg > first_avg + TREND_MARGIN:
        return "improving"
    if second_avg < first_avg - TREND_MARGIN:
        return "declining"
    return "stable"


def build_recommendations(emotion_frequency: dict[str, int], weekly_trend: WeeklyTrend) -> list[str]:
    """fire every matching rule in order, keep the first three"""
    recommendations = [
        message
        for emotion, message in EMOTION_RULES
        if emotion_frequency.get(emotion, 0) > REPEAT_THRESHOLD
    ]
    recommendations.extend(message for trend, message in TREND_RULES if trend == weekly_trend)
    return recommendations[:MAX_RECOMMENDATIONS]


def aggregate(history: Sequence[JournalEntry], now: Optional[int] = None) -> TrendSnapshot:
    """compute the trend snapshot for an entry history ordered oldest first.
    now is ms since epoch and defaults to the current time."""
    if now is None:
        now = int(time.time() * 1000)

    recent = list(history[-RECENT_WINDOW:])
    this_week = [e for e in recent if e.timestamp >= now - WEEK_MS]
    this_month = [e for e in history if e.timestamp >= now - MONTH_MS]

    frequency: Counter[str] = Counter()
    for entry in recent:
        frequency.update(entry.sentiment_result.emotions)
    emotion_frequency = dict(frequency)

    insights = []
    positive_count = sum(1 for e in recent if e.sentiment_result.sentiment == "positive")
    negative_count = sum(1 for e in recent if e.sentiment_result.sentiment == "negative")
    if positive_count > negative_count:
        insights.append(POSITIVE_INSIGHT)
    elif negative_count > positive_count:
        insights.append(NEGATIVE_INSIGHT)

    weekly_trend = compute_weekly_trend(this_week)
    logger.debug(
        f"Trend over {len(recent)} recent entries ({len(this_week)} this week): {weekly_trend}"
    )

    return TrendSnapshot(
        weeklyTrend=weekly_trend,
        emotionFrequency=emotion_frequency,
        topEmotions=[
            EmotionCount(emotion=emotion, count=count, emoji=emoji_for(emotion))
            for emotion, count in top_emotions(emotion_frequency)
        ],
        insights=insights,
        recommendations=build_recommendations(emotion_frequency, weekly_trend),
        monthlyComparison=f"{len(this_month)} entries this month",
        totalEntries=len(history),
    )


def top_emotions(emotion_frequency: dict[str, int], limit: int = 5) -> list[tuple[str, int]]:
    """most frequent emotions, descending count then first-seen order"""
    ranked = sorted(enumerate(emotion_frequency.items()), key=lambda x: (-x[1][1], x[0]))
    return [item for _, item in ranked[:limit]]
