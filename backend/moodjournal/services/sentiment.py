# sentiment classifier — maps detected emotions to positive / negative / neutral

from typing import Iterable

from moodjournal.models.emotion import Sentiment, SentimentResult
from moodjournal.services.emotion_detector import detect
from moodjournal.services.lexicon import POSITIVE_EMOTIONS, NEGATIVE_EMOTIONS


def classify(emotions: Iterable[str]) -> Sentiment:
    """majority polarity of the given labels; ties and empty input are neutral.
    labels outside both partitions are ignored."""
    labels = set(emotions)
    positive_count = len(labels & POSITIVE_EMOTIONS)
    negative_count = len(labels & NEGATIVE_EMOTIONS)

    if positive_count > negative_count:
        return "positive"
    if negative_count > positive_count:
        return "negative"
    return "neutral"


def analyze(text: str) -> SentimentResult:
    """run the detector and classifier over one text"""
    analysis = detect(text)
    return SentimentResult(
        emotions=analysis.emotions,
        dominantEmotion=analysis.dominant_emotion,
        intensity=analysis.intensity,
        sentiment=classify(analysis.emotions),
    )
