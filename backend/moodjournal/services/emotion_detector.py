# emotion detector — additive keyword scoring against the emotion lexicon
#
# scoring:
#   1. lower-case the text
#   2. +1 for every lexicon keyword contained in the text
#   3. +2 more when that matched keyword is also preceded by "very " / "really "
#   4. emotions scoring 0 are dropped, the rest keep lexicon order
#   5. dominant = strictly highest score, earliest lexicon entry wins ties
#   6. intensity = max score, bumped for 4+ and 6+ distinct emotions, clamped to 1-10

import logging

from moodjournal.models.emotion import EmotionAnalysis
from moodjournal.services.lexicon import EMOTION_LEXICON, INTENSIFIERS

logger = logging.getLogger(__name__)

MIN_INTENSITY = 1
MAX_INTENSITY = 10
INTENSIFIER_BONUS = 2

# distinct-emotion counts that each add one point of intensity
BREADTH_THRESHOLDS = (4, 6)


def score_emotions(text: str) -> dict[str, int]:
    """score every lexicon emotion found in the text. only emotions with score >= 1 are returned."""
    lower_text = text.lower()
    scores: dict[str, int] = {}

    for emotion, keywords in EMOTION_LEXICON:
        score = 0
        for keyword in keywords:
            if keyword not in lower_text:
                continue
            score += 1
            if any(f"{prefix}{keyword}" in lower_text for prefix in INTENSIFIERS):
                score += INTENSIFIER_BONUS
        if score > 0:
            scores[emotion] = score

    return scores


def _dominant(scores: dict[str, int]) -> str:
    dominant = "neutral"
    best = 0
    for emotion, _ in EMOTION_LEXICON:
        score = scores.get(emotion, 0)
        if score > best:
            dominant, best = emotion, score
    return dominant


def _intensity(scores: dict[str, int]) -> int:
    intensity = max(scores.values(), default=MIN_INTENSITY)
    intensity = max(intensity, MIN_INTENSITY)
    for threshold in BREADTH_THRESHOLDS:
        if len(scores) >= threshold:
            intensity += 1
    return min(max(intensity, MIN_INTENSITY), MAX_INTENSITY)


def detect(text: str) -> EmotionAnalysis:
    """detect emotions in free text. never raises; no matches yields a neutral result."""
    scores = score_emotions(text or "")
    emotions = [emotion for emotion, _ in EMOTION_LEXICON if emotion in scores]

    return EmotionAnalysis(
        emotions=emotions,
        dominantEmotion=_dominant(scores),
        intensity=_intensity(scores),
    )
