# emotion lexicon — fixed emotion label → trigger keyword table
# order matters: it is the display order of detected emotions and the
# tie-break order for the dominant emotion

EMOTION_LEXICON: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("happy", ("happy", "joy", "joyful", "excited", "cheerful", "delighted", "pleased", "content")),
    ("sad", ("sad", "depressed", "down", "unhappy", "melancholy", "blue", "dejected")),
    ("angry", ("angry", "mad", "furious", "irritated", "annoyed", "frustrated", "rage")),
    ("anxious", ("anxious", "worried", "nervous", "scared", "fearful", "panic", "stress")),
    ("stressed", ("stressed", "overwhelmed", "pressure", "burden", "tension", "strain")),
    ("calm", ("calm", "peaceful", "relaxed", "serene", "tranquil", "composed")),
    ("excited", ("excited", "thrilled", "enthusiastic", "eager", "pumped")),
    ("grateful", ("grateful", "thankful", "appreciative", "blessed", "thankfulness")),
    ("lonely", ("lonely", "isolated", "alone", "disconnected", "solitary")),
    ("confident", ("confident", "sure", "certain", "self-assured", "empowered")),
    ("overwhelmed", ("overwhelmed", "swamped", "buried", "drowning", "too much")),
    ("peaceful", ("peaceful", "serene", "tranquil", "zen", "mindful")),
    ("hopeful", ("hopeful", "optimistic", "positive", "looking forward", "expecting")),
    ("tired", ("tired", "exhausted", "drained", "weary", "fatigue")),
    ("energetic", ("energetic", "active", "vigorous", "lively", "dynamic")),
)

EMOTION_LABELS: tuple[str, ...] = tuple(label for label, _ in EMOTION_LEXICON)

# intensifiers that add a bonus when they directly precede a matched keyword
INTENSIFIERS: tuple[str, ...] = ("very ", "really ")

# polarity partition used by the sentiment classifier
POSITIVE_EMOTIONS = frozenset({
    "happy", "excited", "grateful", "confident", "peaceful", "hopeful", "energetic", "calm",
})
NEGATIVE_EMOTIONS = frozenset({
    "sad", "angry", "anxious", "stressed", "lonely", "overwhelmed", "tired",
})

EMOTION_EMOJIS: dict[str, str] = {
    "happy": "😊",
    "sad": "😢",
    "angry": "😠",
    "anxious": "😰",
    "stressed": "😫",
    "calm": "😌",
    "excited": "🤩",
    "grateful": "🙏",
    "lonely": "😞",
    "confident": "💪",
    "overwhelmed": "🤯",
    "peaceful": "☮️",
    "hopeful": "🌟",
    "tired": "😴",
    "energetic": "⚡",
}
DEFAULT_EMOJI = "😐"


def emoji_for(emotion: str) -> str:
    """display emoji for an emotion label, neutral face when unknown"""
    return EMOTION_EMOJIS.get(emotion.lower(), DEFAULT_EMOJI)
