# narrative service — langchain-powered insight, suggestion and chat generation
# wraps a gemini chat model behind role-flavored prompts with deterministic fallbacks
#
# generation pipeline:
#   1. pick the persona row for (role, is_incident) and a random opening line
#   2. fill the shared insight / suggestion prompt
#   3. call the llm with a timeout
#   4. clean markdown and truncate at a sentence boundary
#   5. on any failure or unusable output, return the default copy

import asyncio
import logging
import random
import re
from typing import Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from moodjournal.config import Settings, settings
from moodjournal.models.emotion import SentimentResult
from moodjournal.services.personas import get_persona

logger = logging.getLogger(__name__)

# previous dominant emotions quoted back to the model
CONTEXT_EMOTIONS = 3
# characters of the entry quoted in the suggestion prompt
SUGGESTION_ENTRY_PREVIEW = 200


class NarrativeUnavailable(RuntimeError):
    """raised when no llm is configured for this process"""


STYLE_RULES = """IMPORTANT: respond exactly as this person would in real life, with their natural speech \
patterns, vocabulary and personality. Do not sound like an AI or a therapy bot.
Do not repeat intensity numbers or phrases from the prompt. Do not mention ratings or levels.
Do not use markdown formatting such as bold, italics or asterisks. Write plain conversational text."""

INSIGHT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{persona}\n\n" + STYLE_RULES),
    ("human", """{opening}

What they wrote: "{entry}"
Feelings picked up: {emotions}
How strongly they feel it: {intensity}/10
{context}

Reply to them directly, in your own voice, in under 150 words."""),
])

SUGGESTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{persona}\n\n" + STYLE_RULES),
    ("human", """{opening}

What they wrote: "{entry}"
Main feeling: {dominant_emotion}, alongside {emotions}
How strongly they feel it: {intensity}/10

Give them practical, caring suggestions in your own voice.
Return exactly 4-6 suggestions, each on a new line starting with a dash (-)."""),
])

CHAT_PROMPTS = {
    "wellness": ChatPromptTemplate.from_messages([
        ("system", """You are a warm, caring listener. Reaching out shows real strength and self-awareness.
Do not respond like a textbook or give clinical advice. Offer gentle, personal words that come from
genuine understanding and compassion. Keep it under 180 words. Gentle emojis are welcome."""),
        ("human", "{message}"),
    ]),
    "general": ChatPromptTemplate.from_messages([
        ("system", "You are a helpful assistant. Provide a clear, informative response."),
        ("human", "{message}"),
    ]),
}

DEFAULT_CHAT_REPLY = "I'm here to help with any questions you have."

# default copy — used whenever the llm is unavailable or returns nothing usable

INCIDENT_INSIGHT = (
    "I can see you're going through something really difficult right now. Your feelings are completely "
    "valid, and it's okay to feel overwhelmed. Tough times don't last, but resilient people like you do. "
    "This experience, while painful, can also become a source of growth and wisdom."
)

EMOTION_INSIGHTS = {
    "happy": "It's wonderful to see you experiencing joy! These positive moments are precious and worth celebrating.",
    "sad": "I can sense the heaviness you're carrying. It's okay to feel sad; allow yourself to feel it, and remember that this feeling will pass.",
    "angry": "Your anger is telling you that something important to you has been affected. The feeling is valid; try to channel that energy constructively.",
    "anxious": "Uncertainty can be overwhelming. Your anxiety shows how much you care about the outcome. Take things one step at a time.",
    "stressed": "The pressure you're feeling is real and understandable. Be kind to yourself and take breaks when you need them.",
    "calm": "There's something beautiful about the peace you're experiencing. This inner calm is a strength you can lean on.",
    "grateful": "Your gratitude is a powerful force. The appreciation you feel enriches your life and the lives of people around you.",
}

SENTIMENT_INSIGHTS = {
    "positive": "It's lovely to read about the good things in your day. Noticing them is a habit worth keeping.",
    "negative": "Thank you for putting this into words. Hard feelings are easier to carry once they are named.",
    "neutral": "Thank you for sharing your thoughts and feelings. Self-reflection is a powerful tool for personal growth and emotional well-being.",
}

INCIDENT_SUGGESTIONS = [
    "Practice deep breathing exercises to help manage immediate stress",
    "Reach out to a trusted friend or family member for support",
    "Write down your thoughts to help process what happened",
    "Consider speaking with a counselor or therapist",
    "Engage in gentle physical activity like walking or stretching",
]

EMOTION_SUGGESTIONS = {
    "happy": [
        "Share your joy with loved ones, happiness multiplies when shared",
        "Write down what made you happy today",
        "Use this positive energy to tackle something you've been putting off",
        "Capture this moment with a photo or a few lines in your journal",
    ],
    "sad": [
        "Allow yourself to feel the sadness without judgment",
        "Reach out to a friend or family member for comfort",
        "Do one self-care activity that brings you peace",
        "Consider what this sadness might be teaching you",
    ],
    "angry": [
        "Take some deep breaths before responding to the situation",
        "Go for a walk or do some exercise to release tension",
        "Write down what is bothering you to gain clarity",
        "Address the issue constructively once you're calmer",
    ],
    "anxious": [
        "Practice grounding with the 5-4-3-2-1 method",
        "Break overwhelming tasks into smaller, manageable steps",
        "Try progressive muscle relaxation or meditation",
        "Limit caffeine and protect your sleep",
    ],
}

GENERAL_SUGGESTIONS = [
    "Take a moment to acknowledge your feelings",
    "Practice self-compassion and be gentle with yourself",
    "Consider what small step you could take to feel better",
    "Remember that all emotions are temporary and will pass",
]

_INSIGHT_PREFIX = re.compile(
    r"^(Insight:|AI Insight:|Response:|Compassionate Insight:|Caring Insight:|Based on|Here are"
    r"|Here's what|I'd like to offer|Let me share)",
    re.IGNORECASE,
)
_BOLD_HEADING = re.compile(r"^\*\*.*?\*\*:?\s*")
_LEADING_DASH = re.compile(r"^-\s*")
_LIST_MARKER = re.compile(r"^(?:\d+[.)]|[-*•])\s*")
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_CODE = re.compile(r"`(.*?)`")


def default_insight(dominant_emotion: str, sentiment: str, is_incident: bool) -> str:
    """deterministic insight keyed by dominant emotion, sentiment and incident flag"""
    if is_incident:
        return INCIDENT_INSIGHT
    if dominant_emotion in EMOTION_INSIGHTS:
        return EMOTION_INSIGHTS[dominant_emotion]
    return SENTIMENT_INSIGHTS.get(sentiment, SENTIMENT_INSIGHTS["neutral"])


def default_suggestions(dominant_emotion: str, sentiment: str, is_incident: bool) -> list[str]:
    """deterministic suggestion list keyed by dominant emotion and incident flag"""
    if is_incident:
        return list(INCIDENT_SUGGESTIONS)
    return list(EMOTION_SUGGESTIONS.get(dominant_emotion, GENERAL_SUGGESTIONS))


def truncate_to_complete_sentence(text: str, max_length: int = 600) -> str:
    """cut text to max_length, preferring the last sentence end past the halfway mark"""
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_end = max(truncated.rfind("."), truncated.rfind("!"), truncated.rfind("?"))
    if last_end > max_length * 0.5:
        return truncated[:last_end + 1]
    return truncated + "..."


def _strip_markdown(text: str) -> str:
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    return _CODE.sub(r"\1", text)


def clean_insight(raw: str, max_length: int = 600) -> str:
    """drop lead-in labels and markdown from a model reply"""
    text = raw.strip()
    text = _INSIGHT_PREFIX.sub("", text)
    text = _BOLD_HEADING.sub("", text)
    text = _LEADING_DASH.sub("", text)
    text = _strip_markdown(text).strip()
    return truncate_to_complete_sentence(text, max_length)


def parse_suggestions(raw: str, max_items: int = 6, max_length: int = 240) -> list[str]:
    """split a dashed/numbered model reply into clean suggestion strings"""
    lines = [line.strip() for line in raw.splitlines() if len(line.strip()) > 10]
    suggestions = []
    for line in lines[:max_items]:
        text = _strip_markdown(_LIST_MARKER.sub("", line)).strip()
        text = truncate_to_complete_sentence(text, max_length)
        if text:
            suggestions.append(text)
    return suggestions


def build_context_text(previous: Sequence[Optional[SentimentResult]]) -> str:
    """short note on the dominant emotions of the last few analyzed entries"""
    dominant = [r.dominant_emotion for r in previous if r is not None][-CONTEXT_EMOTIONS:]
    if not dominant:
        return "This is a new emotional journal."
    return f"Previous emotional patterns: {', '.join(dominant)}"


class NarrativeGenerator:
    """role-flavored text generation over an injected chat model.

    llm=None means no hosted model is configured; every call then falls back
    to the default copy. rng picks opening lines and can be seeded in tests.
    """

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        rng: Optional[random.Random] = None,
        config: Settings = settings,
    ):
        self.llm = llm
        self.rng = rng or random.Random()
        self.config = config
        self._insight_chain = None
        self._suggestion_chain = None
        self._chat_chains = {}
        if llm is not None:
            self._insight_chain = INSIGHT_PROMPT | llm | StrOutputParser()
            self._suggestion_chain = SUGGESTION_PROMPT | llm | StrOutputParser()
            self._chat_chains = {
                context: prompt | llm | StrOutputParser() for context, prompt in CHAT_PROMPTS.items()
            }

    def pick_opening(self, role: str, is_incident: bool) -> str:
        return self.rng.choice(get_persona(role, is_incident).openings)

    async def _complete(self, chain, inputs: dict) -> str:
        if chain is None:
            raise NarrativeUnavailable("No language model configured")
        return await asyncio.wait_for(chain.ainvoke(inputs), timeout=self.config.LLM_TIMEOUT_SECONDS)

    async def generate_insight(
        self,
        entry: str,
        result: SentimentResult,
        role: str,
        is_incident: bool,
        previous: Sequence[Optional[SentimentResult]] = (),
    ) -> str:
        """persona-voiced reflection on the entry, or the default insight"""
        inputs = {
            "persona": get_persona(role, is_incident).persona,
            "opening": self.pick_opening(role, is_incident),
            "entry": entry,
            "emotions": ", ".join(result.emotions) or "none detected",
            "intensity": result.intensity,
            "context": build_context_text(previous),
        }
        try:
            raw = await self._complete(self._insight_chain, inputs)
            insight = clean_insight(raw, self.config.INSIGHT_MAX_LENGTH)
            if insight:
                return insight
            logger.warning(f"Empty insight from model for role {role}, using default")
        except NarrativeUnavailable:
            logger.info("No language model configured, using default insight")
        except Exception as e:
            logger.warning(f"Insight generation failed for role {role}: {e}")

        return default_insight(result.dominant_emotion, result.sentiment, is_incident)

    async def generate_suggestions(
        self,
        entry: str,
        result: SentimentResult,
        role: str,
        is_incident: bool,
    ) -> list[str]:
        """4-6 persona-voiced suggestions, or the default list"""
        preview = entry[:SUGGESTION_ENTRY_PREVIEW]
        if len(entry) > SUGGESTION_ENTRY_PREVIEW:
            preview += "..."
        inputs = {
            "persona": get_persona(role, is_incident).persona,
            "opening": self.pick_opening(role, is_incident),
            "entry": preview,
            "dominant_emotion": result.dominant_emotion,
            "emotions": ", ".join(result.emotions) or "none detected",
            "intensity": result.intensity,
        }
        try:
            raw = await self._complete(self._suggestion_chain, inputs)
            suggestions = parse_suggestions(
                raw, self.config.MAX_SUGGESTIONS, self.config.SUGGESTION_MAX_LENGTH,
            )
            if len(suggestions) >= self.config.MIN_SUGGESTIONS:
                logger.info(f"Generated {len(suggestions)} suggestions for role {role}")
                return suggestions
            logger.warning(f"Only {len(suggestions)} suggestions for role {role}, using defaults")
        except NarrativeUnavailable:
            logger.info("No language model configured, using default suggestions")
        except Exception as e:
            logger.warning(f"Suggestion generation failed for role {role}: {e}")

        return default_suggestions(result.dominant_emotion, result.sentiment, is_incident)

    async def chat(self, message: str, context: str = "general") -> str:
        """free-form reply in the general or wellness tone"""
        chain = self._chat_chains.get(context, self._chat_chains.get("general"))
        try:
            reply = await self._complete(chain, {"message": message})
            return reply.strip() or DEFAULT_CHAT_REPLY
        except NarrativeUnavailable:
            logger.info("No language model configured, using default chat reply")
        except Exception as e:
            logger.warning(f"Chat generation failed: {e}")
        return DEFAULT_CHAT_REPLY


def build_narrative_generator(config: Settings = settings) -> NarrativeGenerator:
    """create the process-wide generator. without an api key it serves default copy only."""
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set, narrative generation will use default copy")
        return NarrativeGenerator(llm=None, config=config)

    logger.info(f"Using Gemini model {config.GEMINI_MODEL} for narrative generation")
    llm = ChatGoogleGenerativeAI(
        model=config.GEMINI_MODEL,
        google_api_key=config.GEMINI_API_KEY,
        temperature=config.LLM_TEMPERATURE,
        max_output_tokens=config.LLM_MAX_OUTPUT_TOKENS,
    )
    return NarrativeGenerator(llm=llm, config=config)
