# shared fixtures for backend api tests
# provides a temp entry store, narrators (no llm / fake llm) and an httpx test client

import random

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from langchain_core.language_models import FakeListChatModel

from moodjournal.main import app
from moodjournal.dependencies import get_narrator, get_store
from moodjournal.models.emotion import SentimentResult
from moodjournal.models.journal import JournalEntry
from moodjournal.services.entry_store import EntryStore
from moodjournal.services.narrative_service import NarrativeGenerator


# fixed reference time for trend tests: 2025-06-14T00:00:00Z
NOW_MS = 1749859200000
DAY_MS = 24 * 60 * 60 * 1000

LONG_ENTRY = (
    "Today I felt really anxious about my work deadline and stressed by how little time was left."
)

FAKE_SUGGESTIONS_REPLY = (
    "- Take a slow walk outside after dinner tonight\n"
    "- Call someone you trust and tell them how today went\n"
    "- Write down three small things that went okay\n"
    "- Put your phone away an hour before bed"
)


def make_entry(
    entry_id: str = "entry0000001",
    timestamp: int = NOW_MS - DAY_MS,
    emotions: list[str] | None = None,
    intensity: int = 5,
    sentiment: str = "neutral",
    text: str = "A perfectly ordinary day with nothing much to report.",
) -> JournalEntry:
    """analyzed journal entry with a hand-set sentiment result"""
    emotions = emotions or []
    return JournalEntry(
        id=entry_id,
        timestamp=timestamp,
        text=text,
        sentimentResult=SentimentResult(
            emotions=emotions,
            dominantEmotion=emotions[0] if emotions else "neutral",
            intensity=intensity,
            sentiment=sentiment,
        ),
        narrativeInsight="insight",
        analyzed=True,
    )


@pytest.fixture
def store(tmp_path):
    """empty entry store backed by a temp file"""
    s = EntryStore(tmp_path / "entries.json")
    s.load()
    return s


@pytest.fixture
def narrator():
    """narrator with no llm configured — always serves default copy"""
    return NarrativeGenerator(llm=None, rng=random.Random(7))


@pytest.fixture
def fake_narrator():
    """narrator backed by a fake chat model that always returns the same dashed list"""
    llm = FakeListChatModel(responses=[FAKE_SUGGESTIONS_REPLY])
    return NarrativeGenerator(llm=llm, rng=random.Random(7))


def _override(store, narrator):
    async def override_get_store():
        return store

    async def override_get_narrator():
        return narrator

    app.dependency_overrides[get_store] = override_get_store
    app.dependency_overrides[get_narrator] = override_get_narrator


@pytest_asyncio.fixture
async def client(store, narrator):
    """httpx async test client with the default-copy narrator"""
    _override(store, narrator)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def llm_client(store, fake_narrator):
    """httpx async test client with the fake-llm narrator"""
    _override(store, fake_narrator)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
