# tests for chat router — general and wellness companion replies

import pytest
from unittest.mock import AsyncMock, patch

from moodjournal.config import settings
from moodjournal.services.narrative_service import DEFAULT_CHAT_REPLY
from tests.conftest import FAKE_SUGGESTIONS_REPLY


class TestChat:
    """POST /chat"""

    async def test_default_reply_without_llm(self, client):
        resp = await client.post("/chat", json={"message": "How do I sleep better?"})
        assert resp.status_code == 200
        assert resp.json() == {"message": DEFAULT_CHAT_REPLY, "context": "general"}

    async def test_llm_reply(self, llm_client):
        resp = await llm_client.post("/chat", json={"message": "Rough day today", "context": "wellness"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == FAKE_SUGGESTIONS_REPLY
        assert data["context"] == "wellness"

    async def test_blank_message(self, client):
        resp = await client.post("/chat", json={"message": "  "})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Message is required"}

    async def test_unknown_context(self, client):
        resp = await client.post("/chat", json={"message": "hi", "context": "therapy"})
        assert resp.status_code == 400

    async def test_message_over_configured_limit(self, client):
        resp = await client.post("/chat", json={"message": "a" * (settings.JOURNAL_MAX_LENGTH + 1)})
        assert resp.status_code == 400
        assert "message" in resp.json()["error"]

    async def test_unexpected_failure_is_500(self, client, narrator):
        with patch.object(narrator, "chat", new=AsyncMock(side_effect=RuntimeError("boom"))):
            resp = await client.post("/chat", json={"message": "hi"})
        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to process message"
