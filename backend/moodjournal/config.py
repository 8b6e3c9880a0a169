# backend configuration
# loads env vars for gemini, the entry store, cors and journal validation

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # gemini (for insight, suggestion and chat generation)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_OUTPUT_TOKENS: int = 1024
    LLM_TIMEOUT_SECONDS: float = 30.0

    # entry store — one json blob holding the whole entry list
    ENTRY_STORE_PATH: str = os.getenv(
        "ENTRY_STORE_PATH",
        str(Path(__file__).parent.parent.parent / "data" / "entries.json"),
    )
    ENTRY_STORE_KEY: str = "moodJournalEntries"

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # journal validation
    JOURNAL_MIN_LENGTH: int = 50
    JOURNAL_MAX_LENGTH: int = 10000

    # narrative generation
    CONTEXT_ENTRIES: int = 5
    INSIGHT_MAX_LENGTH: int = 600
    SUGGESTION_MAX_LENGTH: int = 240
    MAX_SUGGESTIONS: int = 6
    MIN_SUGGESTIONS: int = 3

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
