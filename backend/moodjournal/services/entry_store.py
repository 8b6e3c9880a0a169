# entry store — the whole journal history as one serialized json blob
# read once at startup, rewritten in full on every addition (last writer wins)

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from moodjournal.config import settings
from moodjournal.models.journal import JournalEntry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[JournalEntry])


class EntryStore:
    """ordered journal entry list persisted under a fixed key in a json file"""

    def __init__(self, path: str | Path, key: str = "moodJournalEntries"):
        self.path = Path(path)
        self.key = key
        self._entries: Optional[list[JournalEntry]] = None

    def load(self) -> list[JournalEntry]:
        """read the blob from disk. a missing or unreadable blob starts an empty journal."""
        if not self.path.exists():
            logger.info(f"No entry store at {self.path}, starting empty")
            self._entries = []
            return self.entries()

        try:
            blob = json.loads(self.path.read_text(encoding="utf-8") or "{}")
            self._entries = _entries_adapter.validate_python(blob.get(self.key, []))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            logger.error(f"Could not read entry store {self.path}: {e}")
            self._entries = []

        logger.info(f"Loaded {len(self._entries)} journal entries from {self.path}")
        return self.entries()

    def entries(self) -> list[JournalEntry]:
        """the whole list, oldest first"""
        if self._entries is None:
            self.load()
        return list(self._entries)

    def replace(self, entries: list[JournalEntry]) -> None:
        """overwrite the whole list, in memory and on disk"""
        self._entries = list(entries)
        payload = _entries_adapter.dump_python(self._entries, by_alias=True, mode="json")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({self.key: payload}, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.debug(f"Wrote {len(self._entries)} journal entries to {self.path}")

    def append(self, entry: JournalEntry) -> None:
        self.replace(self.entries() + [entry])


def build_entry_store() -> EntryStore:
    """create the process-wide store from settings"""
    return EntryStore(settings.ENTRY_STORE_PATH, key=settings.ENTRY_STORE_KEY)
