# tests for the json entry store — load, append, full rewrite

import json

import pytest

from moodjournal.services.entry_store import EntryStore
from tests.conftest import make_entry


class TestLoad:
    """reading the blob"""

    def test_missing_file_is_empty(self, tmp_path):
        store = EntryStore(tmp_path / "nothing.json")
        assert store.load() == []

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "entries.json"
        path.write_text("{not json", encoding="utf-8")
        assert EntryStore(path).load() == []

    def test_non_utf8_file_is_empty(self, tmp_path):
        path = tmp_path / "entries.json"
        path.write_bytes(b'{"moodJournalEntries": [\xff\xfe]}')
        assert EntryStore(path).load() == []

    def test_unreadable_path_is_empty(self, tmp_path):
        # a directory where the blob should be raises IsADirectoryError on read
        path = tmp_path / "entries.json"
        path.mkdir()
        assert EntryStore(path).load() == []

    def test_wrong_shape_is_empty(self, tmp_path):
        path = tmp_path / "entries.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert EntryStore(path).load() == []

    def test_lazy_load_on_first_read(self, tmp_path):
        path = tmp_path / "entries.json"
        EntryStore(path).append(make_entry(entry_id="persisted001"))
        assert [e.id for e in EntryStore(path).entries()] == ["persisted001"]


class TestWrite:
    """appending and rewriting"""

    def test_append_rewrites_whole_blob(self, store):
        store.append(make_entry(entry_id="one000000001"))
        store.append(make_entry(entry_id="two000000002"))
        blob = json.loads(store.path.read_text(encoding="utf-8"))
        assert list(blob) == ["moodJournalEntries"]
        assert [e["id"] for e in blob["moodJournalEntries"]] == ["one000000001", "two000000002"]

    def test_blob_uses_camel_case(self, store):
        store.append(make_entry(emotions=["calm"], sentiment="positive"))
        saved = json.loads(store.path.read_text(encoding="utf-8"))["moodJournalEntries"][0]
        assert saved["sentimentResult"]["dominantEmotion"] == "calm"
        assert "narrativeInsight" in saved
        assert "isIncident" in saved

    def test_custom_key(self, tmp_path):
        store = EntryStore(tmp_path / "entries.json", key="otherKey")
        store.append(make_entry())
        assert "otherKey" in json.loads(store.path.read_text(encoding="utf-8"))

    def test_entries_returns_a_copy(self, store):
        store.append(make_entry())
        store.entries().clear()
        assert len(store.entries()) == 1

    def test_round_trip_through_disk(self, store):
        entry = make_entry(emotions=["sad", "tired"], intensity=7, sentiment="negative")
        store.append(entry)
        assert EntryStore(store.path).load() == [entry]


class TestAttachAnalysis:
    """an entry is analyzed at most once"""

    def test_second_attach_raises(self):
        entry = make_entry()
        with pytest.raises(ValueError):
            entry.attach_analysis(entry.sentiment_result, "again", [])
