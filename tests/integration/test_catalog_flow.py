"""
End-to-end catalog flow against the JSON file backend.

Draft -> enrich -> assemble -> append -> reload -> search.
"""

import json
import pytest

from catalog import CatalogService, EnrichmentAdapter, EntryDraft, EntryStore
from models import EntryInput
from repositories import JsonFileStorage


def make_service(data_dir, seed, adapter=None):
    store = EntryStore(JsonFileStorage(base_path=data_dir), seed=seed)
    return CatalogService(store, adapter=adapter or EnrichmentAdapter(api_key="unused"), seed=seed)


class TestCatalogFlow:
    """Full create/list/search cycle with a restart in between."""

    def test_create_then_list_after_restart(self, data_dir, seed, author):
        service = make_service(data_dir, seed)
        assert len(service.list_entries()) == 2

        entry = service.create_entry(EntryInput(title="X", prompt="Y", tags=["a", "a", "b"]), author)

        restarted = make_service(data_dir, seed=[])
        entries = restarted.list_entries()

        assert len(entries) == 3
        assert entries[0].id == entry.id
        assert entries[0].tags == ["a", "b"]
        assert entries[0].version == 1
        assert entries[0].likes == 0
        assert [e.id for e in entries[1:]] == ["1", "2"]

    def test_stored_file_format(self, data_dir, seed, author):
        service = make_service(data_dir, seed)
        service.create_entry(EntryInput(title="X", prompt="Y"), author)

        data = json.loads((data_dir / "vibe_entries.json").read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert data[0]["author"]["role"] == "ENGINEER"
        assert isinstance(data[0]["createdAt"], int)
        assert "aiSummary" not in data[0]

    def test_search_seed(self, data_dir, seed):
        service = make_service(data_dir, seed)
        result = service.search_entries(service.list_entries(), "jwt")
        assert [e.title for e in result] == ["JWT Auth Middleware"]

    def test_corrupt_file_falls_back(self, data_dir, seed, author, capsys):
        (data_dir / "vibe_entries.json").write_text("{not json", encoding="utf-8")
        service = make_service(data_dir, seed)

        assert service.list_entries() == seed
        assert "[WARN]" in capsys.readouterr().out
        assert (data_dir / "vibe_entries.corrupt.json").read_text(encoding="utf-8") == "{not json"

        service.create_entry(EntryInput(title="X", prompt="Y"), author)
        assert len(make_service(data_dir, seed=[]).list_entries()) == 3

    def test_enriched_draft_to_entry(self, data_dir, seed, author, ai_client, analysis_reply):
        adapter = EnrichmentAdapter(client=ai_client(analysis_reply))
        service = make_service(data_dir, seed, adapter=adapter)

        draft = EntryDraft(prompt="Make a todo app", tags=["mine"])
        assert service.enrich_draft(draft)
        entry = service.create_entry(draft.to_input(), author)

        assert entry.title == "Todo App"
        assert entry.ai_summary == "A todo list."
        assert entry.ai_rating == 3
        assert entry.tags == ["mine", "react", "todo"]
        assert service.search_entries(service.list_entries(), "todo")[0].id == entry.id
