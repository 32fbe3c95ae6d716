"""
Catalog service - the operations the web and CLI layers call.

Usage:
    from catalog import get_service

    service = get_service()
    entries = service.list_entries()
    entry = service.create_entry(EntryInput(title="X", prompt="Y"), author)
"""

from typing import Iterable, Optional, Sequence

from models import AnalysisResult, CatalogEntry, EntryInput, User
from repositories import get_storage
from .assembler import assemble
from .draft import EntryDraft
from .enrich import EnrichmentAdapter
from .errors import DataCorruption, EnrichmentError
from .search import filter_entries
from .seed import seed_entries
from .store import EntryStore


class CatalogService:
    """
    Facade over store, assembler, search and enrichment.

    Enrichment failures never affect browsing or creation.
    """

    def __init__(
        self,
        store: EntryStore,
        adapter: Optional[EnrichmentAdapter] = None,
        seed: Optional[Sequence[CatalogEntry]] = None,
    ):
        self.store = store
        self.adapter = adapter or EnrichmentAdapter()
        self._seed = list(seed) if seed is not None else store.seed
        self.last_warning: Optional[DataCorruption] = None

    def list_entries(self) -> list[CatalogEntry]:
        """Stored catalog, or the seed catalog if the stored one is unreadable."""
        try:
            entries = self.store.load()
        except DataCorruption as e:
            print(f"[WARN] {e}. Falling back to seed entries.")
            self.last_warning = e
            return self.store.recover(self._seed)

        self.last_warning = None
        return entries

    def get_entry(self, entry_id: str) -> Optional[CatalogEntry]:
        try:
            return self.store.get(entry_id)
        except DataCorruption:
            self.list_entries()
            return self.store.get(entry_id)

    def create_entry(self, entry_input: EntryInput, author: User) -> CatalogEntry:
        """Assemble and persist a new entry. Raises ValidationError on bad input."""
        try:
            existing_ids = self.store.ids()
        except DataCorruption:
            self.list_entries()
            existing_ids = self.store.ids()

        entry = assemble(entry_input, author, existing_ids=existing_ids)
        self.store.append(entry)
        print(f"[catalog] Created entry {entry.id}: {entry.title}")
        return entry

    def search_entries(self, entries: Iterable[CatalogEntry], query: str) -> list[CatalogEntry]:
        return filter_entries(entries, query)

    def enrich(self, prompt_text: str) -> AnalysisResult:
        """Suggested metadata for a prompt. Raises EnrichmentError subclasses."""
        return self.adapter.analyze(prompt_text)

    def enrich_draft(self, draft: EntryDraft) -> bool:
        """
        Run one enrichment pass on a draft.

        Returns True if the result was applied. Service failures are recorded
        on the draft rather than raised; a blank prompt raises
        PreconditionError before any request is made.
        """
        ticket = draft.begin_analysis()
        try:
            result = self.adapter.analyze(ticket.prompt)
        except EnrichmentError as e:
            print(f"[enrich] Analysis failed: {e}")
            draft.fail_analysis(ticket, e)
            return False
        return draft.apply_analysis(ticket, result)


_instance: CatalogService = None


def get_service() -> CatalogService:
    """Get the configured catalog service."""
    global _instance

    if _instance is None:
        _instance = CatalogService(EntryStore(get_storage(), seed=seed_entries()))

    return _instance


def configure_service(service: Optional[CatalogService]) -> None:
    """Replace the shared service. None resets to the configured default."""
    global _instance
    _instance = service
