"""
Catalog - prompt entries, search, and AI enrichment.

Modules:
- store: Ordered entry collection with whole-snapshot persistence
- search: Keyword filtering over entries
- assembler: Finalize form input into an immutable entry
- enrich: Structured-output call to the generative service
- draft: Form state and late-arrival guard for enrichment results
- service: Facade used by the web and CLI layers
"""

from .errors import (
    CatalogError,
    ValidationError,
    DataCorruption,
    EnrichmentError,
    PreconditionError,
    MissingCredential,
    EnrichmentRequestError,
    AnalysisParseError,
)
from .store import EntryStore, serialize_entries, deserialize_entries
from .search import filter_entries
from .assembler import assemble, new_entry_id
from .enrich import EnrichmentAdapter, parse_analysis
from .draft import EntryDraft, AnalysisTicket
from .seed import seed_entries
from .service import CatalogService, get_service, configure_service

__all__ = [
    # errors
    'CatalogError',
    'ValidationError',
    'DataCorruption',
    'EnrichmentError',
    'PreconditionError',
    'MissingCredential',
    'EnrichmentRequestError',
    'AnalysisParseError',
    # store
    'EntryStore',
    'serialize_entries',
    'deserialize_entries',
    # search
    'filter_entries',
    # assembler
    'assemble',
    'new_entry_id',
    # enrich
    'EnrichmentAdapter',
    'parse_analysis',
    # draft
    'EntryDraft',
    'AnalysisTicket',
    # seed
    'seed_entries',
    # service
    'CatalogService',
    'get_service',
    'configure_service',
]
