"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def data_dir(temp_dir):
    """Temporary catalog data directory."""
    p = temp_dir / "data"
    p.mkdir()
    return p


@pytest.fixture
def api_client(seed, ai_client, analysis_reply):
    """
    Flask test client over an in-memory catalog.

    The shared service is restored afterwards.
    """
    import app
    from catalog import CatalogService, EnrichmentAdapter, EntryStore, configure_service
    from repositories import MemoryStorage

    storage = MemoryStorage()
    adapter = EnrichmentAdapter(client=ai_client(analysis_reply))
    service = CatalogService(EntryStore(storage, seed=seed), adapter=adapter, seed=seed)
    configure_service(service)

    yield app.app.test_client()

    configure_service(None)


@pytest.fixture
def analysis_reply():
    return (
        '{"title": "Todo App", "summary": "A todo list.", '
        '"tags": ["react", "todo"], "complexityScore": 3}'
    )
