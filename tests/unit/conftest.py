"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no external dependencies)
- Deterministic (same result every time)
"""

import json
import pytest


@pytest.fixture
def fixed_ms():
    """Fixed epoch milliseconds for deterministic tests."""
    return 1_705_320_000_000


@pytest.fixture
def entry_data(fixed_ms):
    """Raw stored entry, as found in the vibe_entries slot."""
    return {
        "id": "abc123",
        "title": "Kanban Board",
        "description": "Drag and drop board.",
        "prompt": "Build a kanban board with three columns.",
        "tags": ["react", "dnd"],
        "author": {
            "id": "u1",
            "name": "Alex Engineer",
            "avatar": "https://example.com/alex.png",
            "role": "ENGINEER",
        },
        "createdAt": fixed_ms,
        "updatedAt": fixed_ms,
        "version": 1,
        "likes": 0,
    }


@pytest.fixture
def analysis_json():
    """A well-formed enrichment reply."""
    return json.dumps({
        "title": "Kanban Board Builder",
        "summary": "Builds a three-column kanban board. Supports drag and drop.",
        "tags": ["react", "kanban", "dnd"],
        "complexityScore": 5,
    })
