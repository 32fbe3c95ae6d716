"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O, mocked dependencies
- integration/ Component boundaries, real I/O to temp locations

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from models import User, UserRole


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")
    config.addinivalue_line("markers", "slow: Tests that take > 1s")


@pytest.fixture
def author():
    """Standard test author."""
    return User(id="u9", name="Test Author", avatar="https://example.com/a.png", role=UserRole.ENGINEER)


@pytest.fixture
def seed():
    """The two starter entries at a fixed clock."""
    from catalog import seed_entries
    return seed_entries(now=1_700_000_000_000)


@pytest.fixture
def memory_storage():
    from repositories import MemoryStorage
    return MemoryStorage()


@pytest.fixture
def store(memory_storage, seed):
    """Entry store over empty in-memory storage, seeded."""
    from catalog import EntryStore
    return EntryStore(memory_storage, seed=seed)


@pytest.fixture
def ai_client():
    """
    Factory for a fake OpenAI-style client.

    Usage:
        client = ai_client('{"title": ...}')
        client = ai_client(error=SomeError())
    """
    def make(content=None, error=None):
        client = MagicMock()
        if error is not None:
            client.chat.completions.create.side_effect = error
        else:
            message = MagicMock()
            message.content = content
            choice = MagicMock()
            choice.message = message
            client.chat.completions.create.return_value = MagicMock(choices=[choice])
        return client

    return make


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Add timing summary at end of test run."""
    stats = terminalreporter.stats

    # Collect slowest tests
    if 'passed' in stats:
        durations = []
        for report in stats['passed']:
            if hasattr(report, 'duration'):
                durations.append((report.duration, report.nodeid))

        if durations:
            durations.sort(reverse=True)
            terminalreporter.write_sep("=", "slowest 5 tests")
            for duration, nodeid in durations[:5]:
                terminalreporter.write_line(f"  {duration:.2f}s  {nodeid}")
