"""
Catalog search - keyword filtering over the entry collection.
"""

from typing import Iterable

from models import CatalogEntry


def filter_entries(entries: Iterable[CatalogEntry], query: str) -> list[CatalogEntry]:
    """
    Entries whose title, any tag, or author name contains ``query``.

    Case-insensitive substring match. An empty query matches everything.
    Input order is kept; results are not ranked.
    """
    needle = (query or "").lower()
    if not needle:
        return list(entries)
    return [entry for entry in entries if entry.matches(needle)]
