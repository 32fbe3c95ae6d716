"""
Domain models - single source of truth for catalog records.

Design principles:
- Every record defined once
- Validation at the boundary
- Backend-agnostic (storage handles persistence)
"""

from .base import CatalogModel, now_ms
from .user import User, UserRole
from .entry import CatalogEntry, EntryInput, normalize_tags
from .analysis import AnalysisResult

__all__ = [
    # Base
    "CatalogModel",
    "now_ms",
    # User
    "User",
    "UserRole",
    # Entry
    "CatalogEntry",
    "EntryInput",
    "normalize_tags",
    # Analysis
    "AnalysisResult",
]
