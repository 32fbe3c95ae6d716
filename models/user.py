"""
User - the author snapshot embedded in catalog entries.
"""

from enum import Enum

from .base import CatalogModel


class UserRole(str, Enum):
    """Role of a catalog user."""
    ADMIN = "ADMIN"
    ENGINEER = "ENGINEER"
    VIEWER = "VIEWER"


class User(CatalogModel):
    """
    A catalog user.

    Owned by the session collaborator. Entries keep their own copy.
    """
    id: str
    name: str
    avatar: str = ""
    role: UserRole = UserRole.VIEWER
