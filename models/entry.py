"""
CatalogEntry - one shareable prompt artifact.
"""

from typing import Iterable, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .base import CatalogModel
from .user import User

MIN_RATING = 1
MAX_RATING = 10


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Strip tags, drop blanks, drop repeats keeping first-seen order (case-sensitive)."""
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CatalogEntry(CatalogModel):
    """
    A catalog entry.

    This is THE entry definition. The ``vibe_entries`` slot maps directly to a
    list of these.
    """
    # Identity
    id: str = Field(min_length=1)

    # Content
    title: str
    description: str = ""
    prompt: str = Field(min_length=1)
    builder_url: Optional[str] = None
    deployed_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    # Authorship (value snapshot taken at creation)
    author: User

    # Timestamps in epoch milliseconds
    created_at: int
    updated_at: int

    version: int = Field(default=1, ge=1)
    likes: int = Field(default=0, ge=0)

    # AI metadata
    ai_summary: Optional[str] = None
    ai_rating: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, tags: list[str]) -> list[str]:
        return normalize_tags(tags)

    @field_validator("builder_url", "deployed_url")
    @classmethod
    def _normalize_url(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> "CatalogEntry":
        if self.created_at > self.updated_at:
            raise ValueError("createdAt must not be later than updatedAt")
        return self

    @property
    def display_summary(self) -> str:
        """Card text: AI summary when present, else the description."""
        return self.ai_summary or self.description

    def matches(self, needle: str) -> bool:
        """Lowercased ``needle`` appears in the title, a tag, or the author name."""
        if needle in self.title.lower():
            return True
        if any(needle in tag.lower() for tag in self.tags):
            return True
        return needle in self.author.name.lower()


class EntryInput(BaseModel):
    """
    Unsaved entry fields as submitted by a form or API client.

    Identity, timestamps, counters and author are assigned on assembly.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str = ""
    description: str = ""
    prompt: str = ""
    builder_url: Optional[str] = None
    deployed_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    ai_summary: Optional[str] = None
    ai_rating: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    @field_validator("builder_url", "deployed_url", "ai_summary")
    @classmethod
    def _blank_optional(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)

    def missing_fields(self) -> list[str]:
        """Required fields that are blank."""
        missing = []
        if not self.title.strip():
            missing.append("title")
        if not self.prompt.strip():
            missing.append("prompt")
        return missing
