"""
Analysis models - AI suggested metadata for a raw prompt.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .entry import MAX_RATING, MIN_RATING


class AnalysisResult(BaseModel):
    """
    Suggested metadata returned by the enrichment service.

    Ephemeral: used to pre-fill a draft, never persisted verbatim.
    Strict so that a reply with the wrong primitive types is rejected
    instead of coerced.
    """
    model_config = ConfigDict(
        strict=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str
    summary: str
    tags: list[str]
    complexity_score: int

    @property
    def rating(self) -> int:
        """Complexity score clamped into the entry rating range."""
        return max(MIN_RATING, min(MAX_RATING, self.complexity_score))

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
