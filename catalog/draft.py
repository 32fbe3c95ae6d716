"""
Entry draft - mutable form state for an entry being written.

Enrichment results land here, never directly in the catalog. Each analysis
request gets a ticket; a result is only applied if its ticket is still the
current one and the prompt hasn't changed, so a slow reply can't overwrite
newer edits.
"""

from dataclasses import dataclass
from typing import Optional

from models import AnalysisResult, EntryInput, normalize_tags
from .errors import PreconditionError

ANALYSIS_FAILED_MESSAGE = "AI Analysis failed. Please check your API key or try again."


@dataclass(frozen=True)
class AnalysisTicket:
    """Identifies one in-flight analysis request."""
    request_id: int
    prompt: str


class EntryDraft:
    """Fields of an unsaved entry plus the enrichment request state."""

    def __init__(
        self,
        prompt: str = "",
        title: str = "",
        description: str = "",
        builder_url: str = "",
        deployed_url: str = "",
        tags: Optional[list[str]] = None,
    ):
        self.prompt = prompt
        self.title = title
        self.description = description
        self.builder_url = builder_url
        self.deployed_url = deployed_url
        self.tags: list[str] = normalize_tags(tags or [])
        self.ai_summary: Optional[str] = None
        self.ai_rating: Optional[int] = None

        self.analyzing = False
        self.analysis_error: Optional[str] = None
        self.last_error: Optional[Exception] = None
        self._request_id = 0

    # Tags

    def add_tag(self, tag: str) -> bool:
        """Add tag. Returns False if blank or already present."""
        tag = tag.strip()
        if not tag or tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def remove_tag(self, tag: str) -> None:
        self.tags = [t for t in self.tags if t != tag]

    # Enrichment

    def begin_analysis(self) -> AnalysisTicket:
        """Start a request. Supersedes any request still in flight."""
        if not self.prompt.strip():
            raise PreconditionError("Paste a prompt before running analysis")

        self._request_id += 1
        self.analyzing = True
        self.analysis_error = None
        return AnalysisTicket(request_id=self._request_id, prompt=self.prompt)

    def is_current(self, ticket: AnalysisTicket) -> bool:
        """Ticket still belongs to the latest request and the prompt is unchanged."""
        return (
            self.analyzing
            and ticket.request_id == self._request_id
            and ticket.prompt == self.prompt
        )

    def apply_analysis(self, ticket: AnalysisTicket, result: AnalysisResult) -> bool:
        """Pre-fill fields from ``result``. Returns False if the ticket is stale."""
        if not self.is_current(ticket):
            return False

        self.title = result.title
        self.description = result.summary
        self.ai_summary = result.summary
        self.ai_rating = result.rating
        self.tags = normalize_tags(self.tags + list(result.tags))
        self.analyzing = False
        return True

    def fail_analysis(self, ticket: AnalysisTicket, error: Exception) -> bool:
        """Record a failed request. Returns False if the ticket is stale."""
        if not self.is_current(ticket):
            return False

        self.analysis_error = ANALYSIS_FAILED_MESSAGE
        self.last_error = error
        self.analyzing = False
        return True

    def cancel_analysis(self) -> None:
        """Abandon the in-flight request. Its result will be discarded."""
        self._request_id += 1
        self.analyzing = False

    def to_input(self) -> EntryInput:
        return EntryInput(
            title=self.title,
            description=self.description,
            prompt=self.prompt,
            builder_url=self.builder_url or None,
            deployed_url=self.deployed_url or None,
            tags=list(self.tags),
            ai_summary=self.ai_summary,
            ai_rating=self.ai_rating,
        )
