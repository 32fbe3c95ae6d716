"""
Catalog error taxonomy.

Enrichment errors are recoverable: they disable the AI shortcut, never
browsing or creation.
"""


class CatalogError(Exception):
    """Base for all catalog errors."""


class ValidationError(CatalogError):
    """Required input missing or invalid. Reported inline, never fatal."""

    def __init__(self, fields: list[str], message: str = None):
        self.fields = list(fields)
        super().__init__(message or f"Missing required field(s): {', '.join(self.fields)}")


class DataCorruption(CatalogError):
    """Persisted catalog could not be read back."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored catalog '{key}' is unreadable: {reason}")


class EnrichmentError(CatalogError):
    """An enrichment attempt failed. The user may retry or fill fields manually."""


class PreconditionError(EnrichmentError):
    """Enrichment requested for blank prompt text."""


class MissingCredential(EnrichmentError):
    """No credential configured for the enrichment service."""


class EnrichmentRequestError(EnrichmentError):
    """Transport or API failure talking to the enrichment service."""


class AnalysisParseError(EnrichmentError):
    """The enrichment reply did not match the AnalysisResult shape."""
