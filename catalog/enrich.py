"""
Enrichment adapter - AI suggested metadata for a raw prompt.

One request per call, no retries. Retrying is the caller's decision.
"""

from typing import Optional

from openai import OpenAIError
from pydantic import ValidationError as PydanticValidationError

from config import ENRICHMENT_MODEL, get_api_key, get_client, parse_model_key
from models import AnalysisResult
from schemas import get_analysis_schema
from .errors import (
    AnalysisParseError,
    EnrichmentRequestError,
    MissingCredential,
    PreconditionError,
)


def parse_analysis(text: Optional[str]) -> AnalysisResult:
    """Parse a raw reply. Anything short of a complete AnalysisResult is an error."""
    if not text or not text.strip():
        raise AnalysisParseError("No response from AI")

    try:
        return AnalysisResult.model_validate_json(text)
    except PydanticValidationError as e:
        print(f"[enrich] Failed to parse AI response: {e.error_count()} error(s)")
        raise AnalysisParseError(f"Failed to parse AI analysis: {e}") from e


class EnrichmentAdapter:
    """
    Calls the generative service with a strict structured-output contract.

    Holds no per-request state, so concurrent calls are independent.
    """

    def __init__(self, model_key: str = ENRICHMENT_MODEL, client=None, api_key: str = None):
        self.model_key = model_key
        self._client = client
        self._api_key = api_key
        self._schema = get_analysis_schema()

    def _resolve_client(self):
        """Return (client, model_name). Fails before any network I/O without a credential."""
        if self._client is not None:
            _, model_name = parse_model_key(self.model_key)
            return self._client, model_name

        api_key = self._api_key or get_api_key()
        if not api_key:
            raise MissingCredential("API Key is missing")
        return get_client(self.model_key, api_key)

    def is_configured(self) -> bool:
        """True when a client or credential is available."""
        return self._client is not None or bool(self._api_key or get_api_key())

    def analyze(self, prompt_text: str) -> AnalysisResult:
        """
        Suggest title, summary, tags and complexity score for ``prompt_text``.

        Raises:
            PreconditionError: blank prompt text.
            MissingCredential: no credential configured.
            EnrichmentRequestError: the service call failed.
            AnalysisParseError: the reply didn't match the schema.
        """
        if not prompt_text or not prompt_text.strip():
            raise PreconditionError("Prompt text is required for analysis")

        client, model_name = self._resolve_client()

        try:
            resp = client.chat.completions.create(
                model=model_name,
                messages=[{"role": "user", "content": self._schema.build_prompt(prompt_text)}],
                response_format=self._schema.to_response_format(),
            )
        except OpenAIError as e:
            print(f"[enrich] Request to {self.model_key} failed: {e}")
            raise EnrichmentRequestError(f"AI analysis request failed: {e}") from e

        if not resp.choices:
            raise AnalysisParseError("No response from AI")

        return parse_analysis(resp.choices[0].message.content)
