"""Unit tests for structured-output schemas."""

import pytest

from schemas import ResponseSchema, get_analysis_schema, load_schema


class TestAnalysisSchema:
    """Test the enrichment response schema."""

    def test_loads(self):
        schema = get_analysis_schema()
        assert schema.name == "analysis_result"
        assert set(schema.required) == {"title", "summary", "tags", "complexityScore"}

    def test_prompt_embeds_text(self):
        prompt = get_analysis_schema().build_prompt("Make a todo app")
        assert "Make a todo app" in prompt
        assert "complexity score (1-10)" in prompt

    def test_response_format(self):
        fmt = get_analysis_schema().to_response_format()
        assert fmt["type"] == "json_schema"
        assert fmt["json_schema"]["strict"] is True
        assert fmt["json_schema"]["schema"]["additionalProperties"] is False

    def test_unknown_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")


def test_build_prompt_leaves_braces_in_text():
    schema = ResponseSchema(name="x", description="", instruction="Prompt:\n{prompt}", schema={})
    assert schema.build_prompt("{a}") == "Prompt:\n{a}"
