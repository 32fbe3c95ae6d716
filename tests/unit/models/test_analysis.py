"""Unit tests for AnalysisResult model."""

import json
import pytest
from models import AnalysisResult


class TestAnalysisResult:
    """Test AnalysisResult parsing."""

    def test_parse_reply(self, analysis_json):
        result = AnalysisResult.model_validate_json(analysis_json)
        assert result.title == "Kanban Board Builder"
        assert result.tags == ["react", "kanban", "dnd"]
        assert result.complexity_score == 5

    def test_missing_field_rejected(self):
        reply = json.dumps({"title": "T", "summary": "S", "tags": []})
        with pytest.raises(ValueError):
            AnalysisResult.model_validate_json(reply)

    def test_string_score_rejected(self):
        reply = json.dumps({"title": "T", "summary": "S", "tags": [], "complexityScore": "5"})
        with pytest.raises(ValueError):
            AnalysisResult.model_validate_json(reply)

    def test_non_string_tag_rejected(self):
        reply = json.dumps({"title": "T", "summary": "S", "tags": [1, 2], "complexityScore": 5})
        with pytest.raises(ValueError):
            AnalysisResult.model_validate_json(reply)

    def test_rating_clamped(self):
        high = AnalysisResult(title="T", summary="S", tags=[], complexity_score=14)
        low = AnalysisResult(title="T", summary="S", tags=[], complexity_score=0)
        assert high.rating == 10
        assert low.rating == 1

    def test_json_dict_uses_wire_names(self, analysis_json):
        result = AnalysisResult.model_validate_json(analysis_json)
        assert result.to_json_dict()["complexityScore"] == 5
