"""
Error analysis tests.
"""

from __future__ import annotations

import pytest

from dtcg_validator.components.analysis import (
    NO_ERRORS_SUMMARY,
    AnalyzeInput,
    ErrorCategory,
    analyze_error,
    analyze_errors,
    extract_path,
    run,
)
from dtcg_validator.components.validation import ValidationResult, validate_tokens_object


class TestExtractPath:
    def test_at_path(self) -> None:
        assert extract_path("number at spacing.small must be a number") == "spacing.small"

    def test_indexed_path(self) -> None:
        message = "Color component at c.components[1] must be between 0 and 1"
        assert extract_path(message) == "c.components[1]"

    def test_hyphenated_path(self) -> None:
        assert extract_path("number at font-size.base must be a number") == "font-size.base"

    def test_no_path(self) -> None:
        assert extract_path("Root must be an object") == "root"


class TestCategories:
    @pytest.mark.parametrize(
        "message, category",
        [
            ("Invalid JSON: Expecting value: line 1 column 1 (char 0)", ErrorCategory.STRUCTURE),
            ("Root must be an object", ErrorCategory.STRUCTURE),
            ("Input is empty", ErrorCategory.STRUCTURE),
            ("Token at a.b is missing $value", ErrorCategory.STRUCTURE),
            ("Shadow at s is missing required field: blur", ErrorCategory.STRUCTURE),
            ("Typography at t is missing required field: fontSize", ErrorCategory.STRUCTURE),
            ("Typography at t is missing required field: fontWeight", ErrorCategory.STRUCTURE),
            ("Border at b must have color property", ErrorCategory.STRUCTURE),
            ("Border at b must have width property", ErrorCategory.STRUCTURE),
            ("Transition at t must have delay property", ErrorCategory.STRUCTURE),
            (
                'Token name "a.b" at a.b contains invalid characters ({, }, ., or ")',
                ErrorCategory.NAMING,
            ),
            (
                "Token at x has no determinable type (no $type property or group type)",
                ErrorCategory.TYPE,
            ),
            ('Unknown $type "spacing" at s', ErrorCategory.TYPE),
            ("Circular reference detected: a → b → a at a", ErrorCategory.REFERENCE),
            ('Reference "{color.x}" points to non-existent token at a', ErrorCategory.REFERENCE),
            ("fontWeight at w must be a number between 1-1000", ErrorCategory.VALUE),
            ("Color hue component at c.components[0] must be >= 0 and < 360", ErrorCategory.VALUE),
            ("number at n must be a number", ErrorCategory.VALUE),
        ],
    )
    def test_category(self, message: str, category: ErrorCategory) -> None:
        assert analyze_error(message, 1).category is category

    def test_reference_beats_value_keywords(self) -> None:
        # The token path mentions "components" but the problem is the reference.
        message = 'Reference "{components.alpha}" points to non-existent token at fontWeight'
        insight = analyze_error(message, 1)
        assert insight.category is ErrorCategory.REFERENCE
        assert insight.suggestion is not None
        assert "{components.alpha}" in insight.suggestion

    def test_unrecognised_message_defaults_to_value(self) -> None:
        insight = analyze_error("Something odd happened", 3)
        assert insight.category is ErrorCategory.VALUE
        assert insight.suggestion is None
        assert insight.path == "root"
        assert insight.number == 3


class TestSuggestions:
    def test_hue_suggestion(self) -> None:
        insight = analyze_error(
            "Color hue component at c.components[2] must be >= 0 and < 360", 1
        )
        assert insight.suggestion is not None
        assert "360 is NOT valid" in insight.suggestion
        assert insight.path == "c.components[2]"

    def test_range_suggestion(self) -> None:
        insight = analyze_error("Color component at c.components[1] must be between 0 and 100", 1)
        assert insight.suggestion is not None
        assert "[0, 100]" in insight.suggestion

    def test_unknown_type_lists_types(self) -> None:
        insight = analyze_error('Unknown $type "spacing" at s', 1)
        assert insight.suggestion is not None
        assert '"spacing"' in insight.suggestion
        assert "typography" in insight.suggestion

    def test_missing_shadow_field(self) -> None:
        insight = analyze_error("Shadow at s is missing required field: spread", 1)
        assert insight.suggestion is not None
        assert insight.suggestion.startswith('Add the "spread" property')

    def test_missing_value_names_path(self) -> None:
        insight = analyze_error("Token at color.primary is missing $value", 1)
        assert insight.path == "color.primary"
        assert insight.suggestion is not None
        assert "color.primary" in insight.suggestion


class TestAnalyzeErrors:
    def test_no_errors(self, valid_document) -> None:
        report = analyze_errors(validate_tokens_object(valid_document))
        assert report.summary == NO_ERRORS_SUMMARY
        assert report.insights == []
        assert report.suggestions == []

    def test_summary_counts_by_category(self, invalid_document) -> None:
        report = analyze_errors(validate_tokens_object(invalid_document))
        assert report.summary == "Found 6 error(s): 3 structure, 2 value, 1 naming"
        assert [i.number for i in report.insights] == [1, 2, 3, 4, 5, 6]

    def test_result_is_passed_through(self, invalid_document) -> None:
        result = validate_tokens_object(invalid_document)
        errors_before = list(result.errors)
        report = analyze_errors(result)
        assert report.result is result
        assert result.errors == errors_before
        assert not report.result.valid

    def test_groups_keep_error_order(self) -> None:
        result = ValidationResult(
            valid=False,
            errors=[
                "number at a must be a number",
                "Input is empty",
                "number at b must be a number",
            ],
        )
        report = analyze_errors(result)
        values = report.categories[ErrorCategory.VALUE]
        assert [i.path for i in values] == ["a", "b"]

    def test_to_dict(self) -> None:
        result = ValidationResult(valid=False, errors=["Input is empty"])
        payload = run(AnalyzeInput(result=result)).to_dict()
        assert payload["valid"] is False
        assert payload["tokenCount"] == 0
        analysis = payload["analysis"]
        assert analysis["summary"] == "Found 1 error(s): 1 structure"
        assert analysis["categories"]["structure"][0]["path"] == "root"
        assert set(analysis["categories"]) == {c.value for c in ErrorCategory}
