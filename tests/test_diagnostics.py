"""Tests for diagnostics: codes, templates, formatter output, error types.

Python 3.13+.
"""

import json

import pytest

from verbiage.diagnostics import (
    Collision,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    FormatterFailureError,
    MissingTranslationError,
    OutputFormat,
    RegistryCollisionError,
    TableFormatError,
    TemplateArityMismatchError,
    TemplateAuthoringError,
    VerbiageError,
)


class TestDiagnosticCodes:
    """Code ranges and uniqueness."""

    def test_values_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.MISSING_TRANSLATION, 1000, 1999),
            (DiagnosticCode.TEMPLATE_ARITY_MISMATCH, 2000, 2999),
            (DiagnosticCode.REGISTRY_COLLISION, 3000, 3999),
            (DiagnosticCode.FORMATTER_FAILED, 4000, 4999),
            (DiagnosticCode.VALIDATION_MIXED_KINDS, 5000, 5999),
            (DiagnosticCode.TABLE_DECODE_FAILED, 6000, 6999),
        ],
    )
    def test_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    def test_rust_missing_translation(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("start", "en")
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[MISSING_TRANSLATION]: No translation in 'en' for 'start'\n"
            "  = key: start\n"
            "  = language: en\n"
            "  = help: Add an entry for this key to one of the resource tables"
        )

    def test_rust_collision_lists_tables(self) -> None:
        diagnostic = ErrorTemplate.registry_collision("start", "en", ("a", "b"))
        output = DiagnosticFormatter().format(diagnostic)
        assert output.splitlines()[0] == (
            "error[REGISTRY_COLLISION]: Key 'start' (en) is defined in multiple tables: 'a', 'b'"
        )
        assert "  = tables: a, b" in output

    def test_rust_arity_fields(self) -> None:
        diagnostic = ErrorTemplate.template_arity_mismatch("past-cycle-title", ("a", "b"), 1)
        output = DiagnosticFormatter().format(diagnostic)
        assert "  = expected: (a, b)" in output
        assert "  = received: 1 argument(s)" in output

    def test_rust_warning_color(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.VALIDATION_EMPTY_VALUE, message="empty", severity="warning"
        )
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m[VALIDATION_EMPTY_VALUE]")

    def test_rust_error_color(self) -> None:
        diagnostic = ErrorTemplate.invalid_timestamp("x")
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;31merror\033[0m")

    def test_simple(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("start", "en")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == (
            "MISSING_TRANSLATION: No translation in 'en' for 'start'"
        )

    def test_json(self) -> None:
        diagnostic = ErrorTemplate.static_args_ignored("default-save-text", 2)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "STATIC_ARGS_IGNORED"
        assert data["code_value"] == 2002
        assert data["content_key"] == "default-save-text"
        assert data["expected_args"] == []
        assert data["received_args"] == 2
        assert data["severity"] == "error"

    def test_json_keeps_non_ascii(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("café", "fr")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        assert "café" in formatter.format(diagnostic)

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_ENTRY, message="x" * 500)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "INVALID_ENTRY: xxxxxxxxxx..."

    def test_format_all(self) -> None:
        diagnostics = [
            ErrorTemplate.missing_translation("a", "en"),
            ErrorTemplate.missing_translation("b", "en"),
        ]
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all(diagnostics).count("\n\n") == 1

    def test_diagnostic_str_and_format_error(self) -> None:
        diagnostic = ErrorTemplate.missing_translation("start", "en")
        assert str(diagnostic) == "No translation in 'en' for 'start'"
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestErrors:
    """Exception hierarchy and attributes."""

    @pytest.mark.parametrize(
        ("error_type", "category"),
        [
            (MissingTranslationError, ErrorCategory.LOOKUP),
            (RegistryCollisionError, ErrorCategory.BUILD),
            (TemplateArityMismatchError, ErrorCategory.CALL),
            (TemplateAuthoringError, ErrorCategory.AUTHORING),
            (FormatterFailureError, ErrorCategory.FORMATTING),
            (TableFormatError, ErrorCategory.LOADING),
        ],
    )
    def test_categories(self, error_type: type[VerbiageError], category: ErrorCategory) -> None:
        assert issubclass(error_type, VerbiageError)
        assert error_type.category is category

    def test_plain_message(self) -> None:
        error = VerbiageError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_missing_translation(self) -> None:
        error = MissingTranslationError("start", "lv")
        assert (error.key, error.language) == ("start", "lv")
        assert error.diagnostic is not None
        assert error.diagnostic.content_key == "start"

    def test_collision_requires_at_least_one(self) -> None:
        with pytest.raises(ValueError, match="at least one collision"):
            RegistryCollisionError([])

    def test_single_collision_has_no_note(self) -> None:
        error = RegistryCollisionError([Collision("start", "en", ("a", "b"))])
        assert not getattr(error, "__notes__", [])

    def test_arity_message(self) -> None:
        error = TemplateArityMismatchError("past-cycle-title", ("period_start", "day_format"), 3)
        assert str(error) == (
            "Template 'past-cycle-title' expects 2 argument(s) (period_start, day_format), got 3"
        )
        assert error.actual_args == 3

    def test_static_args_message(self) -> None:
        error = TemplateArityMismatchError("default-save-text", (), 1)
        assert str(error) == "Static entry 'default-save-text' takes no arguments, got 1"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.STATIC_ARGS_IGNORED

    def test_formatter_failure_attributes(self) -> None:
        error = FormatterFailureError("bad", value=3, pattern="h:mma")
        assert (error.value, error.pattern) == (3, "h:mma")

    def test_table_format_error_is_value_error(self) -> None:
        error = TableFormatError(ErrorTemplate.table_decode_failed("x.json", "oops"))
        assert isinstance(error, ValueError)
        assert str(error) == "Could not decode table x.json: oops"
