"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages (entry values can be long legal text)
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.missing_translation("start", "en")
        >>> print(formatter.format(diagnostic))
        error[MISSING_TRANSLATION]: No translation in 'en' for 'start'
          = key: start
          = language: en
          = help: Add an entry for this key to one of the resource tables

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MISSING_TRANSLATION: No translation in 'en' for 'start'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with all errors and warnings.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        parts: list[str] = []

        if result.is_valid:
            parts.append("Validation passed")
        else:
            parts.append(
                f"Validation failed: {result.error_count} error(s), "
                f"{result.warning_count} warning(s)"
            )

        if result.errors:
            parts.append("\nErrors:")
            for error in result.errors:
                parts.append(f"  {error.format()}")

        if result.warnings:
            parts.append("\nWarnings:")
            for warning in result.warnings:
                parts.append(f"  {warning.format()}")

        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[REGISTRY_COLLISION]: Key 'start' (en) is defined in multiple tables: 'a', 'b'
              = key: start
              = language: en
              = tables: a, b
              = help: Rename one of the keys or remove the duplicate entry
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.content_key:
            parts.append(f"  = key: {diagnostic.content_key}")

        if diagnostic.language:
            parts.append(f"  = language: {diagnostic.language}")

        if diagnostic.tables:
            parts.append(f"  = tables: {', '.join(diagnostic.tables)}")

        if diagnostic.expected_args is not None:
            parts.append(f"  = expected: ({', '.join(diagnostic.expected_args)})")

        if diagnostic.received_args is not None:
            parts.append(f"  = received: {diagnostic.received_args} argument(s)")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_TRANSLATION: No translation in 'en' for 'start'
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_TRANSLATION", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int | list[str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.content_key:
            data["content_key"] = diagnostic.content_key

        if diagnostic.language:
            data["language"] = diagnostic.language

        if diagnostic.tables:
            data["tables"] = list(diagnostic.tables)

        if diagnostic.expected_args is not None:
            data["expected_args"] = list(diagnostic.expected_args)

        if diagnostic.received_args is not None:
            data["received_args"] = diagnostic.received_args

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
