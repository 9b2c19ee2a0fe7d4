"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for VerbiageError.

    Inherits from ``StrEnum`` so that log aggregation and JSON output receive
    plain strings (``"lookup"``, ``"build"``) rather than enum reprs.

    Categories:
        LOOKUP: Key has no entry for the requested language
        BUILD: Registry construction failure (collisions)
        AUTHORING: Entry declared inconsistently with its function
        CALL: Caller passed the wrong arguments for an entry
        FORMATTING: Date/time formatting failure
        LOADING: Table file could not be read or decoded
    """

    LOOKUP = "lookup"
    BUILD = "build"
    AUTHORING = "authoring"
    CALL = "call"
    FORMATTING = "formatting"
    LOADING = "loading"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing translations)
        2000-2999: Call errors (arity mismatches)
        3000-3999: Build and authoring errors
        4000-4999: Formatting errors
        5000-5099: Table validation errors
        5100-5199: Table validation warnings
        6000-6999: Loading errors
    """

    # Lookup errors (1000-1999)
    MISSING_TRANSLATION = 1001

    # Call errors (2000-2999)
    TEMPLATE_ARITY_MISMATCH = 2001
    STATIC_ARGS_IGNORED = 2002

    # Build and authoring errors (3000-3999)
    REGISTRY_COLLISION = 3001
    TEMPLATE_SIGNATURE_MISMATCH = 3002
    INVALID_ENTRY = 3003

    # Formatting errors (4000-4999)
    FORMATTER_FAILED = 4001
    INVALID_TIMESTAMP = 4002

    # Validation errors (5000-5099)
    VALIDATION_DUPLICATE_KEY = 5001
    VALIDATION_NO_LANGUAGES = 5002

    # Validation warnings (5100-5199)
    VALIDATION_EMPTY_DESCRIPTION = 5101
    VALIDATION_EMPTY_VALUE = 5102
    VALIDATION_DUPLICATE_TABLE_NAME = 5103
    VALIDATION_MIXED_KINDS = 5104

    # Loading errors (6000-6999)
    TABLE_DECODE_FAILED = 6001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for both
    humans reading logs and tooling consuming JSON output.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        content_key: Content key involved (if any)
        language: Language involved (if any)
        tables: Table names involved (collisions)
        expected_args: Declared parameter names (arity errors)
        received_args: Number of arguments actually passed (arity errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    content_key: str | None = None
    language: str | None = None
    tables: tuple[str, ...] | None = None
    expected_args: tuple[str, ...] | None = None
    received_args: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[MISSING_TRANSLATION]: No translation in 'en' for 'start'
              = key: start
              = language: en
              = help: Add an entry for this key to one of the resource tables

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
