"""Diagnostic system for verbiage errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    Collision,
    FormatterFailureError,
    MissingTranslationError,
    RegistryCollisionError,
    TableFormatError,
    TemplateArityMismatchError,
    TemplateAuthoringError,
    VerbiageError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationIssue, ValidationResult

__all__ = [
    "Collision",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatterFailureError",
    "MissingTranslationError",
    "OutputFormat",
    "RegistryCollisionError",
    "TableFormatError",
    "TemplateArityMismatchError",
    "TemplateAuthoringError",
    "ValidationIssue",
    "ValidationResult",
    "VerbiageError",
]
