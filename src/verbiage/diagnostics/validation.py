"""Validation result for resource table checks.

Consolidates feedback from table validation:
- Errors: problems that would fail a registry build (duplicate keys)
- Warnings: authoring issues that do not block a build (missing descriptions)

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single finding from table validation.

    Attributes:
        code: Diagnostic code of the finding
        message: Human-readable message
        key: Content key involved (None for table-level findings)
        table: Table name involved
    """

    code: DiagnosticCode
    message: str
    key: str | None = None
    table: str | None = None

    def format(self) -> str:
        """Format issue as a single line."""
        location = ""
        if self.table is not None:
            location = f" in table '{self.table}'"
        return f"[{self.code.name}]{location}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating a set of resource tables.

    Attributes:
        errors: Findings that would make a FAIL-policy build raise
        warnings: Informational authoring findings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationIssue, ...]
    warnings: tuple[ValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed. Warnings do not affect validity."""
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format()}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
