"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def missing_translation(key: str, language: str) -> Diagnostic:
        """Key has no entry for the requested language.

        Args:
            key: The content key that was requested
            language: The language it was requested in

        Returns:
            Diagnostic for MISSING_TRANSLATION
        """
        msg = f"No translation in '{language}' for '{key}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=msg,
            hint="Add an entry for this key to one of the resource tables",
            content_key=key,
            language=language,
        )

    @staticmethod
    def registry_collision(key: str, language: str, tables: Sequence[str]) -> Diagnostic:
        """Two tables define the same key for the same language.

        Args:
            key: The duplicated content key
            language: Language of the duplicated entries
            tables: Names of the defining tables, in merge order

        Returns:
            Diagnostic for REGISTRY_COLLISION
        """
        names = ", ".join(f"'{t}'" for t in tables)
        msg = f"Key '{key}' ({language}) is defined in multiple tables: {names}"
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_COLLISION,
            message=msg,
            hint="Rename one of the keys or remove the duplicate entry",
            content_key=key,
            language=language,
            tables=tuple(tables),
        )

    @staticmethod
    def template_arity_mismatch(
        key: str, expected: Sequence[str], actual: int
    ) -> Diagnostic:
        """Template called with the wrong number of arguments.

        Args:
            key: The content key of the template
            expected: Declared parameter names
            actual: Number of arguments passed

        Returns:
            Diagnostic for TEMPLATE_ARITY_MISMATCH
        """
        msg = (
            f"Template '{key}' expects {len(expected)} argument(s) "
            f"({', '.join(expected) or 'none'}), got {actual}"
        )
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_ARITY_MISMATCH,
            message=msg,
            hint="Check the entry's declared params in its resource table",
            content_key=key,
            expected_args=tuple(expected),
            received_args=actual,
        )

    @staticmethod
    def static_args_ignored(key: str, actual: int) -> Diagnostic:
        """Static entry called with arguments.

        Args:
            key: The content key of the static entry
            actual: Number of arguments passed

        Returns:
            Diagnostic for STATIC_ARGS_IGNORED
        """
        msg = f"Static entry '{key}' takes no arguments, got {actual}"
        return Diagnostic(
            code=DiagnosticCode.STATIC_ARGS_IGNORED,
            message=msg,
            hint="Drop the arguments or turn the entry into a template",
            content_key=key,
            expected_args=(),
            received_args=actual,
        )

    @staticmethod
    def template_signature_mismatch(name: str, params: Sequence[str], reason: str) -> Diagnostic:
        """Template function signature disagrees with its declared params.

        Args:
            name: Function name
            params: Declared parameter names
            reason: Why the signature was rejected

        Returns:
            Diagnostic for TEMPLATE_SIGNATURE_MISMATCH
        """
        msg = f"Template function '{name}' does not match params {tuple(params)!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_SIGNATURE_MISMATCH,
            message=msg,
            hint="Template functions take the declared params positionally, then ctx",
            expected_args=tuple(params),
        )

    @staticmethod
    def invalid_entry(key: str, reason: str) -> Diagnostic:
        """Entry or table row is malformed.

        Args:
            key: The content key of the row
            reason: Description of the problem

        Returns:
            Diagnostic for INVALID_ENTRY
        """
        msg = f"Invalid entry '{key}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY,
            message=msg,
            content_key=key,
        )

    @staticmethod
    def formatter_failed(value: object, pattern: str, reason: str) -> Diagnostic:
        """Date/time formatting failed.

        Args:
            value: The timestamp that failed to format
            pattern: The CLDR pattern used
            reason: Underlying error description

        Returns:
            Diagnostic for FORMATTER_FAILED
        """
        msg = f"Formatting {value!r} with pattern '{pattern}' failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_FAILED,
            message=msg,
            hint="Check the pattern against the CLDR date field symbols",
        )

    @staticmethod
    def invalid_timestamp(value: object) -> Diagnostic:
        """Formatter received something that is not a date or datetime.

        Args:
            value: The offending value

        Returns:
            Diagnostic for INVALID_TIMESTAMP
        """
        msg = f"Expected date or datetime, got {type(value).__name__}: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIMESTAMP,
            message=msg,
            hint="Pass a datetime (or date) read from the context snapshot",
        )

    @staticmethod
    def table_decode_failed(source: str, reason: str) -> Diagnostic:
        """Table file content could not be turned into entries.

        Args:
            source: Path or description of the table file
            reason: Underlying error description

        Returns:
            Diagnostic for TABLE_DECODE_FAILED
        """
        msg = f"Could not decode table {source}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TABLE_DECODE_FAILED,
            message=msg,
            hint='Rows look like {"key": {"description": "...", "value": ...}}',
        )
