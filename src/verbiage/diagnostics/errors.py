"""verbiage exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Hierarchy:
    VerbiageError
    ├─ MissingTranslationError (lookup, recoverable)
    ├─ RegistryCollisionError (build time)
    ├─ TemplateArityMismatchError (caller error)
    ├─ TemplateAuthoringError (authoring time)
    ├─ FormatterFailureError (configuration error, propagated)
    └─ TableFormatError (malformed table file)

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from .codes import Diagnostic, ErrorCategory
from .templates import ErrorTemplate

__all__ = [
    "Collision",
    "FormatterFailureError",
    "MissingTranslationError",
    "RegistryCollisionError",
    "TableFormatError",
    "TemplateArityMismatchError",
    "TemplateAuthoringError",
    "VerbiageError",
]


class VerbiageError(Exception):
    """Base exception for all verbiage errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category shared by all instances of the class
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.LOOKUP

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize VerbiageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MissingTranslationError(VerbiageError):
    """Requested key has no entry for the language.

    Recovered locally by the resolver (placeholder + log) unless the
    resolver runs in strict mode.
    """

    category = ErrorCategory.LOOKUP

    def __init__(self, key: str, language: str) -> None:
        super().__init__(ErrorTemplate.missing_translation(key, language))
        self.key = key
        self.language = language


@dataclass(frozen=True, slots=True)
class Collision:
    """One (key, language) pair defined by more than one table.

    Attributes:
        key: Duplicated content key
        language: Language of the duplicated entries
        tables: Defining table names in merge order
    """

    key: str
    language: str
    tables: tuple[str, ...]


class RegistryCollisionError(VerbiageError):
    """Two or more tables define the same (key, language).

    Raised at build time so duplicate keys are caught before shipping.
    The first collision is exposed through ``key``, ``language`` and
    ``tables``; ``collisions`` lists every collision found in the build.
    """

    category = ErrorCategory.BUILD

    def __init__(self, collisions: Sequence[Collision]) -> None:
        if not collisions:
            msg = "RegistryCollisionError requires at least one collision"
            raise ValueError(msg)
        first = collisions[0]
        diagnostic = ErrorTemplate.registry_collision(first.key, first.language, first.tables)
        super().__init__(diagnostic)
        if len(collisions) > 1:
            self.add_note(f"{len(collisions) - 1} more collision(s) in this build")
        self.collisions: tuple[Collision, ...] = tuple(collisions)

    @property
    def key(self) -> str:
        return self.collisions[0].key

    @property
    def language(self) -> str:
        return self.collisions[0].language

    @property
    def tables(self) -> tuple[str, ...]:
        return self.collisions[0].tables


class TemplateArityMismatchError(VerbiageError):
    """Entry invoked with the wrong number of arguments.

    Covers both templates called with too few/many arguments and static
    entries called with any arguments at all.

    Attributes:
        key: Content key of the entry
        expected_args: Declared parameter names
        actual_args: Number of arguments passed
    """

    category = ErrorCategory.CALL

    def __init__(self, key: str, expected_args: Sequence[str], actual_args: int) -> None:
        if expected_args:
            diagnostic = ErrorTemplate.template_arity_mismatch(key, expected_args, actual_args)
        else:
            diagnostic = ErrorTemplate.static_args_ignored(key, actual_args)
        super().__init__(diagnostic)
        self.key = key
        self.expected_args = tuple(expected_args)
        self.actual_args = actual_args


class TemplateAuthoringError(VerbiageError):
    """Template declared with params its function cannot accept."""

    category = ErrorCategory.AUTHORING


class FormatterFailureError(VerbiageError):
    """Date/time formatting failed.

    Indicates a configuration error (bad pattern, wrong value type), not a
    transient condition, so it propagates to whoever resolved the template.

    Attributes:
        value: The value that failed to format
        pattern: Pattern in use ("" for relative formatting)
    """

    category = ErrorCategory.FORMATTING

    def __init__(
        self, message: str | Diagnostic, *, value: object = None, pattern: str = ""
    ) -> None:
        super().__init__(message)
        self.value = value
        self.pattern = pattern


class TableFormatError(VerbiageError, ValueError):
    """Table file decoded but its rows are not valid entries."""

    category = ErrorCategory.LOADING
