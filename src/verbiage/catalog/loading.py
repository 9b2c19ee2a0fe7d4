"""Loading static resource tables from JSON files.

Literal text can live outside the code base, one JSON file per table and
language. Template entries are always authored in Python; files only carry
static values.

File layout (PathTableLoader("locales/{language}")):
    locales/en/alerts.json
    locales/en/notifications.json

File content:
    {
        "phone-bluetooth-is-off": {
            "description": "Instructions for: user's bluetooth is off.",
            "value": {"title": "Oops...", "message": "Looks like ..."}
        }
    }

Objects whose keys match a record's fields become that record (Alert,
Dialog, InputPrompt, EmailDraft); other objects become read-only sub-maps.

Components:
    TableLoader - Protocol for loaders (structural typing)
    PathTableLoader - Disk-based loader with path-traversal prevention
    TableLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load attempts
    load_tables() - Build ResourceTables plus a LoadSummary

Python 3.13+. Zero external dependencies.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from verbiage.diagnostics import ErrorTemplate, TableFormatError
from verbiage.enums import LoadStatus

from .entry import Static
from .records import record_from_mapping
from .table import EntrySpec, ResourceTable
from .types import ContentKey, Language, TableName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TableLoader",
    # Concrete loader
    "PathTableLoader",
    # Load result types
    "TableLoadResult",
    "LoadSummary",
    # Entry point
    "load_tables",
]

logger = logging.getLogger(__name__)


class TableLoader(Protocol):
    """Protocol for loading raw table rows for a language.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, data):
        ...         self._data = data
        ...     def load(self, language, table_name):
        ...         try:
        ...             return self._data[language][table_name]
        ...         except KeyError:
        ...             raise FileNotFoundError(f"{language}/{table_name}") from None
        ...     def describe_path(self, language, table_name):
        ...         return f"{language}/{table_name}"
    """

    def load(self, language: Language, table_name: TableName) -> Mapping[str, object]:
        """Load raw rows of one table for one language.

        Raises:
            FileNotFoundError: If the table does not exist for this language
            OSError: If the table cannot be read
            ValueError: If the content cannot be decoded
        """

    def describe_path(self, language: Language, table_name: TableName) -> str:
        """Return human-readable location for diagnostics."""
        return f"{language}/{table_name}"


@dataclass(frozen=True, slots=True)
class PathTableLoader:
    """File system loader using a ``{language}`` path template.

    Security:
        Language codes containing path separators or ".." are rejected.
        Table names containing separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathTableLoader("locales/{language}")
        >>> rows = loader.load("en", "alerts")
        # Loads from: locales/en/alerts.json

    Attributes:
        base_path: Path template with {language} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
        suffix: File extension appended to table names
    """

    base_path: str
    root_dir: str | None = None
    suffix: str = ".json"
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template.

        Raises:
            ValueError: If base_path does not contain {language} placeholder
        """
        if "{language}" not in self.base_path:
            msg = (
                f"base_path must contain '{{language}}' placeholder, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{language}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_component(value: str, what: str) -> None:
        """Reject empty values and path traversal in a path component.

        Raises:
            ValueError: If value is empty or contains unsafe path components
        """
        if not value:
            msg = f"{what} cannot be empty"
            raise ValueError(msg)
        if ".." in value:
            msg = f"Path traversal sequences not allowed in {what}: '{value}'"
            raise ValueError(msg)
        if "/" in value or "\\" in value:
            msg = f"Path separators not allowed in {what}: '{value}'"
            raise ValueError(msg)

    def _path_for(self, language: Language, table_name: TableName) -> Path:
        language_dir = self.base_path.replace("{language}", language)
        return Path(language_dir) / f"{table_name}{self.suffix}"

    def describe_path(self, language: Language, table_name: TableName) -> str:
        return str(self._path_for(language, table_name))

    def load(self, language: Language, table_name: TableName) -> Mapping[str, object]:
        """Load and decode one JSON table file.

        Raises:
            ValueError: If language or table_name is unsafe, or JSON is invalid
            TableFormatError: If the top-level JSON value is not an object
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        self._validate_component(language, "language")
        self._validate_component(table_name, "table name")

        full_path = self._path_for(language, table_name).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"language='{language}', table='{table_name}'"
            )
            raise ValueError(msg) from None

        data = json.loads(full_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TableFormatError(
                ErrorTemplate.table_decode_failed(
                    str(full_path), "top-level value is not an object"
                )
            )
        return data


@dataclass(frozen=True, slots=True)
class TableLoadResult:
    """Result of loading one table for one language.

    Attributes:
        language: Language the table was loaded for
        table_name: Table name
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable location of the table
        entry_count: Number of entries decoded (0 unless successful)
    """

    language: Language
    table_name: TableName
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of table load results.

    Attributes:
        results: All individual load results

    Example:
        >>> tables, summary = load_tables(["alerts"], ["en"], loader)
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[TableLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every attempted table was found and decoded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[TableLoadResult, ...]:
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[TableLoadResult, ...]:
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_language(self, language: Language) -> tuple[TableLoadResult, ...]:
        return tuple(r for r in self.results if r.language == language)


def _decode_rows(source: str, rows: Mapping[str, object]) -> dict[ContentKey, tuple[str, Static]]:
    """Turn raw rows into (description, Static) pairs.

    Raises:
        TableFormatError: If a row is not {"description": str, "value": ...}
    """
    decoded: dict[ContentKey, tuple[str, Static]] = {}
    for key, row in rows.items():
        if not isinstance(row, Mapping) or "value" not in row:
            raise TableFormatError(
                ErrorTemplate.table_decode_failed(source, f"row '{key}' has no 'value'")
            )
        description = row.get("description", "")
        if not isinstance(description, str):
            raise TableFormatError(
                ErrorTemplate.table_decode_failed(
                    source, f"row '{key}' description is not a string"
                )
            )
        value = row["value"]
        try:
            entry = Static(record_from_mapping(value) if isinstance(value, Mapping) else value)
        except TypeError as e:
            raise TableFormatError(
                ErrorTemplate.table_decode_failed(source, f"row '{key}': {e}")
            ) from e
        decoded[key] = (description, entry)
    return decoded


def load_tables(
    table_names: Iterable[TableName],
    languages: Iterable[Language],
    loader: TableLoader,
) -> tuple[tuple[ResourceTable, ...], LoadSummary]:
    """Load static tables for every (table, language) pair.

    Rows for the same table name are combined across languages into one
    ResourceTable. A key's description is taken from the first language
    that provides a non-empty one. Missing files and decode errors are
    recorded in the summary instead of raised.

    Args:
        table_names: Tables to load, in the order the tables are returned
        languages: Languages to load each table for
        loader: TableLoader implementation

    Returns:
        Tuple of (tables, summary). Tables with no successful load are omitted.
    """
    language_list = tuple(languages)
    tables: list[ResourceTable] = []
    results: list[TableLoadResult] = []

    for table_name in table_names:
        descriptions: dict[ContentKey, str] = {}
        entries: dict[ContentKey, dict[Language, Static]] = {}
        loaded_any = False

        for language in language_list:
            source_path = loader.describe_path(language, table_name)
            try:
                decoded = _decode_rows(source_path, loader.load(language, table_name))
            except FileNotFoundError:
                logger.debug("Table not found: %s", source_path)
                results.append(
                    TableLoadResult(
                        language=language,
                        table_name=table_name,
                        status=LoadStatus.NOT_FOUND,
                        source_path=source_path,
                    )
                )
                continue
            except (OSError, ValueError) as e:
                logger.warning("Failed to load table %s: %s", source_path, e)
                results.append(
                    TableLoadResult(
                        language=language,
                        table_name=table_name,
                        status=LoadStatus.ERROR,
                        error=e,
                        source_path=source_path,
                    )
                )
                continue

            loaded_any = True
            for key, (description, entry) in decoded.items():
                if description and not descriptions.get(key):
                    descriptions[key] = description
                entries.setdefault(key, {})[language] = entry
            results.append(
                TableLoadResult(
                    language=language,
                    table_name=table_name,
                    status=LoadStatus.SUCCESS,
                    source_path=source_path,
                    entry_count=len(decoded),
                )
            )
            logger.info("Loaded table %s: %d entries", source_path, len(decoded))

        if loaded_any:
            tables.append(
                ResourceTable(
                    table_name,
                    {
                        key: EntrySpec(description=descriptions.get(key, ""), entries=by_lang)
                        for key, by_lang in entries.items()
                    },
                )
            )

    return tuple(tables), LoadSummary(results=tuple(results))
