"""Resource table validation.

Checks a set of resource tables without building a registry or raising.
Useful in CI and in tests over the shipped content: a build under the
default FAIL policy succeeds exactly when validate_tables() reports no
errors.

Architecture:
    - validate_tables(): Main entry point, runs the passes in order
    - _check_table_names(): Pass 1 - Same table name used twice
    - _check_rows(): Pass 2 - Descriptions, languages, values, entry kinds
    - _check_collisions(): Pass 3 - (key, language) defined by several tables

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import fields

from verbiage.catalog.entry import Static
from verbiage.catalog.records import Alert, Dialog, EmailDraft, InputPrompt
from verbiage.catalog.table import ResourceTable
from verbiage.catalog.types import ContentKey, Language, TableName
from verbiage.diagnostics import DiagnosticCode, ValidationIssue, ValidationResult

__all__ = ["validate_tables"]

logger = logging.getLogger(__name__)


def _is_empty_value(value: object) -> bool:
    """Check whether a static value would render as nothing."""
    match value:
        case str():
            return not value.strip()
        case Alert() | Dialog() | InputPrompt() | EmailDraft():
            return any(not getattr(value, f.name) for f in fields(value))
        case Mapping():
            return not value
        case _:
            return False


def _check_table_names(tables: tuple[ResourceTable, ...]) -> list[ValidationIssue]:
    warnings: list[ValidationIssue] = []
    seen: set[TableName] = set()
    for table in tables:
        if table.name in seen:
            warnings.append(
                ValidationIssue(
                    code=DiagnosticCode.VALIDATION_DUPLICATE_TABLE_NAME,
                    message=f"Table name '{table.name}' is used by more than one table",
                    table=table.name,
                )
            )
        seen.add(table.name)
    return warnings


def _check_rows(
    tables: tuple[ResourceTable, ...],
) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Check every row of every table in isolation.

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for table in tables:
        for key, spec in table.rows.items():
            if not spec.entries:
                errors.append(
                    ValidationIssue(
                        code=DiagnosticCode.VALIDATION_NO_LANGUAGES,
                        message=f"Key '{key}' has no entry for any language",
                        key=key,
                        table=table.name,
                    )
                )
                continue

            if not spec.description.strip():
                warnings.append(
                    ValidationIssue(
                        code=DiagnosticCode.VALIDATION_EMPTY_DESCRIPTION,
                        message=f"Key '{key}' has no description",
                        key=key,
                        table=table.name,
                    )
                )

            kinds = {entry.kind for entry in spec.entries.values()}
            if len(kinds) > 1:
                warnings.append(
                    ValidationIssue(
                        code=DiagnosticCode.VALIDATION_MIXED_KINDS,
                        message=(
                            f"Key '{key}' is static in some languages and a template in others"
                        ),
                        key=key,
                        table=table.name,
                    )
                )

            for language, entry in spec.entries.items():
                if isinstance(entry, Static) and _is_empty_value(entry.value):
                    warnings.append(
                        ValidationIssue(
                            code=DiagnosticCode.VALIDATION_EMPTY_VALUE,
                            message=f"Key '{key}' ({language}) has an empty value",
                            key=key,
                            table=table.name,
                        )
                    )

    return errors, warnings


def _check_collisions(tables: tuple[ResourceTable, ...]) -> list[ValidationIssue]:
    owners: dict[tuple[ContentKey, Language], list[TableName]] = {}
    for table in tables:
        for key, spec in table.rows.items():
            for language in spec.entries:
                owners.setdefault((key, language), []).append(table.name)

    return [
        ValidationIssue(
            code=DiagnosticCode.VALIDATION_DUPLICATE_KEY,
            message=(
                f"Key '{key}' ({language}) is defined in multiple tables: "
                + ", ".join(f"'{name}'" for name in names)
            ),
            key=key,
            table=names[-1],
        )
        for (key, language), names in owners.items()
        if len(names) > 1
    ]


def validate_tables(tables: Iterable[ResourceTable]) -> ValidationResult:
    """Validate resource tables without building a registry.

    Errors are findings that make build_registry() fail under the FAIL
    policy (or leave a key unresolvable); warnings are authoring issues.

    Args:
        tables: Resource tables, in intended merge order

    Returns:
        ValidationResult with errors and warnings

    Example:
        >>> from verbiage.content import ALL_TABLES
        >>> validate_tables(ALL_TABLES).is_valid
        True
    """
    table_list = tuple(tables)

    warnings = _check_table_names(table_list)
    errors, row_warnings = _check_rows(table_list)
    warnings.extend(row_warnings)
    errors.extend(_check_collisions(table_list))

    result = ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
    logger.debug(
        "Validated %d table(s): %d error(s), %d warning(s)",
        len(table_list),
        result.error_count,
        result.warning_count,
    )
    return result
