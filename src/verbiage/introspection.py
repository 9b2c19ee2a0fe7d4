"""Registry introspection for translators, reviewers, and tooling.

Descriptions play no part in resolution; this module is where they are
read back. It answers "what does this key mean, what does it take, and
where was it defined" without resolving anything.

Python 3.13+.
"""

from dataclasses import dataclass

from .catalog.registry import RegisteredEntry, Registry
from .catalog.types import ContentKey, Language, TableName
from .constants import DEFAULT_LANGUAGE
from .enums import EntryKind

__all__ = [
    "EntryInfo",
    "catalog_report",
    "describe_entry",
]


# ==============================================================================
# INTROSPECTION METADATA (Frozen Dataclasses with Slots)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class EntryInfo:
    """Immutable metadata about one registered entry."""

    key: ContentKey
    """Content key."""

    language: Language
    """Language of the entry."""

    kind: EntryKind
    """Static or template."""

    params: tuple[str, ...]
    """Declared argument names (empty for static entries)."""

    description: str
    """Documentation authored with the entry."""

    table: TableName
    """Name of the table the entry came from."""

    @property
    def arity(self) -> int:
        return len(self.params)

    @classmethod
    def from_registered(cls, registered: RegisteredEntry) -> "EntryInfo":
        return cls(
            key=registered.key,
            language=registered.language,
            kind=registered.kind,
            params=registered.entry.params,
            description=registered.description,
            table=registered.table,
        )


# ==============================================================================
# PUBLIC API
# ==============================================================================


def describe_entry(
    registry: Registry,
    key: ContentKey,
    language: Language = DEFAULT_LANGUAGE,
) -> EntryInfo | None:
    """Describe the entry registered for (key, language).

    Args:
        registry: Registry to inspect
        key: Content key
        language: Language (default: "en")

    Returns:
        EntryInfo, or None if the key has no entry for the language

    Example:
        >>> info = describe_entry(registry, "past-cycle-title")
        >>> info.kind, info.params
        (<EntryKind.TEMPLATE: 'template'>, ('period_start', 'day_format'))
    """
    registered = registry.lookup(key, language)
    if registered is None:
        return None
    return EntryInfo.from_registered(registered)


def catalog_report(registry: Registry) -> tuple[EntryInfo, ...]:
    """List every registered entry, sorted by key then language."""
    return tuple(
        sorted(
            (EntryInfo.from_registered(registered) for registered in registry),
            key=lambda info: (info.key, info.language),
        )
    )
