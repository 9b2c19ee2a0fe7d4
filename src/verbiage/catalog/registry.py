"""Registry construction with explicit merge-collision policy.

build_registry() folds resource tables, in the order given, into a single
immutable mapping from (key, language) to RegisteredEntry. This is the only
place the mapping is ever mutated; the resulting Registry exposes read-only
views and is safe to share between threads without locking.

Collision policy:
    A (key, language) defined by more than one table is a collision.
    - CollisionPolicy.FAIL (default): all collisions are collected and the
      build raises RegistryCollisionError listing them.
    - CollisionPolicy.LAST_WINS: the later table's entry is kept.
    - CollisionPolicy.FIRST_WINS: the earlier table's entry is kept.
    Under both non-failing policies every collision is logged at WARNING.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from verbiage.diagnostics import Collision, RegistryCollisionError
from verbiage.enums import CollisionPolicy, EntryKind

from .entry import Entry
from .table import ResourceTable
from .types import ContentKey, Language, TableName

__all__ = [
    "RegisteredEntry",
    "Registry",
    "build_registry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredEntry:
    """Entry as stored in the registry, with its provenance.

    Attributes:
        key: Content key
        language: Language of the entry
        entry: Static or Template
        description: Documentation carried over from the table
        table: Name of the table the entry came from
    """

    key: ContentKey
    language: Language
    entry: Entry
    description: str
    table: TableName

    @property
    def kind(self) -> EntryKind:
        return self.entry.kind


class Registry:
    """Immutable merged mapping from (key, language) to RegisteredEntry.

    Built by build_registry(); not meant to be constructed directly.

    Example:
        >>> registry = build_registry([ALERTS, DIALOGS])
        >>> registry.has("complete-cycle", "en")
        True
        >>> registry.lookup("complete-cycle", "en").table
        'confirmation-dialogs'
    """

    __slots__ = ("_entries", "_policy", "_table_names")

    def __init__(
        self,
        entries: Mapping[tuple[ContentKey, Language], RegisteredEntry],
        *,
        table_names: tuple[TableName, ...],
        policy: CollisionPolicy,
    ) -> None:
        self._entries: Mapping[tuple[ContentKey, Language], RegisteredEntry] = (
            MappingProxyType(dict(entries))
        )
        self._table_names = table_names
        self._policy = policy

    @property
    def table_names(self) -> tuple[TableName, ...]:
        """Names of the merged tables, in merge order."""
        return self._table_names

    @property
    def policy(self) -> CollisionPolicy:
        """Collision policy the registry was built with."""
        return self._policy

    @property
    def languages(self) -> tuple[Language, ...]:
        """Languages with at least one entry, sorted."""
        return tuple(sorted({language for _, language in self._entries}))

    def lookup(self, key: ContentKey, language: Language) -> RegisteredEntry | None:
        """Return the entry for (key, language), or None if absent."""
        return self._entries.get((key, language))

    def has(self, key: ContentKey, language: Language) -> bool:
        return (key, language) in self._entries

    def keys(self, language: Language | None = None) -> tuple[ContentKey, ...]:
        """Sorted content keys, optionally restricted to one language."""
        return tuple(
            sorted({k for k, lang in self._entries if language is None or lang == language})
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegisteredEntry]:
        return iter(self._entries.values())

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __repr__(self) -> str:
        return (
            f"Registry(entries={len(self._entries)}, tables={len(self._table_names)}, "
            f"policy={self._policy.value})"
        )


def build_registry(
    tables: Iterable[ResourceTable],
    *,
    policy: CollisionPolicy = CollisionPolicy.FAIL,
) -> Registry:
    """Merge resource tables into an immutable Registry.

    Tables are folded in iteration order; that order decides which entry
    survives a collision under LAST_WINS / FIRST_WINS and is recorded in
    Registry.table_names.

    Args:
        tables: Resource tables to merge
        policy: Collision policy (default: FAIL)

    Returns:
        Immutable Registry

    Raises:
        RegistryCollisionError: If policy is FAIL and any (key, language)
            is defined more than once
    """
    table_list = tuple(tables)
    merged: dict[tuple[ContentKey, Language], RegisteredEntry] = {}
    owners: dict[tuple[ContentKey, Language], list[TableName]] = {}

    for table in table_list:
        for key, spec in table.rows.items():
            for language, entry in spec.entries.items():
                slot = (key, language)
                owners.setdefault(slot, []).append(table.name)
                if slot in merged and policy is not CollisionPolicy.LAST_WINS:
                    continue
                merged[slot] = RegisteredEntry(
                    key=key,
                    language=language,
                    entry=entry,
                    description=spec.description,
                    table=table.name,
                )
                logger.debug("Registered %s entry: %s (%s)", entry.kind, key, language)

    collisions = [
        Collision(key=key, language=language, tables=tuple(names))
        for (key, language), names in owners.items()
        if len(names) > 1
    ]

    if collisions:
        if policy is CollisionPolicy.FAIL:
            logger.error(
                "Registry build failed: %d collision(s) across %d table(s)",
                len(collisions),
                len(table_list),
            )
            raise RegistryCollisionError(collisions)
        for collision in collisions:
            logger.warning(
                "Key '%s' (%s) defined in tables %s; keeping entry from '%s'",
                collision.key,
                collision.language,
                ", ".join(collision.tables),
                merged[(collision.key, collision.language)].table,
            )

    registry = Registry(
        merged,
        table_names=tuple(t.name for t in table_list),
        policy=policy,
    )
    logger.info(
        "Registry built: %d entries from %d table(s), %d collision(s) (policy=%s)",
        len(registry),
        len(table_list),
        len(collisions),
        policy.value,
    )
    return registry
