"""Application-facing facade over registry, context provider and resolver.

Verbiage binds one language to a Resolver so UI code can ask for text by
key alone, while the language is still an explicit, per-instance value:
there is no process-wide "current language". Serving several languages at
once means holding several facades built with with_language(); they share
the registry, the provider and the formatter cache.

Initialization Behavior:
    create_default() builds the registry from the shipped content tables
    eagerly, under the FAIL collision policy, so duplicate keys surface at
    startup rather than as wrong text later.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from .catalog.registry import Registry, build_registry
from .content import ALL_TABLES
from .enums import CollisionPolicy
from .introspection import EntryInfo, describe_entry
from .runtime.config import ResolverConfig
from .runtime.context import AppState, ContextProvider
from .runtime.resolver import Resolver

if TYPE_CHECKING:
    from .catalog.records import Value
    from .catalog.types import ContentKey, Language
    from .diagnostics import VerbiageError

__all__ = ["Verbiage"]

logger = logging.getLogger(__name__)


class Verbiage:
    """Text lookup for one active language.

    Example:
        >>> verbiage = Verbiage.create_default(AppState())
        >>> verbiage.get_text("default-save-text")
        'Save'
        >>> verbiage.get_text("complete-cycle").confirm_text
        'Complete'
        >>> verbiage.get_text("no-such-key")
        ''

    Attributes:
        language: Language used by get_text()
    """

    __slots__ = ("_provider", "_registry", "_resolver")

    def __init__(
        self,
        registry: Registry,
        provider: ContextProvider,
        *,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            registry: Immutable registry built by build_registry()
            provider: Source of context snapshots for template entries
            config: Resolver configuration (default: ResolverConfig())
        """
        self._registry = registry
        self._provider = provider
        self._resolver = Resolver(registry, provider, config=config)

    @classmethod
    def create_default(
        cls,
        provider: ContextProvider | None = None,
        *,
        config: ResolverConfig | None = None,
    ) -> Verbiage:
        """Build a facade over the shipped content tables.

        Args:
            provider: Context provider (default: a fresh AppState)
            config: Resolver configuration (default: ResolverConfig())

        Returns:
            Verbiage over verbiage.content.ALL_TABLES

        Raises:
            RegistryCollisionError: If two shipped tables define the same key
        """
        registry = build_registry(ALL_TABLES, policy=CollisionPolicy.FAIL)
        verbiage = cls(registry, provider if provider is not None else AppState(), config=config)
        logger.debug("Created %r", verbiage)
        return verbiage

    @property
    def language(self) -> Language:
        return self._resolver.config.language

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def config(self) -> ResolverConfig:
        return self._resolver.config

    @property
    def strict(self) -> bool:
        return self._resolver.config.strict

    def with_language(self, language: Language) -> Verbiage:
        """Return a facade for another language sharing registry and provider."""
        config = replace(self._resolver.config, language=language)
        return Verbiage(self._registry, self._provider, config=config)

    def get_text(self, key: ContentKey, *args: object) -> Value:
        """Resolve a key in the active language.

        Args:
            key: Content key
            *args: Template arguments, in declared order

        Returns:
            String or structured record; the placeholder for missing keys
        """
        return self._resolver.resolve(key, self.language, *args)

    def resolve(self, key: ContentKey, language: Language, *args: object) -> Value:
        """Resolve a key in an explicit language."""
        return self._resolver.resolve(key, language, *args)

    def resolve_result(
        self, key: ContentKey, language: Language, *args: object
    ) -> tuple[Value, tuple[VerbiageError, ...]]:
        """Resolve a key and return (value, recovered errors)."""
        return self._resolver.resolve_result(key, language, *args)

    def has_text(self, key: ContentKey, language: Language | None = None) -> bool:
        """Check whether a key has an entry (default: in the active language)."""
        return self._registry.has(key, language if language is not None else self.language)

    def describe(self, key: ContentKey) -> EntryInfo | None:
        """Describe the entry for a key in the active language."""
        return describe_entry(self._registry, key, self.language)

    def __repr__(self) -> str:
        return f"Verbiage(language={self.language!r}, registry={self._registry!r})"
