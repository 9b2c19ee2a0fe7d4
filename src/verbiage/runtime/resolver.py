"""Resolver: turns (key, language, args) into a display value.

Algorithm:
    1. Look up (key, language) in the Registry.
    2. Absent: MissingTranslationError is logged (one WARNING record carrying
       ``content_key`` and ``language``) and the placeholder is returned.
    3. Static: the value is returned unchanged. Arguments are a caller error,
       logged, and ignored.
    4. Template: one ContextSnapshot is taken from the provider and the
       function is called as ``fn(*args, TemplateContext(...))``. A call with
       the wrong number of arguments never reaches the function; it is
       logged and the placeholder returned.
    In strict mode the logged errors of steps 2-4 are raised instead.

FormatterFailureError raised inside a template propagates to the caller:
it signals a bad pattern or value in configuration, not a transient issue.

Resolution never mutates the registry or the provider. Given the same
(key, language, args, snapshot) it returns the same value.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from typing import assert_never

from verbiage.catalog.entry import Static, Template
from verbiage.catalog.records import Value
from verbiage.catalog.registry import Registry
from verbiage.catalog.types import ContentKey, Language
from verbiage.constants import LOG_TRUNCATE
from verbiage.diagnostics import (
    MissingTranslationError,
    TemplateArityMismatchError,
    VerbiageError,
)

from .config import ResolverConfig
from .context import ContextProvider, ContextSnapshot, TemplateContext
from .formatter import BabelFormatter, Formatter

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)


class Resolver:
    """Resolves content keys against an immutable Registry.

    Thread Safety:
        The registry is immutable and the resolver holds no per-call state,
        so one resolver may be shared across threads. Each call takes its own
        snapshot from the provider.

    Example:
        >>> resolver = Resolver(registry, AppState())
        >>> resolver.resolve("default-save-text", "en")
        'Save'
        >>> resolver.resolve("cycle-last-synced-text", "en", "h:mma")
        '✔ last synced at 3:05PM'
    """

    __slots__ = ("_config", "_formatter_factory", "_provider", "_registry")

    def __init__(
        self,
        registry: Registry,
        provider: ContextProvider,
        *,
        config: ResolverConfig | None = None,
        formatter_factory: Callable[[Language], Formatter] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            registry: Immutable registry built by build_registry()
            provider: Source of context snapshots
            config: Resolver configuration (default: ResolverConfig())
            formatter_factory: Language -> Formatter
                (default: BabelFormatter.for_language)
        """
        self._registry = registry
        self._provider = provider
        self._config = config if config is not None else ResolverConfig()
        self._formatter_factory: Callable[[Language], Formatter] = (
            formatter_factory if formatter_factory is not None else BabelFormatter.for_language
        )

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(
        self,
        key: ContentKey,
        language: Language,
        *args: object,
        snapshot: ContextSnapshot | None = None,
    ) -> Value:
        """Resolve a key to its display value.

        Args:
            key: Content key
            language: Language to resolve in
            *args: Template arguments, in declared order
            snapshot: Use this snapshot instead of asking the provider
                (keyword-only; previews and tests)

        Returns:
            String or structured record; the placeholder on recovered errors

        Raises:
            MissingTranslationError: Strict mode, key absent for language
            TemplateArityMismatchError: Strict mode, wrong argument count
            FormatterFailureError: A template's formatting failed
        """
        value, _ = self.resolve_result(key, language, *args, snapshot=snapshot)
        return value

    def resolve_result(
        self,
        key: ContentKey,
        language: Language,
        *args: object,
        snapshot: ContextSnapshot | None = None,
    ) -> tuple[Value, tuple[VerbiageError, ...]]:
        """Resolve a key and report recovered errors.

        Same as resolve() but also returns the errors that were logged and
        recovered from (empty tuple on success).

        Returns:
            Tuple of (value, errors)
        """
        registered = self._registry.lookup(key, language) if isinstance(key, str) else None
        if registered is None:
            return self._handle_missing(key, language)

        entry = registered.entry
        match entry:
            case Static(value=value):
                if args:
                    error = TemplateArityMismatchError(key, (), len(args))
                    self._report(error)
                    return (value, (error,))
                return (value, ())
            case Template(fn=fn, params=params):
                if len(args) != len(params):
                    error = TemplateArityMismatchError(key, params, len(args))
                    self._report(error)
                    return (self._config.placeholder, (error,))
                state = snapshot if snapshot is not None else self._provider.snapshot()
                ctx = TemplateContext(
                    state=state,
                    formatter=self._formatter_factory(language),
                    language=language,
                )
                result = fn(*args, ctx)
                logger.debug(
                    "Resolved template '%s' (%s): %s", key, language, str(result)[:LOG_TRUNCATE]
                )
                return (result, ())
            case _:
                assert_never(entry)

    def _handle_missing(
        self, key: ContentKey, language: Language
    ) -> tuple[Value, tuple[VerbiageError, ...]]:
        """Log (or raise, in strict mode) a missing translation."""
        error = MissingTranslationError(str(key), language)
        if self._config.strict:
            raise error
        logger.warning(
            "No translation in %s for %s",
            language,
            key,
            extra={"content_key": str(key), "language": language},
        )
        return (self._config.placeholder, (error,))

    def _report(self, error: TemplateArityMismatchError) -> None:
        """Log (or raise, in strict mode) a caller argument error."""
        if self._config.strict:
            raise error
        logger.warning(
            "%s",
            error,
            extra={"content_key": error.key, "expected_args": error.expected_args},
        )

    def __repr__(self) -> str:
        return f"Resolver(registry={self._registry!r}, strict={self._config.strict})"
