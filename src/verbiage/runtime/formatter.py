"""Date/time formatting for template entries.

Templates never call a date library directly; they go through the
Formatter protocol exposed on their TemplateContext. BabelFormatter is the
default implementation, using Babel for CLDR-compliant output.

Patterns are CLDR date field patterns, e.g.:
    "h:mma"        -> 3:05PM
    "MMM d, yy"    -> Mar 14, 26
    "yyyy-MM-dd"   -> 2026-03-14

Architecture:
    - Formatter: Protocol consumed by templates (format + relative)
    - BabelFormatter: Immutable per-language formatter, cached per language
    - Failures raise FormatterFailureError (configuration error, propagated)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime
from threading import RLock
from typing import ClassVar, Protocol

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from verbiage.constants import DEFAULT_BABEL_LOCALE, LANGUAGE_LOCALES, MAX_FORMATTER_CACHE_SIZE
from verbiage.diagnostics import ErrorTemplate, FormatterFailureError

__all__ = ["BabelFormatter", "Formatter"]

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    """Formatting collaborator consumed by template entries."""

    def format(self, timestamp: date | datetime, pattern: str) -> str:
        """Format a date or datetime with a CLDR pattern.

        Raises:
            FormatterFailureError: If the value or pattern is invalid
        """
        ...

    def relative(self, timestamp: datetime, *, now: datetime) -> str:
        """Describe timestamp relative to now (e.g., "3 hours ago").

        Raises:
            FormatterFailureError: If the values cannot be compared
        """
        ...


@dataclass(frozen=True, slots=True)
class BabelFormatter:
    """Immutable, language-bound formatter backed by Babel.

    Use BabelFormatter.for_language() to construct instances; it caches one
    formatter per language and falls back to en_US (with a warning) for
    languages CLDR does not know.

    Examples:
        >>> from datetime import UTC, datetime, timedelta
        >>> fmt = BabelFormatter.for_language("en")
        >>> t = datetime(2026, 3, 14, 15, 5, tzinfo=UTC)
        >>> fmt.format(t, "h:mma")
        '3:05PM'
        >>> fmt.relative(t, now=t + timedelta(hours=3))
        '3 hours ago'

    Thread Safety:
        Instances are immutable and shareable. The class-level cache is
        protected by an RLock.
    """

    _cache: ClassVar[OrderedDict[str, "BabelFormatter"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    language: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def for_language(cls, language: str) -> "BabelFormatter":
        """Get the cached formatter for a language, creating it if needed.

        Args:
            language: Language identifier (e.g., 'en') or CLDR locale ('de_DE')

        Returns:
            BabelFormatter. For unknown languages, formats with en_US rules
            while preserving the original language for debugging.
        """
        with cls._cache_lock:
            if language in cls._cache:
                cls._cache.move_to_end(language)
                return cls._cache[language]

        locale_code = LANGUAGE_LOCALES.get(language, language.replace("-", "_"))
        used_fallback = False
        try:
            babel_locale = Locale.parse(locale_code)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", language, e, DEFAULT_BABEL_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_BABEL_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                language,
                e,
                DEFAULT_BABEL_LOCALE,
            )
            babel_locale = Locale.parse(DEFAULT_BABEL_LOCALE)
            used_fallback = True

        formatter = cls(language=language, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if language in cls._cache:
                return cls._cache[language]
            if len(cls._cache) >= MAX_FORMATTER_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[language] = formatter
            return formatter

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the formatter cache (tests, memory pressure)."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        with cls._cache_lock:
            return len(cls._cache)

    @property
    def babel_locale(self) -> Locale:
        return self._babel_locale

    def format(self, timestamp: date | datetime, pattern: str) -> str:
        """Format a date or datetime with a CLDR pattern.

        Naive datetimes are formatted as given (treated as UTC, no
        conversion). Aware datetimes are formatted in their own zone.

        Args:
            timestamp: datetime or date
            pattern: CLDR date/time pattern

        Returns:
            Formatted string

        Raises:
            FormatterFailureError: If timestamp is not a date/datetime or
                Babel rejects the pattern
        """
        try:
            match timestamp:
                case datetime():
                    return str(
                        babel_dates.format_datetime(
                            timestamp, format=pattern, locale=self._babel_locale
                        )
                    )
                case date():
                    return str(
                        babel_dates.format_date(
                            timestamp, format=pattern, locale=self._babel_locale
                        )
                    )
                case _:
                    raise FormatterFailureError(
                        ErrorTemplate.invalid_timestamp(timestamp),
                        value=timestamp,
                        pattern=pattern,
                    )
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise FormatterFailureError(
                ErrorTemplate.formatter_failed(timestamp, pattern, str(e)),
                value=timestamp,
                pattern=pattern,
            ) from e

    def relative(self, timestamp: datetime, *, now: datetime) -> str:
        """Describe timestamp relative to now, with direction.

        Args:
            timestamp: The moment to describe
            now: Reference moment (the resolution's single "now" reading)

        Returns:
            Phrase such as "3 hours ago" or "in 2 days"

        Raises:
            FormatterFailureError: If timestamp and now cannot be subtracted
                (type mismatch, naive vs aware)
        """
        if not isinstance(timestamp, datetime):
            raise FormatterFailureError(
                ErrorTemplate.invalid_timestamp(timestamp), value=timestamp
            )
        try:
            delta = timestamp - now
            return str(
                babel_dates.format_timedelta(
                    delta, add_direction=True, locale=self._babel_locale
                )
            )
        except (ValueError, TypeError, KeyError) as e:
            raise FormatterFailureError(
                ErrorTemplate.formatter_failed(timestamp, "", str(e)), value=timestamp
            ) from e
