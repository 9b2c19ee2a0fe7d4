"""Shared constants for verbiage.

Single source of truth for defaults used across the catalog and runtime
packages. Placing them here avoids circular imports between the registry,
the resolver, and the content tables.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Languages
    "DEFAULT_LANGUAGE",
    "DEFAULT_BABEL_LOCALE",
    "LANGUAGE_LOCALES",
    # Fallback values
    "FALLBACK_MISSING_TEXT",
    # Formatter limits
    "MAX_FORMATTER_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# LANGUAGES
# ============================================================================

# Language shipped with the built-in content tables.
DEFAULT_LANGUAGE: str = "en"

# Babel locale used when a language has no explicit locale mapping or the
# mapped locale is unknown to CLDR.
DEFAULT_BABEL_LOCALE: str = "en_US"

# Language identifier -> CLDR locale used for date/time formatting.
# Languages not listed here are parsed directly by Babel.
LANGUAGE_LOCALES: dict[str, str] = {
    "en": "en_US",
}

# ============================================================================
# FALLBACK VALUES
# ============================================================================

# Value returned to the UI when a key has no entry for the requested
# language. Empty so that a missing key degrades to blank text rather than
# an identifier leaking into the interface.
FALLBACK_MISSING_TEXT: str = ""

# ============================================================================
# FORMATTER LIMITS
# ============================================================================

# Maximum cached BabelFormatter instances (one per language).
MAX_FORMATTER_CACHE_SIZE: int = 32

# ============================================================================
# LOGGING
# ============================================================================

# Truncation for resolved values in DEBUG log lines.
LOG_TRUNCATE: int = 50
