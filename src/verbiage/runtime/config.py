"""Resolver configuration.

Provides a single frozen dataclass that encapsulates the resolver's
behavioral parameters, shared by Resolver and the Verbiage facade.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from verbiage.constants import DEFAULT_LANGUAGE, FALLBACK_MISSING_TEXT

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for text resolution.

    Attributes:
        language: Active language used by Verbiage.get_text() (default: "en")
        strict: Fail fast instead of degrading (default: False). When True,
            a missing translation raises MissingTranslationError and a call
            with the wrong number of arguments raises
            TemplateArityMismatchError. Intended for debug and test builds;
            production builds keep the default so end users only ever see
            the placeholder.
        placeholder: Value returned for missing keys and for templates
            called with the wrong arguments (default: "")

    Example:
        >>> config = ResolverConfig(strict=True)
        >>> config.language
        'en'
    """

    language: str = DEFAULT_LANGUAGE
    strict: bool = False
    placeholder: str = FALLBACK_MISSING_TEXT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If language is empty or has surrounding whitespace
            TypeError: If placeholder is not a string
        """
        if not self.language or self.language.strip() != self.language:
            msg = f"language must be a non-empty code without whitespace, got {self.language!r}"
            raise ValueError(msg)
        if not isinstance(self.placeholder, str):
            msg = f"placeholder must be a string, got {type(self.placeholder).__name__}"
            raise TypeError(msg)
