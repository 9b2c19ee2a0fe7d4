"""Runtime package: resolution of content keys at call time.

Submodules:
    config    - ResolverConfig (language, strict, placeholder)
    context   - ContextSnapshot, AppState, TemplateContext
    formatter - Formatter protocol and the Babel-backed implementation
    resolver  - Resolver

Python 3.13+. Uses Babel for i18n.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .config import ResolverConfig
from .context import (
    AppState,
    ContextProvider,
    ContextSnapshot,
    FertileWindow,
    FixedContextProvider,
    TemplateContext,
    utc_now,
)
from .formatter import BabelFormatter, Formatter
from .resolver import Resolver

__all__ = [
    # Resolution
    "Resolver",
    "ResolverConfig",
    # Context
    "AppState",
    "ContextProvider",
    "ContextSnapshot",
    "FertileWindow",
    "FixedContextProvider",
    "TemplateContext",
    "utc_now",
    # Formatting
    "BabelFormatter",
    "Formatter",
]
