"""verbiage - Localized text resolution for the Priya app.

Maps symbolic content keys to fixed strings, structured records (alerts,
dialogs, input prompts) or template functions evaluated against an
immutable snapshot of application state at the moment of use.

Public API:
    Verbiage - Facade: get_text(key, *args) in one active language
    Resolver - resolve(key, language, *args) against a Registry
    build_registry - Merge resource tables with an explicit collision policy
    ResourceTable, text, template - Authoring helpers
    AppState - Thread-safe application state (the default context provider)
    ResolverConfig - language / strict / placeholder

Exceptions:
    VerbiageError - Base exception class
    MissingTranslationError - Key has no entry for the language
    RegistryCollisionError - Two tables define the same (key, language)
    TemplateArityMismatchError - Entry called with the wrong arguments
    TemplateAuthoringError - Template params do not match its function
    FormatterFailureError - Date/time formatting failed

Submodules:
    verbiage.catalog - Entries, records, tables, registry, JSON loading
    verbiage.runtime - Resolver, context snapshots, Babel formatter
    verbiage.diagnostics - Error types, codes, and validation results
    verbiage.validation - Table validation without building
    verbiage.introspection - Entry descriptions for translators and tooling
    verbiage.content - The shipped content tables
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .catalog import (
    Alert,
    Dialog,
    EmailDraft,
    InputPrompt,
    Registry,
    ResourceTable,
    Static,
    Template,
    build_registry,
    template,
    text,
)
from .diagnostics import (
    FormatterFailureError,
    MissingTranslationError,
    RegistryCollisionError,
    TemplateArityMismatchError,
    TemplateAuthoringError,
    VerbiageError,
)
from .enums import CollisionPolicy, CycleMode, PairingStage
from .localization import Verbiage
from .runtime import (
    AppState,
    ContextSnapshot,
    FertileWindow,
    FixedContextProvider,
    Resolver,
    ResolverConfig,
    TemplateContext,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("verbiage")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    # Facade and resolution
    "Verbiage",
    "Resolver",
    "ResolverConfig",
    # Authoring
    "Alert",
    "Dialog",
    "EmailDraft",
    "InputPrompt",
    "ResourceTable",
    "Static",
    "Template",
    "template",
    "text",
    # Registry
    "CollisionPolicy",
    "Registry",
    "build_registry",
    # Context
    "AppState",
    "ContextSnapshot",
    "CycleMode",
    "FertileWindow",
    "FixedContextProvider",
    "PairingStage",
    "TemplateContext",
    # Exceptions
    "FormatterFailureError",
    "MissingTranslationError",
    "RegistryCollisionError",
    "TemplateArityMismatchError",
    "TemplateAuthoringError",
    "VerbiageError",
    # Metadata
    "__version__",
]
