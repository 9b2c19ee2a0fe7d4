"""Catalog package: entries, resource tables, and the merged registry.

Submodules:
    types    - PEP 695 type aliases (ContentKey, Language, TableName)
    records  - Structured values (Alert, Dialog, InputPrompt, EmailDraft)
    entry    - Static / Template entry variants
    table    - ResourceTable and the text() / template() authoring helpers
    registry - build_registry() and the immutable Registry
    loading  - Static tables from JSON files

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .entry import Entry, Static, Template
from .loading import LoadSummary, PathTableLoader, TableLoader, TableLoadResult, load_tables
from .records import Alert, Dialog, EmailDraft, InputPrompt, Record, Value
from .registry import RegisteredEntry, Registry, build_registry
from .table import EntrySpec, ResourceTable, template, text
from .types import ContentKey, Language, TableName

__all__ = [
    # Entries
    "Entry",
    "Static",
    "Template",
    # Values
    "Alert",
    "Dialog",
    "EmailDraft",
    "InputPrompt",
    "Record",
    "Value",
    # Tables
    "EntrySpec",
    "ResourceTable",
    "template",
    "text",
    # Registry
    "RegisteredEntry",
    "Registry",
    "build_registry",
    # Loading
    "LoadSummary",
    "PathTableLoader",
    "TableLoadResult",
    "TableLoader",
    "load_tables",
    # Type aliases
    "ContentKey",
    "Language",
    "TableName",
]
