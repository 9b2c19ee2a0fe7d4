"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the catalog and runtime
packages and by user code when annotating resolver call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "ContentKey",
    "Language",
    "TableName",
]

ContentKey: TypeAlias = str
"""Identifier naming one piece of user-facing text (e.g., 'complete-cycle')."""

Language: TypeAlias = str
"""Language identifier of a translation set (e.g., 'en')."""

TableName: TypeAlias = str
"""Name of a topic-scoped resource table (e.g., 'alerts')."""
