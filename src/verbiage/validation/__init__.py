"""Validation utilities for resource tables.

This module provides standalone validation for resource tables,
separated from registry construction for use in CI and tooling.

Python 3.13+.
"""

from verbiage.validation.tables import (
    validate_tables,
)

__all__ = [
    "validate_tables",
]
