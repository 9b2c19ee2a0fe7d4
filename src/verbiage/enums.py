"""Enumerations for verbiage type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class EntryKind(StrEnum):
    """Variant tag of a registered entry.

    StrEnum provides automatic string conversion: str(EntryKind.STATIC) == "static"
    """

    STATIC = "static"
    """Fixed value decided at authoring time."""

    TEMPLATE = "template"
    """Function of (args, context) evaluated at resolution time."""


class CollisionPolicy(StrEnum):
    """How the registry builder treats a (key, language) defined twice."""

    FAIL = "fail"
    """Collect every collision and raise RegistryCollisionError."""

    LAST_WINS = "last_wins"
    """Keep the entry from the later table, log a warning."""

    FIRST_WINS = "first_wins"
    """Keep the entry from the earlier table, log a warning."""


class PairingStage(StrEnum):
    """Ring pairing stage exposed by the application state."""

    UNPAIRED = "unpaired"
    SCANNING = "scanning"
    PAIRING = "pairing"
    PAIRED = "paired"


class CycleMode(StrEnum):
    """Cycle tracking mode.

    Clinical cycles never display fertile window predictions.
    """

    STANDARD = "standard"
    CLINICAL = "clinical"


class WindowPhase(StrEnum):
    """Position of "now" relative to a fertile window interval."""

    BEFORE = "before"
    WITHIN = "within"
    AFTER = "after"


class LoadStatus(StrEnum):
    """Outcome of loading a single table file."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "CollisionPolicy",
    "CycleMode",
    "EntryKind",
    "LoadStatus",
    "PairingStage",
    "WindowPhase",
]
