"""Structured text records returned by the resolver.

A resolved value is either a plain string or one of the records below,
whose shape is fixed per content key. Callers know the shape of the key
they ask for; nothing is negotiated at runtime.

Keyed sub-maps (units, option lists, time formats) are plain mappings
frozen with MappingProxyType by freeze_value().

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "Alert",
    "Dialog",
    "EmailDraft",
    "InputPrompt",
    "Record",
    "Value",
    "freeze_value",
    "record_from_mapping",
]


@dataclass(frozen=True, slots=True)
class Alert:
    """Modal alert with a title and a body message."""

    title: str
    message: str


@dataclass(frozen=True, slots=True)
class Dialog:
    """Confirmation dialog for an irreversible action."""

    title: str
    message: str
    confirm_text: str


@dataclass(frozen=True, slots=True)
class InputPrompt:
    """Form input label and placeholder."""

    title: str
    placeholder: str


@dataclass(frozen=True, slots=True)
class EmailDraft:
    """Pre-filled support email."""

    subject: str
    body: str


Record: TypeAlias = Alert | Dialog | InputPrompt | EmailDraft

Value: TypeAlias = str | Record | Mapping[str | int, "Value"]

# Field sets used to recognize records in untyped data (JSON tables).
# Ordered most specific first: a Dialog also has every Alert field.
_RECORD_SHAPES: tuple[tuple[type, frozenset[str]], ...] = (
    (Dialog, frozenset({"title", "message", "confirm_text"})),
    (Alert, frozenset({"title", "message"})),
    (InputPrompt, frozenset({"title", "placeholder"})),
    (EmailDraft, frozenset({"subject", "body"})),
)


def freeze_value(value: object) -> Value:
    """Return a read-only version of an authored value.

    Strings and records are already immutable. Mappings are copied and
    wrapped in MappingProxyType, recursively.

    Raises:
        TypeError: If the value is not a string, record, or mapping
    """
    match value:
        case str() | Alert() | Dialog() | InputPrompt() | EmailDraft():
            return value
        case Mapping():
            return MappingProxyType({k: freeze_value(v) for k, v in value.items()})
        case _:
            msg = f"Unsupported entry value type: {type(value).__name__}"
            raise TypeError(msg)


def record_from_mapping(data: Mapping[str, object]) -> Value:
    """Build a record from a mapping whose keys match a record's fields.

    Mappings that match no record shape exactly are frozen as keyed
    sub-maps instead.
    """
    keys = frozenset(data)
    for record_type, shape in _RECORD_SHAPES:
        if keys == shape and all(isinstance(data[k], str) for k in keys):
            return record_type(**data)
    return freeze_value(data)
