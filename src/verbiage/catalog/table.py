"""Resource tables and entry authoring helpers.

A ResourceTable is a named, flat mapping from content key to an EntrySpec:
the human-readable description of the key plus one Entry per language.
Tables are authored independently by topic (alerts, dialogs, legal text)
and merged by verbiage.catalog.registry.build_registry().

Authoring:
    >>> from verbiage.catalog.records import Alert
    >>> ALERTS = ResourceTable("alerts", {
    ...     "phone-bluetooth-is-off": text(
    ...         "Instructions for: user's bluetooth is off.",
    ...         en=Alert(title="Oops...", message="Looks like your bluetooth is off."),
    ...     ),
    ... })
    >>> def _past_cycle_title(period_start, day_format, ctx):
    ...     return "Cycle Starting " + ctx.format(period_start, day_format)
    >>> TITLES = ResourceTable("titles", {
    ...     "past-cycle-title": template(
    ...         "Title for past cycles",
    ...         ("period_start", "day_format"),
    ...         en=_past_cycle_title,
    ...     ),
    ... })

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from verbiage.diagnostics import ErrorTemplate, TemplateAuthoringError

from .entry import Entry, Static, Template
from .records import Value
from .types import ContentKey, Language, TableName

__all__ = [
    "EntrySpec",
    "ResourceTable",
    "template",
    "text",
]


@dataclass(frozen=True, slots=True)
class EntrySpec:
    """Description and per-language entries for one content key.

    The description is documentation for translators and reviewers; it is
    carried into the registry but never consulted during resolution.

    Attributes:
        description: What the text is for and where it appears
        entries: Language -> Entry (read-only)
    """

    description: str
    entries: Mapping[Language, Entry]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @property
    def languages(self) -> tuple[Language, ...]:
        return tuple(self.entries)


def text(description: str, /, **languages: Value) -> EntrySpec:
    """Author a static entry.

    Args:
        description: Documentation for the key [positional-only]
        **languages: Language -> value (e.g., ``en="Save"``)

    Returns:
        EntrySpec with a Static entry per language
    """
    return EntrySpec(
        description=description,
        entries={lang: Static(value) for lang, value in languages.items()},
    )


def template(
    description: str,
    params: Sequence[str] = (),
    /,
    **languages: Callable[..., Value],
) -> EntrySpec:
    """Author a template entry.

    Every language shares the same declared params, so call sites do not
    change when a translation is added.

    Args:
        description: Documentation for the key [positional-only]
        params: Argument names callers must pass [positional-only]
        **languages: Language -> template function

    Returns:
        EntrySpec with a Template entry per language

    Raises:
        TemplateAuthoringError: If a function does not accept the params
    """
    declared = tuple(params)
    return EntrySpec(
        description=description,
        entries={lang: Template(fn, declared) for lang, fn in languages.items()},
    )


@dataclass(frozen=True, slots=True)
class ResourceTable:
    """Named, topic-scoped mapping from content key to EntrySpec.

    Attributes:
        name: Table name, reported in collision diagnostics
        rows: Content key -> EntrySpec (read-only)
    """

    name: TableName
    rows: Mapping[ContentKey, EntrySpec]

    def __post_init__(self) -> None:
        """Validate and freeze the table.

        Raises:
            ValueError: If the name is empty
            TemplateAuthoringError: If a key is empty or a row is not an EntrySpec
        """
        if not self.name or not isinstance(self.name, str):
            msg = f"Table name must be a non-empty string, got {self.name!r}"
            raise ValueError(msg)
        for key, spec in self.rows.items():
            if not key or not isinstance(key, str):
                raise TemplateAuthoringError(
                    ErrorTemplate.invalid_entry(str(key), f"invalid key in table '{self.name}'")
                )
            if not isinstance(spec, EntrySpec):
                raise TemplateAuthoringError(
                    ErrorTemplate.invalid_entry(
                        key, f"expected EntrySpec, got {type(spec).__name__}"
                    )
                )
        object.__setattr__(self, "rows", MappingProxyType(dict(self.rows)))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ContentKey]:
        return iter(self.rows)

    def __contains__(self, key: object) -> bool:
        return key in self.rows

    @property
    def languages(self) -> frozenset[Language]:
        """Every language with at least one entry in this table."""
        return frozenset(lang for spec in self.rows.values() for lang in spec.entries)
