"""Entry variants bound to a content key for one language.

An entry is decided at authoring time to be one of:
    Static   - fixed value (string or structured record)
    Template - function of (declared args..., ctx) evaluated per resolution

The resolver matches on the variant instead of testing at runtime whether
a value happens to be callable.

Template functions receive the declared positional arguments followed by a
TemplateContext (see verbiage.runtime.context) carrying the immutable state
snapshot, the formatter, and the language. They must read "now" and all
application state from that context only.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from inspect import signature
from typing import ClassVar, TypeAlias

from verbiage.diagnostics import ErrorTemplate, TemplateAuthoringError
from verbiage.enums import EntryKind

from .records import Value, freeze_value

__all__ = [
    "Entry",
    "Static",
    "Template",
]


@dataclass(frozen=True, slots=True)
class Static:
    """Fixed value returned unchanged by the resolver.

    Mapping values are frozen on construction so that a resolved sub-map
    cannot be used to mutate the registry.

    Attributes:
        value: String, record, or keyed sub-map
    """

    kind: ClassVar[EntryKind] = EntryKind.STATIC
    params: ClassVar[tuple[str, ...]] = ()

    value: Value

    def __post_init__(self) -> None:
        """Freeze the authored value.

        Raises:
            TypeError: If value is not a string, record, or mapping
        """
        object.__setattr__(self, "value", freeze_value(self.value))


@dataclass(frozen=True, slots=True)
class Template:
    """Value computed from explicit arguments and a context snapshot.

    Attributes:
        fn: Callable taking ``*params`` positionally, then the context
        params: Declared argument names; their count is the entry's arity

    Example:
        >>> def _greeting(name, ctx):
        ...     return f"Hello, {name}"
        >>> entry = Template(_greeting, ("name",))
        >>> entry.arity
        1
    """

    kind: ClassVar[EntryKind] = EntryKind.TEMPLATE

    fn: Callable[..., Value]
    params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize params and check them against the function signature.

        Raises:
            TemplateAuthoringError: If fn is not callable, params are not
                unique identifiers, or fn cannot be called with
                ``len(params)`` positional arguments plus the context.
        """
        params = tuple(self.params)
        object.__setattr__(self, "params", params)
        name = getattr(self.fn, "__name__", repr(self.fn))

        if not callable(self.fn):
            raise TemplateAuthoringError(
                ErrorTemplate.template_signature_mismatch(name, params, "not callable")
            )
        if len(set(params)) != len(params) or not all(
            isinstance(p, str) and p.isidentifier() for p in params
        ):
            raise TemplateAuthoringError(
                ErrorTemplate.template_signature_mismatch(
                    name, params, "params must be unique identifiers"
                )
            )
        _check_signature(self.fn, name, params)

    @property
    def arity(self) -> int:
        """Number of caller-supplied arguments (the context is not counted)."""
        return len(self.params)


Entry: TypeAlias = Static | Template


def _check_signature(fn: Callable[..., Value], name: str, params: Sequence[str]) -> None:
    """Verify fn accepts the declared positional args followed by ctx.

    Callables without an introspectable signature (some builtins) are
    accepted as-is.
    """
    try:
        sig = signature(fn)
    except (TypeError, ValueError):
        return
    try:
        sig.bind(*range(len(params) + 1))
    except TypeError as e:
        raise TemplateAuthoringError(
            ErrorTemplate.template_signature_mismatch(name, params, str(e))
        ) from e
