"""Application state snapshots consumed by template entries.

Templates never read shared mutable state. At the start of each resolution
the resolver takes one ContextSnapshot from the ContextProvider; the
snapshot is immutable and includes ``now``, the single wall-clock reading
for that resolution. Everything a template branches on comes from the
snapshot or from its explicit arguments.

Architecture:
    - ContextSnapshot: frozen value object (one per resolution)
    - ContextProvider: Protocol with a single snapshot() method
    - AppState: thread-safe in-memory provider; snapshot() copies all
      fields under one lock so a template never sees a torn update
    - FixedContextProvider: always returns the same snapshot (tests, previews)
    - TemplateContext: what a template function receives as its last
      argument (snapshot + formatter + language)

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, fields, replace
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Protocol

from verbiage.enums import CycleMode, PairingStage, WindowPhase

if TYPE_CHECKING:
    from verbiage.catalog.types import Language

    from .formatter import Formatter

__all__ = [
    "AppState",
    "ContextProvider",
    "ContextSnapshot",
    "FertileWindow",
    "FixedContextProvider",
    "TemplateContext",
    "utc_now",
]


def utc_now() -> datetime:
    """Default clock: timezone-aware current time in UTC."""
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class FertileWindow:
    """Predicted fertile window interval.

    Attributes:
        start: Window start
        end: Window end (not before start)
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Validate interval ordering.

        Raises:
            ValueError: If end precedes start
        """
        if self.end < self.start:
            msg = f"FertileWindow.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def phase(self, now: datetime) -> WindowPhase:
        """Position of now relative to the window (bounds count as within)."""
        if now < self.start:
            return WindowPhase.BEFORE
        if now > self.end:
            return WindowPhase.AFTER
        return WindowPhase.WITHIN


@dataclass(frozen=True, slots=True)
class ContextSnapshot:
    """Immutable read of application state taken at resolution time.

    Attributes:
        now: The one wall-clock reading for this resolution
        stage: Ring pairing stage
        mode: Cycle tracking mode
        period_start: Period start date of the active cycle
        period_end: Period end date of the active cycle
        fertile_window: Predicted fertile window, if one has arrived
        last_synced: Time of the last ring sync
        too_long_since_sync: Whether the last sync is considered stale
        prefer_metric: User's measurement-unit preference
        account_email: Email of the logged-in account
    """

    now: datetime
    stage: PairingStage = PairingStage.UNPAIRED
    mode: CycleMode = CycleMode.STANDARD
    period_start: date | None = None
    period_end: date | None = None
    fertile_window: FertileWindow | None = None
    last_synced: datetime | None = None
    too_long_since_sync: bool = False
    prefer_metric: bool = False
    account_email: str | None = None


# Fields an AppState holds; "now" comes from the clock at snapshot time.
STATE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(ContextSnapshot)) - {"now"}


class ContextProvider(Protocol):
    """Source of ContextSnapshots, read-only from the resolver's side."""

    def snapshot(self) -> ContextSnapshot:
        """Return one atomic, self-consistent read of current state."""
        ...


class AppState:
    """Thread-safe, in-memory application state store.

    Other subsystems (e.g., a background sync) write with update(); the
    resolver reads with snapshot(). Both take the same lock, so a snapshot
    always reflects whole updates.

    Example:
        >>> state = AppState(stage=PairingStage.SCANNING)
        >>> state.update(stage=PairingStage.PAIRED, last_synced=utc_now())
        >>> state.snapshot().stage
        <PairingStage.PAIRED: 'paired'>

    Args:
        clock: Callable returning "now" for each snapshot (default: utc_now)
        **initial: Initial values for any ContextSnapshot field except now
    """

    __slots__ = ("_clock", "_lock", "_values")

    def __init__(self, *, clock: Callable[[], datetime] = utc_now, **initial: object) -> None:
        self._check_fields(initial)
        self._clock = clock
        self._lock = threading.RLock()
        self._values: dict[str, object] = dict(initial)

    @staticmethod
    def _check_fields(values: dict[str, object]) -> None:
        unknown = set(values) - STATE_FIELDS
        if unknown:
            msg = f"Unknown state field(s): {', '.join(sorted(unknown))}"
            raise ValueError(msg)

    def update(self, **changes: object) -> None:
        """Apply all changes atomically.

        Raises:
            ValueError: If a field name is unknown
        """
        self._check_fields(changes)
        with self._lock:
            self._values.update(changes)

    def get(self, name: str) -> object:
        """Read one field (default value if never set).

        Raises:
            ValueError: If the field name is unknown
        """
        self._check_fields({name: None})
        with self._lock:
            if name in self._values:
                return self._values[name]
        return ContextSnapshot.__dataclass_fields__[name].default

    def snapshot(self) -> ContextSnapshot:
        """Copy all fields and stamp now, under one lock acquisition."""
        with self._lock:
            values = dict(self._values)
            now = self._clock()
        return ContextSnapshot(now=now, **values)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        with self._lock:
            names = ", ".join(sorted(self._values))
        return f"AppState(fields=[{names}])"


@dataclass(frozen=True, slots=True)
class FixedContextProvider:
    """Provider that always returns the same snapshot.

    Useful for previews, documentation builds and deterministic tests.
    """

    state: ContextSnapshot

    def snapshot(self) -> ContextSnapshot:
        return self.state

    def with_changes(self, **changes: object) -> FixedContextProvider:
        """Return a provider whose snapshot has the given fields replaced."""
        return FixedContextProvider(replace(self.state, **changes))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class TemplateContext:
    """Last argument of every template function.

    Attributes:
        state: Snapshot taken for this resolution
        formatter: Formatter bound to the resolution language
        language: Language being resolved
    """

    state: ContextSnapshot
    formatter: Formatter
    language: Language

    @property
    def now(self) -> datetime:
        """The single "now" reading for this resolution."""
        return self.state.now

    def format(self, timestamp: date | datetime, pattern: str) -> str:
        """Format a timestamp with a CLDR pattern via the formatter."""
        return self.formatter.format(timestamp, pattern)

    def relative(self, timestamp: datetime) -> str:
        """Describe a timestamp relative to this resolution's now."""
        return self.formatter.relative(timestamp, now=self.state.now)

    def window_phase(self) -> WindowPhase | None:
        """Phase of now relative to the fertile window (None if no window)."""
        window = self.state.fertile_window
        if window is None:
            return None
        return window.phase(self.state.now)
