"""Core data types for check_varnish.

All types are frozen dataclasses or enums with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class Status(Enum):
    """Health verdict level. The value doubles as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def word(self) -> str:
        """Status word printed at the start of the result line."""
        return _STATUS_WORDS[self]


_STATUS_WORDS: dict[Status, str] = {
    Status.OK: "OK",
    Status.WARNING: "Warning",
    Status.CRITICAL: "Critical",
    Status.UNKNOWN: "Unknown",
}


class Direction(Enum):
    """Which side of the thresholds is unhealthy."""

    GREATER_IS_BAD = "greater"
    LESS_IS_BAD = "less"


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CounterField:
    """A known counter name and its human-readable description."""

    name: str
    description: str


@dataclass(frozen=True)
class CounterSnapshot(Mapping[str, int]):
    """Read-only view of the counters published by one Varnish instance.

    The snapshot is taken once when the stats source is opened and never
    changes afterwards.
    """

    counters: Mapping[str, int] = field(default_factory=dict)
    instance: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "counters", MappingProxyType(dict(self.counters)))

    def __getitem__(self, name: str) -> int:
        return self.counters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.counters)

    def __len__(self) -> int:
        return len(self.counters)


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CheckRequest:
    """Fully resolved invocation parameters.

    ``warning`` and ``critical`` are ``None`` when the flag was not given.
    """

    param: str
    warning: int | None = None
    critical: int | None = None
    direction: Direction = Direction.GREATER_IS_BAD
    instance: str | None = None
    verbosity: int = 0


@dataclass(frozen=True)
class Verdict:
    """Outcome of a single check."""

    status: Status
    value: int | float
    label: str

    @property
    def exit_code(self) -> int:
        return self.status.value
