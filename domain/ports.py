"""Port interfaces for check_varnish.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.models import CounterSnapshot


class StatsSourcePort(Protocol):
    """Abstraction over the shared statistics of a running Varnish instance."""

    def open_stats(self, instance: str | None = None) -> CounterSnapshot:
        """Return a read-only snapshot of the instance's counters.

        Args:
            instance: Varnish instance name (``-n``). ``None`` selects the
                default instance.

        Raises:
            SourceUnavailable: The instance is not running, the caller lacks
                permission, or the counters could not be parsed.
        """
        ...
