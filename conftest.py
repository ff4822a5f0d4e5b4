"""Shared pytest fixtures and test factories for check_varnish.

Provides:
- Fake port implementations (StatsSource)
- Factory functions for domain models with sensible defaults
- Pytest fixtures wrapping the most commonly used factories
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from domain.errors import SourceUnavailable
from domain.models import CheckRequest, CounterSnapshot, Direction

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


# ── Fake Port Implementations ─────────────────────────────────────────────


class FakeStatsSource:
    """Fake StatsSourcePort returning a fixed snapshot.

    Pass ``unavailable=True`` to simulate an instance that cannot be opened.
    Tracks the instance names it was asked for via ``opened``.
    """

    def __init__(
        self,
        counters: dict[str, int] | None = None,
        *,
        unavailable: bool = False,
    ) -> None:
        self._counters = counters if counters is not None else {}
        self._unavailable = unavailable
        self.opened: list[str | None] = []

    def open_stats(self, instance: str | None = None) -> CounterSnapshot:
        """Record the call and return the configured counters or raise."""
        self.opened.append(instance)
        if self._unavailable:
            raise SourceUnavailable("cannot open statistics of default instance")
        return CounterSnapshot(counters=self._counters, instance=instance)


# ── Domain Model Factories ───────────────────────────────────────────────


def make_snapshot(
    cache_hit: int = 100,
    cache_miss: int = 0,
    instance: str | None = None,
    **extra: int,
) -> CounterSnapshot:
    """Create a CounterSnapshot with hit/miss counters and any extras."""
    counters = {"cache_hit": cache_hit, "cache_miss": cache_miss, **extra}
    return CounterSnapshot(counters=counters, instance=instance)


def make_request(
    param: str = "ratio",
    warning: int | None = 95,
    critical: int | None = 90,
    direction: Direction = Direction.LESS_IS_BAD,
    instance: str | None = None,
) -> CheckRequest:
    """Create a CheckRequest; defaults match the plain hit-ratio check."""
    return CheckRequest(
        param=param,
        warning=warning,
        critical=critical,
        direction=direction,
        instance=instance,
    )


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture
def snapshot() -> CounterSnapshot:
    return make_snapshot(cache_hit=950, cache_miss=50, uptime=3600, n_wrk=10)


@pytest.fixture(autouse=True)
def _no_site_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the config lookup at an empty temp location."""
    monkeypatch.setenv("CHECK_VARNISH_CONFIG", str(tmp_path / "check_varnish.yaml"))


@pytest.fixture(autouse=True)
def _reset_check_logging() -> Iterator[None]:
    """Drop handlers installed by cli.run() so they never outlive capsys."""
    yield
    root = logging.getLogger("check_varnish")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
