"""Error taxonomy for check_varnish.

Every error is fatal for the invocation. ``kernel/cli.py`` is the only place
that turns them into output and an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain.models import Status


@dataclass
class ProbeError(Exception):
    """Base class for all check_varnish failures."""

    message: str
    status: Status = Status.UNKNOWN

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceUnavailable(ProbeError):
    """The statistics of the requested Varnish instance could not be read."""


@dataclass
class UsageError(ProbeError):
    """Invalid or incomplete command-line arguments."""


@dataclass
class ConfigError(ProbeError):
    """The config file exists but cannot be read or has invalid values."""


class UnknownParameter(ProbeError):
    """The requested parameter is neither the hit ratio nor a known counter."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Invalid parameter: {param}")
        self.param = param
