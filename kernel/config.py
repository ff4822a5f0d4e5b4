"""
kernel/config.py — Default settings and configuration loading.

All constants and system settings live here. ``kernel/cli.py`` reads the
optional YAML config once at startup via ``load_config()``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from domain.errors import ConfigError

logger = logging.getLogger("check_varnish.config")

# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

PROG = "check_varnish"

USAGE = "usage: check_varnish [-p param_name -c N -w N] [-l] [-n varnish_name] [-v]"

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Thresholds applied when neither -p nor -w/-c is given (percent).
DEFAULT_RATIO_WARNING = 95
DEFAULT_RATIO_CRITICAL = 90

DEFAULT_VARNISHSTAT = "varnishstat"

# Seconds to wait for varnishstat to print its counters
DEFAULT_TIMEOUT = 10.0

# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------

CONFIG_ENV = "CHECK_VARNISH_CONFIG"
DEFAULT_CONFIG_FILE = Path("/etc/check_varnish.yaml")


@dataclass(frozen=True)
class ProbeConfig:
    """Site-wide settings read from the YAML config file."""

    varnishstat: str = DEFAULT_VARNISHSTAT
    instance: str | None = None
    log_file: Path | None = None
    timeout: float = DEFAULT_TIMEOUT


def config_path() -> Path:
    """Return the config file path, honouring ``$CHECK_VARNISH_CONFIG``."""
    override = os.environ.get(CONFIG_ENV)
    return Path(override) if override else DEFAULT_CONFIG_FILE


def _config_from_dict(d: dict[str, Any]) -> ProbeConfig:
    log_file = d.get("log_file")
    instance = d.get("instance")
    try:
        timeout = float(d.get("timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid timeout in config: {d.get('timeout')!r}") from exc
    return ProbeConfig(
        varnishstat=str(d.get("varnishstat", DEFAULT_VARNISHSTAT)),
        instance=str(instance) if instance else None,
        log_file=Path(log_file) if log_file else None,
        timeout=timeout,
    )


def load_config(path: Path | None = None) -> ProbeConfig:
    """Load the site config, falling back to defaults when no file exists.

    Args:
        path: Explicit config file. Defaults to ``config_path()``.

    Raises:
        ConfigError: The file exists but cannot be read or is not a YAML
            mapping.
    """
    cf = path if path is not None else config_path()
    if not cf.exists():
        logger.debug("No config file at %s, using defaults", cf)
        return ProbeConfig()

    try:
        data = yaml.safe_load(cf.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read config {cf}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"config {cf} must be a mapping")

    logger.debug("Loaded config from %s", cf)
    return _config_from_dict(data)
