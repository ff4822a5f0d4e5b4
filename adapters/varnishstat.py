"""Adapter: VarnishstatSource implements StatsSourcePort.

Reads the shared statistics of a running varnishd by invoking ``varnishstat -j``
and parsing its JSON output into a CounterSnapshot.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

from domain.errors import SourceUnavailable
from domain.models import CounterSnapshot

logger = logging.getLogger("check_varnish.adapters")

# Counters of the main child process are published as ``MAIN.<name>`` by
# Varnish 4 and later; older releases print the bare name.
_MAIN_PREFIX = "MAIN."


def parse_counters(payload: dict[str, Any]) -> dict[str, int]:
    """Extract ``name -> value`` from a decoded ``varnishstat -j`` document.

    Accepts the flat layout (counters at the top level next to
    ``timestamp``) and the versioned layout (counters under ``counters``).
    Entries without an integer ``value`` are skipped.
    """
    if "counters" in payload and isinstance(payload["counters"], dict):
        raw: dict[str, Any] = payload["counters"]
    else:
        raw = payload

    counters: dict[str, int] = {}
    for key, entry in raw.items():
        if not isinstance(entry, dict) or "value" not in entry:
            continue
        try:
            value = int(entry["value"])
        except (TypeError, ValueError):
            logger.debug("Skipping non-integer counter %s=%r", key, entry["value"])
            continue
        name = key[len(_MAIN_PREFIX) :] if key.startswith(_MAIN_PREFIX) else key
        counters[name] = value
    return counters


class VarnishstatSource:
    """Concrete StatsSourcePort implementation backed by the varnishstat CLI."""

    def __init__(self, command: str = "varnishstat", timeout: float = 10.0) -> None:
        """Initialise with the varnishstat executable and a run timeout.

        Args:
            command: Path or name of the varnishstat binary.
            timeout: Seconds to wait for varnishstat before giving up.
        """
        self._command = command
        self._timeout = timeout

    def _argv(self, instance: str | None) -> list[str]:
        argv = [self._command, "-j"]
        if instance:
            argv.extend(["-n", instance])
        return argv

    def open_stats(self, instance: str | None = None) -> CounterSnapshot:
        """Run varnishstat once and return the counters it printed.

        Raises:
            SourceUnavailable: varnishstat is missing or not executable,
                failed, timed out or printed something that is not a
                counter document.
        """
        argv = self._argv(instance)
        logger.debug("Running %s", " ".join(argv))
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            logger.warning("%s not found", self._command)
            raise SourceUnavailable(f"{self._command} not found") from exc
        except OSError as exc:
            logger.warning("Cannot run %s: %s", self._command, exc)
            raise SourceUnavailable(f"cannot run {self._command}: {exc}") from exc
        except UnicodeDecodeError as exc:
            logger.warning("Could not decode varnishstat output: %s", exc)
            raise SourceUnavailable("varnishstat printed undecodable output") from exc
        except subprocess.TimeoutExpired as exc:
            logger.warning("%s timed out after %ss", self._command, self._timeout)
            raise SourceUnavailable(
                f"{self._command} timed out after {self._timeout:g}s"
            ) from exc

        if result.returncode != 0:
            detail = result.stderr.strip().splitlines()[-1] if result.stderr.strip() else ""
            logger.warning("%s exited with %d: %s", self._command, result.returncode, detail)
            target = f"instance '{instance}'" if instance else "default instance"
            message = f"cannot open statistics of {target}"
            if detail:
                message = f"{message}: {detail}"
            raise SourceUnavailable(message)

        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            logger.warning("Could not decode varnishstat output: %s", exc)
            raise SourceUnavailable("varnishstat printed invalid JSON") from exc

        if not isinstance(payload, dict):
            raise SourceUnavailable("varnishstat printed an unexpected document")

        counters = parse_counters(payload)
        if not counters:
            raise SourceUnavailable("varnishstat printed no counters")

        logger.info("Read %d counters", len(counters))
        return CounterSnapshot(counters=counters, instance=instance)
