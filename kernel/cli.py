#!/usr/bin/env python3
"""
check_varnish CLI -- Nagios plugin for Varnish.

Reads the counters of a running Varnish instance, checks one of them (or the
cache hit ratio) against warning/critical thresholds, prints one result line
and exits with the matching plugin status.

Usage:
  check_varnish [-p param_name -c N -w N] [-l] [-n varnish_name] [-v]

Exit codes:
  0 OK, 1 Warning, 2 Critical, 3 Unknown (including usage errors and
  unreadable statistics)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, NoReturn

from adapters.varnishstat import VarnishstatSource
from domain.errors import ProbeError, UnknownParameter, UsageError
from domain.fields import COUNTER_FIELDS
from domain.models import CheckRequest, Direction, Status, Verdict
from kernel.config import (
    DEFAULT_RATIO_CRITICAL,
    DEFAULT_RATIO_WARNING,
    PROG,
    USAGE,
    ProbeConfig,
    load_config,
)
from kernel.console import configure, console
from modules.evaluator.core import evaluate
from modules.resolver.core import RATIO_ALIASES, RATIO_LABEL, RATIO_PARAM, resolve

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from domain.ports import StatsSourcePort

logger = logging.getLogger("check_varnish.cli")

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG, logging.DEBUG)

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UsageError instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False, usage=USAGE.removeprefix("usage: "))
    parser.add_argument("-c", dest="critical", type=int, metavar="N")
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-l", dest="less", action="store_true")
    parser.add_argument("-n", dest="instance", metavar="varnish_name")
    parser.add_argument("-p", dest="param", metavar="param_name")
    parser.add_argument("-v", dest="verbose", action="count", default=0)
    parser.add_argument("-w", dest="warning", type=int, metavar="N")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line. Raises UsageError on anything malformed."""
    return build_parser().parse_args(argv)


# ---------------------------------------------------------------------------
# Request resolution
# ---------------------------------------------------------------------------


def build_request(args: argparse.Namespace, config: ProbeConfig | None = None) -> CheckRequest:
    """Apply defaults to the parsed arguments.

    A threshold of 0 counts as not given. With no ``-p`` the hit ratio is
    checked; if no thresholds were given either, warning=95 and critical=90
    with LESS_IS_BAD are used regardless of ``-l``. An explicit ``-p`` left
    without thresholds is caught later by ``validate_request()``.
    """
    config = config or ProbeConfig()
    direction = Direction.LESS_IS_BAD if args.less else Direction.GREATER_IS_BAD
    warning: int | None = args.warning or None
    critical: int | None = args.critical or None

    if args.param is None:
        param = RATIO_PARAM
        if warning is None and critical is None:
            warning = DEFAULT_RATIO_WARNING
            critical = DEFAULT_RATIO_CRITICAL
            direction = Direction.LESS_IS_BAD
    else:
        param = args.param

    return CheckRequest(
        param=param,
        warning=warning,
        critical=critical,
        direction=direction,
        instance=args.instance or config.instance,
        verbosity=args.verbose,
    )


def validate_request(request: CheckRequest) -> None:
    """Reject a request that names a parameter but no threshold.

    Raises:
        UsageError: Neither ``-w`` nor ``-c`` is set to a non-zero value.
    """
    if request.warning is None and request.critical is None:
        raise UsageError(f"-p {request.param} requires a non-zero -w and/or -c")


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------


def check(request: CheckRequest, counters: Mapping[str, int]) -> Verdict:
    """Resolve the requested parameter and classify it.

    A threshold that was not given counts as 0.

    Raises:
        UnknownParameter: The parameter cannot be resolved.
    """
    value, label = resolve(request.param, counters)
    status = evaluate(
        value,
        request.warning if request.warning is not None else 0,
        request.critical if request.critical is not None else 0,
        request.direction,
    )
    return Verdict(status=status, value=value, label=label)


def format_value(value: int | float) -> str:
    """Render a counter as an integer, the ratio with up to two decimals."""
    if isinstance(value, float):
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)


def format_verdict(verdict: Verdict) -> str:
    return f"{verdict.status.word}: {format_value(verdict.value)} {verdict.label}"


# ---------------------------------------------------------------------------
# Help / usage
# ---------------------------------------------------------------------------


def print_usage() -> None:
    console.text(USAGE)


def print_help() -> None:
    """Print the full help text, including every valid parameter."""
    console.text(USAGE)
    console.kv(
        {
            "-c N": "warn as critical at threshold N",
            "-l": "specify that values should be less than thresholds for warnings to be issued",
            "-n varnish_name": "specify varnish instance name",
            "-p param_name": (
                f"specify the parameter to check. See valid parameters. Default is {RATIO_PARAM}"
            ),
            "-v": "print verbose output. Can be specified up to three times",
            "-w N": "warn as warning at threshold N",
        },
        title="Valid options",
    )
    rows = [
        [
            name,
            f"{RATIO_LABEL}. Will be between 0 and 100. "
            f"Default thresholds are {DEFAULT_RATIO_WARNING} and {DEFAULT_RATIO_CRITICAL}.",
        ]
        for name in sorted(RATIO_ALIASES, key=lambda n: n != RATIO_PARAM)
    ]
    rows.extend([f.name, f.description] for f in COUNTER_FIELDS)
    console.table(["Parameter", "Description"], rows, title="Valid parameters")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _setup_logging(verbosity: int, log_file: Path | None = None) -> None:
    """Send diagnostics to stderr (level from -v) and optionally to a file."""
    root = logging.getLogger("check_varnish")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")

    stream = logging.StreamHandler(sys.stderr)
    stream.setLevel(_VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)])
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot open log file %s: %s", log_file, exc)
            return
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def run(argv: Sequence[str] | None = None, source: StatsSourcePort | None = None) -> int:
    """Run one check and return the exit code.

    Args:
        argv: Command-line arguments without the program name.
        source: Stats source to read from. Defaults to varnishstat as
            configured in the config file.
    """
    configure(backend="auto")

    try:
        args = parse_args(argv)
    except UsageError as exc:
        console.error(str(exc))
        print_usage()
        return Status.UNKNOWN.value

    if args.help:
        print_help()
        return Status.OK.value

    try:
        config = load_config()
        request = build_request(args, config)
        _setup_logging(request.verbosity, config.log_file)

        if source is None:
            source = VarnishstatSource(command=config.varnishstat, timeout=config.timeout)
        logger.info("Opening statistics of %s", request.instance or "default instance")
        snapshot = source.open_stats(request.instance)

        validate_request(request)
        logger.debug("Request: %s", request)
        verdict = check(request, snapshot)
    except UsageError as exc:
        console.error(str(exc))
        print_usage()
        return exc.status.value
    except UnknownParameter as exc:
        print(exc.message)
        return exc.status.value
    except ProbeError as exc:
        print(f"{exc.status.word}: {exc.message}")
        return exc.status.value

    print(format_verdict(verdict))
    return verdict.exit_code


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
