"""Threshold evaluator — classify a value against warning/critical levels.

Pure logic, no I/O.
"""

from __future__ import annotations

import logging

from domain.models import Direction, Status

logger = logging.getLogger("check_varnish.evaluator")


def evaluate(
    value: int | float,
    warning: int,
    critical: int,
    direction: Direction = Direction.GREATER_IS_BAD,
) -> Status:
    """Return the status of *value* for the given thresholds.

    With ``GREATER_IS_BAD`` a value below *warning* is OK, below *critical*
    is WARNING, anything else CRITICAL. ``LESS_IS_BAD`` mirrors that with
    ``>``. A value equal to a threshold always falls into the worse tier.

    Integer thresholds are compared against float values without truncating
    the value, so 94.9 is not OK against ``warning=95`` in either direction.

    Args:
        value: Counter value or hit ratio.
        warning: Warning threshold.
        critical: Critical threshold.
        direction: Which side of the thresholds is unhealthy.

    Returns:
        ``Status.OK``, ``Status.WARNING`` or ``Status.CRITICAL``.
    """
    if direction is Direction.GREATER_IS_BAD:
        if value < warning:
            status = Status.OK
        elif value < critical:
            status = Status.WARNING
        else:
            status = Status.CRITICAL
    elif value > warning:
        status = Status.OK
    elif value > critical:
        status = Status.WARNING
    else:
        status = Status.CRITICAL

    logger.debug(
        "value=%s warning=%s critical=%s direction=%s -> %s",
        value,
        warning,
        critical,
        direction.value,
        status.name,
    )
    return status
