"""Parameter resolver — turn a parameter name into a value and a label.

Two kinds of parameter exist: the derived cache hit ratio (``ratio``, with
``hitrate`` accepted as an alias) and any raw counter from the known
field table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.errors import UnknownParameter
from domain.fields import HIT_COUNTER, MISS_COUNTER, lookup_field

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("check_varnish.resolver")

RATIO_PARAM = "ratio"
RATIO_ALIASES: frozenset[str] = frozenset({RATIO_PARAM, "hitrate"})
RATIO_LABEL = "Cache hit ratio"


def is_ratio(param: str) -> bool:
    """Return True if *param* names the derived hit ratio."""
    return param in RATIO_ALIASES


def hit_ratio(counters: Mapping[str, int]) -> float:
    """Percentage of lookups served from cache, 0.0 when nothing was looked up.

    Missing hit/miss counters count as zero.
    """
    hit = counters.get(HIT_COUNTER, 0)
    miss = counters.get(MISS_COUNTER, 0)
    total = hit + miss
    if total > 0:
        return 100.0 * hit / total
    return 0.0


def resolve(param: str, counters: Mapping[str, int]) -> tuple[int | float, str]:
    """Resolve *param* against a counter snapshot.

    Args:
        param: ``ratio``/``hitrate`` or a counter name from the field table.
        counters: Snapshot of the instance's counters.

    Returns:
        ``(value, label)`` where label is the human-readable description.

    Raises:
        UnknownParameter: *param* is not the ratio, not a known field, or a
            known field the snapshot does not carry.
    """
    if is_ratio(param):
        ratio = hit_ratio(counters)
        logger.info("Resolved %s to %.4f", param, ratio)
        return ratio, RATIO_LABEL

    field = lookup_field(param)
    if field is None:
        logger.info("Unknown parameter: %s", param)
        raise UnknownParameter(param)

    if field.name not in counters:
        logger.warning("Counter %s is not published by this instance", field.name)
        raise UnknownParameter(param)

    value = int(counters[field.name])
    logger.info("Resolved %s to %d", param, value)
    return value, field.description
