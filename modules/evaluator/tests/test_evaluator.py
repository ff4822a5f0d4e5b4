"""Tests for modules/evaluator/core.py — threshold classification."""

from __future__ import annotations

import pytest

from domain.models import Direction, Status
from modules.evaluator.core import evaluate

# ---------------------------------------------------------------------------
# GREATER_IS_BAD
# ---------------------------------------------------------------------------


class TestGreaterIsBad:
    """Values at or above the thresholds are unhealthy."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, Status.OK),
            (9, Status.OK),
            (10, Status.WARNING),
            (19, Status.WARNING),
            (20, Status.CRITICAL),
            (1000, Status.CRITICAL),
        ],
    )
    def test_tiers(self, value: int, expected: Status) -> None:
        assert evaluate(value, 10, 20, Direction.GREATER_IS_BAD) == expected

    def test_is_the_default_direction(self) -> None:
        assert evaluate(15, 10, 20) == Status.WARNING

    def test_equal_thresholds_skip_warning(self) -> None:
        """warning == critical leaves no WARNING band."""
        assert evaluate(9, 10, 10) == Status.OK
        assert evaluate(10, 10, 10) == Status.CRITICAL

    def test_zero_critical_means_anything_not_ok_is_critical(self) -> None:
        """An omitted critical threshold counts as 0."""
        assert evaluate(4, 5, 0) == Status.OK
        assert evaluate(5, 5, 0) == Status.CRITICAL

    def test_negative_values(self) -> None:
        assert evaluate(-5, 0, 10) == Status.OK


# ---------------------------------------------------------------------------
# LESS_IS_BAD
# ---------------------------------------------------------------------------


class TestLessIsBad:
    """Values at or below the thresholds are unhealthy."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100, Status.OK),
            (96, Status.OK),
            (95, Status.WARNING),
            (91, Status.WARNING),
            (90, Status.CRITICAL),
            (0, Status.CRITICAL),
        ],
    )
    def test_tiers(self, value: int, expected: Status) -> None:
        assert evaluate(value, 95, 90, Direction.LESS_IS_BAD) == expected

    def test_default_ratio_example_critical(self) -> None:
        """85% is neither above 95 nor above 90."""
        assert evaluate(85.0, 95, 90, Direction.LESS_IS_BAD) == Status.CRITICAL


# ---------------------------------------------------------------------------
# Float values against integer thresholds
# ---------------------------------------------------------------------------


class TestFloatValues:
    """Thresholds are widened to float; the value is never truncated."""

    def test_fraction_above_warning_is_ok(self) -> None:
        assert evaluate(95.5, 95, 90, Direction.LESS_IS_BAD) == Status.OK

    def test_fraction_just_below_warning_is_not_ok(self) -> None:
        assert evaluate(94.99, 95, 90, Direction.LESS_IS_BAD) == Status.WARNING

    def test_fraction_just_above_critical_is_warning(self) -> None:
        """Truncation to 90 would have made this CRITICAL."""
        assert evaluate(90.4, 95, 90, Direction.LESS_IS_BAD) == Status.WARNING

    def test_greater_is_bad_fraction(self) -> None:
        """Truncation to 9 would have made this OK."""
        assert evaluate(9.5, 9, 20, Direction.GREATER_IS_BAD) == Status.WARNING


def test_repeated_evaluation_is_stable() -> None:
    results = {evaluate(42, 10, 50, Direction.GREATER_IS_BAD) for _ in range(5)}
    assert results == {Status.WARNING}
