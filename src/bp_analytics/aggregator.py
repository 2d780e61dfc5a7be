"""Aggregate statistics over blood pressure readings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.bp_analytics.errors import EmptyInputError
from src.models import Average, BloodPressureReading, Stats, Trend

logger = logging.getLogger(__name__)

# Number of most recent readings considered for the trend
TREND_WINDOW = 5
# Minimum systolic change (mmHg) across the window to report a direction
TREND_THRESHOLD = 5


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves up.

    Uses integer arithmetic so that e.g. 245 / 2 always gives 123.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def mean(values: Sequence[int]) -> int:
    """Arithmetic mean rounded half-up."""
    return round_half_up(sum(values), len(values))


def calculate_trend(systolic_values: Sequence[int]) -> Trend:
    """Direction of recent systolic change.

    Compares the first and last value of the last ``TREND_WINDOW`` values.
    Differences below ``TREND_THRESHOLD`` are reported as stable.
    """
    if len(systolic_values) < 2:
        return "stable"

    recent = systolic_values[-TREND_WINDOW:]
    difference = recent[-1] - recent[0]

    if abs(difference) < TREND_THRESHOLD:
        return "stable"
    return "rising" if difference > 0 else "falling"


def analyze(readings: Sequence[BloodPressureReading]) -> Stats:
    """Compute averages, extremes and trend for a set of readings.

    Readings are used in the order given; the trend looks at the tail of
    that order and ties for max/min resolve to the first reading.

    Args:
        readings: Non-empty sequence of readings

    Returns:
        Stats for the readings

    Raises:
        EmptyInputError: If readings is empty
    """
    if not readings:
        logger.debug("analyze called with no readings")
        raise EmptyInputError("analysis")

    readings = list(readings)
    systolic_values = [r.systolic for r in readings]

    max_reading = readings[0]
    min_reading = readings[0]
    for reading in readings[1:]:
        if reading.systolic > max_reading.systolic:
            max_reading = reading
        if reading.systolic < min_reading.systolic:
            min_reading = reading

    return Stats(
        average=Average(
            systolic=mean(systolic_values),
            diastolic=mean([r.diastolic for r in readings]),
            heart_rate=mean([r.heart_rate for r in readings]),
        ),
        max=max_reading,
        min=min_reading,
        trend=calculate_trend(systolic_values),
    )
