"""Category distribution of a reading set."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.bp_analytics.aggregator import round_half_up
from src.bp_analytics.classifier import classify
from src.bp_analytics.errors import EmptyInputError
from src.models import CATEGORIES, BloodPressureReading, DistributionEntry

logger = logging.getLogger(__name__)


def distribution(readings: Sequence[BloodPressureReading]) -> list[DistributionEntry]:
    """Count readings per category.

    One entry per category in canonical order, including empty ones.
    Percentages are rounded independently, so their sum may be off by a
    few points from 100.

    Raises:
        EmptyInputError: If readings is empty
    """
    if not readings:
        logger.debug("distribution called with no readings")
        raise EmptyInputError("distribution")

    counts = dict.fromkeys(CATEGORIES, 0)
    for reading in readings:
        counts[classify(reading.systolic, reading.diastolic)] += 1

    total = len(readings)
    return [
        DistributionEntry(
            category=category,
            count=count,
            percentage=round_half_up(count * 100, total),
        )
        for category, count in counts.items()
    ]
