"""Time-bucketed trend series for charting.

Readings are grouped by a key derived from their timestamp (hour of day,
weekday, day of month or month of year) and every non-empty bucket is
reduced to a single averaged point. Keys come from the timestamp's own
wall-clock fields, so naive datetimes are treated as local time and aware
ones in their own timezone.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Sequence
from datetime import datetime

from src.bp_analytics.aggregator import analyze
from src.models import PERIODS, BloodPressureReading, Period, TrendPoint

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def bucket_key(timestamp: datetime, period: Period) -> int:
    """Bucket key of a timestamp for the given period.

    Returns:
        day: hour 0-23, week: weekday 0=Sunday..6=Saturday,
        month: day of month 1-31, year: month 0=January..11=December
    """
    if period == "day":
        return timestamp.hour
    if period == "week":
        return timestamp.isoweekday() % 7
    if period == "month":
        return timestamp.day
    if period == "year":
        return timestamp.month - 1
    raise ValueError(f"Unsupported period: {period}. Supported: {', '.join(PERIODS)}")


def time_labels(period: Period, reference: datetime | None = None) -> list[tuple[int, str]]:
    """Ordered (key, label) pairs covering a whole period.

    Args:
        period: Chart period
        reference: Date whose month length sets the number of days for
            the month period (required for "month")

    Returns:
        List of (bucket key, display label) in natural period order
    """
    if period == "day":
        return [(hour, f"{hour:02d}:00") for hour in range(24)]
    if period == "week":
        return list(enumerate(WEEKDAY_LABELS))
    if period == "month":
        if reference is None:
            raise ValueError("Month labels need a reference date")
        days_in_month = calendar.monthrange(reference.year, reference.month)[1]
        return [(day, str(day)) for day in range(1, days_in_month + 1)]
    if period == "year":
        return list(enumerate(MONTH_LABELS))
    raise ValueError(f"Unsupported period: {period}. Supported: {', '.join(PERIODS)}")


def bucket(
    readings: Sequence[BloodPressureReading],
    period: Period,
    reference: datetime | None = None,
) -> list[TrendPoint]:
    """Build the trend series of a period.

    Empty buckets are left out rather than zero-filled, and readings whose
    key has no label (day 31 in a 30-day reference month) are dropped.

    Args:
        readings: Readings in any order
        period: One of "day", "week", "month", "year"
        reference: Month used to size the month period; defaults to the
            most recent reading

    Returns:
        Trend points ordered by bucket; empty if there are no readings
    """
    if period not in PERIODS:
        raise ValueError(f"Unsupported period: {period}. Supported: {', '.join(PERIODS)}")

    if not readings:
        logger.debug(f"No readings to bucket for period '{period}'")
        return []

    # sorted() is stable, equal timestamps keep their input order
    ordered = sorted(readings, key=lambda r: r.timestamp)

    groups: dict[int, list[BloodPressureReading]] = {}
    for reading in ordered:
        groups.setdefault(bucket_key(reading.timestamp, period), []).append(reading)

    points = []
    for key, label in time_labels(period, reference or ordered[-1].timestamp):
        group = groups.get(key)
        if not group:
            continue
        stats = analyze(group)
        points.append(
            TrendPoint(
                time=label,
                systolic=stats.average.systolic,
                diastolic=stats.average.diastolic,
                heart_rate=stats.average.heart_rate,
                timestamp=group[0].timestamp,
            )
        )

    logger.debug(
        f"Bucketed {len(readings)} readings into {len(points)} '{period}' points "
        f"({len(groups)} keys)"
    )
    return points
