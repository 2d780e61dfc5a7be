"""Simulated blood pressure readings for demos and testing.

Values are drawn uniformly from normal-range intervals:
systolic 110-130 mmHg, diastolic 60-85 mmHg, heart rate 60-100 bpm.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta

from src.models import PERIODS, BloodPressureReading, Period, Session

logger = logging.getLogger(__name__)

SYSTOLIC_RANGE = (110, 130)
DIASTOLIC_RANGE = (60, 85)
HEART_RATE_RANGE = (60, 100)


def session_for(timestamp: datetime) -> Session:
    """Measurement time slot of a timestamp.

    morning 05-11, noon 11-14, evening 14-20, night otherwise.
    """
    hour = timestamp.hour
    if 5 <= hour < 11:
        return "morning"
    if 11 <= hour < 14:
        return "noon"
    if 14 <= hour < 20:
        return "evening"
    return "night"


def _random_reading(rng: random.Random, timestamp: datetime) -> BloodPressureReading:
    return BloodPressureReading(
        timestamp=timestamp,
        systolic=rng.randint(*SYSTOLIC_RANGE),
        diastolic=rng.randint(*DIASTOLIC_RANGE),
        heart_rate=rng.randint(*HEART_RATE_RANGE),
        session=session_for(timestamp),
    )


def generate_readings(
    count: int,
    days: int = 30,
    end: datetime | None = None,
    seed: int | None = None,
) -> list[BloodPressureReading]:
    """Generate readings spread evenly over the last days.

    Args:
        count: Number of readings
        days: Length of the covered window in days
        end: Timestamp of the last reading (default: now)
        seed: Random seed for reproducible output

    Returns:
        Readings in chronological order
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if days <= 0:
        raise ValueError(f"days must be > 0, got {days}")

    rng = random.Random(seed)
    end = (end or datetime.now()).replace(microsecond=0)
    start = end - timedelta(days=days)
    step = (end - start) / count if count > 1 else timedelta(0)

    readings = [
        _random_reading(rng, end - step * (count - 1 - i)) for i in range(count)
    ]
    logger.info(f"Generated {len(readings)} sample readings over {days} days")
    return readings


def generate_period_readings(
    period: Period,
    now: datetime | None = None,
    seed: int | None = None,
) -> list[BloodPressureReading]:
    """Generate a chart-sized data set for one period.

    day: every 3 hours over the last 24 hours (9 readings)
    week: one per day over the last 8 days
    month: one per day from the 1st of the current month up to now
    year: the 1st of each month from January up to the current month
    """
    rng = random.Random(seed)
    now = (now or datetime.now()).replace(microsecond=0)

    if period == "day":
        start = now - timedelta(days=1)
        timestamps = [start + timedelta(hours=h) for h in range(0, 25, 3)]
    elif period == "week":
        timestamps = [now - timedelta(days=7 - i) for i in range(8)]
    elif period == "month":
        timestamps = [now.replace(day=d) for d in range(1, now.day + 1)]
    elif period == "year":
        first = now.replace(day=1)
        timestamps = [first.replace(month=m) for m in range(1, now.month + 1)]
    else:
        raise ValueError(f"Unsupported period: {period}. Supported: {', '.join(PERIODS)}")

    return [_random_reading(rng, ts) for ts in timestamps]
