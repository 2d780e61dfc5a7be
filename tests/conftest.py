"""Shared pytest fixtures for blood pressure analytics tests."""

from datetime import datetime

import pytest

from src.models import BloodPressureReading


def make_reading(
    systolic: int,
    diastolic: int,
    heart_rate: int = 72,
    timestamp: datetime | None = None,
    **kwargs,
) -> BloodPressureReading:
    """Build a reading with a default timestamp."""
    return BloodPressureReading(
        timestamp=timestamp or datetime(2025, 1, 15, 10, 30, 0),
        systolic=systolic,
        diastolic=diastolic,
        heart_rate=heart_rate,
        **kwargs,
    )


@pytest.fixture
def reading_factory():
    """Factory for readings: reading_factory(systolic, diastolic, heart_rate, timestamp)."""
    return make_reading


@pytest.fixture
def sample_reading() -> BloodPressureReading:
    """Create a sample blood pressure reading for testing."""
    return BloodPressureReading(
        timestamp=datetime(2025, 1, 15, 10, 30, 0),
        systolic=120,
        diastolic=80,
        heart_rate=72,
    )


@pytest.fixture
def high_bp_reading() -> BloodPressureReading:
    """Create a high blood pressure reading."""
    return BloodPressureReading(
        timestamp=datetime(2025, 1, 15, 12, 0, 0),
        systolic=160,
        diastolic=100,
        heart_rate=85,
        note="after coffee",
        session="noon",
    )


@pytest.fixture
def multiple_readings() -> list[BloodPressureReading]:
    """Three readings on one day: 120/80, 140/95, 110/70."""
    return [
        BloodPressureReading(
            timestamp=datetime(2025, 1, 15, 8, 0, 0),
            systolic=120,
            diastolic=80,
            heart_rate=70,
        ),
        BloodPressureReading(
            timestamp=datetime(2025, 1, 15, 12, 0, 0),
            systolic=140,
            diastolic=95,
            heart_rate=80,
        ),
        BloodPressureReading(
            timestamp=datetime(2025, 1, 15, 20, 0, 0),
            systolic=110,
            diastolic=70,
            heart_rate=65,
        ),
    ]


@pytest.fixture
def week_readings() -> list[BloodPressureReading]:
    """Readings spread over one week (Sun 2025-01-12 .. Sat 2025-01-18), unsorted."""
    return [
        make_reading(130, 85, 75, datetime(2025, 1, 15, 9, 0)),  # Wed
        make_reading(118, 76, 68, datetime(2025, 1, 12, 8, 0)),  # Sun
        make_reading(122, 78, 70, datetime(2025, 1, 12, 20, 0)),  # Sun
        make_reading(145, 92, 82, datetime(2025, 1, 18, 7, 30)),  # Sat
        make_reading(112, 72, 64, datetime(2025, 1, 13, 8, 15)),  # Mon
    ]


@pytest.fixture
def records_csv(tmp_path, multiple_readings) -> str:
    """CSV record file containing multiple_readings."""
    from src.exporter import export_csv

    return str(export_csv(multiple_readings, tmp_path / "readings.csv"))
