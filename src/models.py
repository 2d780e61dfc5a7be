"""Data models for the blood pressure analytics engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

Category = Literal["low", "normal", "elevated", "high", "crisis"]
Trend = Literal["rising", "falling", "stable"]
Period = Literal["day", "week", "month", "year"]
Session = Literal["morning", "noon", "evening", "night"]

# Canonical category order used by distribution reports
CATEGORIES: tuple[Category, ...] = ("normal", "elevated", "high", "crisis", "low")
PERIODS: tuple[Period, ...] = ("day", "week", "month", "year")
SESSIONS: tuple[Session, ...] = ("morning", "noon", "evening", "night")


@dataclass(frozen=True)
class BloodPressureReading:
    """Single blood pressure measurement."""

    timestamp: datetime
    systolic: int  # mmHg - systolic pressure
    diastolic: int  # mmHg - diastolic pressure
    heart_rate: int  # bpm
    note: str | None = None
    session: Session | None = None  # measurement time slot

    @property
    def record_hash(self) -> str:
        """Identity of the measurement, used to skip duplicate imports."""
        return (
            f"{self.timestamp.isoformat()}_"
            f"{self.systolic}_{self.diastolic}_{self.heart_rate}"
        )

    @property
    def category(self) -> Category:
        """Clinical category of this reading."""
        # Imported here: the classifier depends on this module for its types
        from src.bp_analytics.classifier import classify

        return classify(self.systolic, self.diastolic)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "heart_rate": self.heart_rate,
            "category": self.category,
            "session": self.session,
            "note": self.note,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return (
            f"BP: {self.systolic}/{self.diastolic} mmHg, "
            f"Heart rate: {self.heart_rate} bpm, "
            f"Category: {self.category}"
        )


@dataclass(frozen=True)
class Average:
    """Rounded per-field means of a reading set."""

    systolic: int
    diastolic: int
    heart_rate: int


@dataclass(frozen=True)
class Stats:
    """Aggregate statistics over a non-empty set of readings."""

    average: Average
    max: BloodPressureReading  # highest systolic
    min: BloodPressureReading  # lowest systolic
    trend: Trend

    def to_dict(self) -> dict:
        return {
            "average": {
                "systolic": self.average.systolic,
                "diastolic": self.average.diastolic,
                "heart_rate": self.average.heart_rate,
            },
            "max": self.max.to_dict(),
            "min": self.min.to_dict(),
            "trend": self.trend,
        }


@dataclass(frozen=True)
class TrendPoint:
    """One aggregated chart point per time bucket."""

    time: str  # bucket label, e.g. "Mon" or "08:00"
    systolic: int
    diastolic: int
    heart_rate: int
    timestamp: datetime  # earliest reading in the bucket

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "heart_rate": self.heart_rate,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class DistributionEntry:
    """Share of readings falling into one category."""

    category: Category
    count: int
    percentage: int  # 0-100, rounded independently per entry
