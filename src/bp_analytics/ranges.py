"""Clinical blood pressure ranges.

Each category maps to an inclusive-exclusive ``[min, max)`` interval, one
table for systolic and one for diastolic pressure (mmHg).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from src.models import Category


@dataclass(frozen=True)
class Range:
    """Inclusive-exclusive pressure interval."""

    min: int
    max: int

    def __contains__(self, value: int) -> bool:
        return self.min <= value < self.max


SYSTOLIC_RANGES: Mapping[Category, Range] = MappingProxyType(
    {
        "low": Range(0, 90),
        "normal": Range(90, 120),
        "elevated": Range(120, 130),
        "high": Range(130, 180),
        "crisis": Range(180, 300),
    }
)

DIASTOLIC_RANGES: Mapping[Category, Range] = MappingProxyType(
    {
        "low": Range(0, 60),
        "normal": Range(60, 80),
        "elevated": Range(80, 90),
        "high": Range(90, 120),
        "crisis": Range(120, 200),
    }
)

BP_RANGES: Mapping[str, Mapping[Category, Range]] = MappingProxyType(
    {
        "systolic": SYSTOLIC_RANGES,
        "diastolic": DIASTOLIC_RANGES,
    }
)

# Plausible input range (mmHg) for data entry; not enforced by the engine
ADVISORY_RANGE = Range(40, 251)


def is_plausible(value: int) -> bool:
    """Check whether a pressure value is within the advisory input range."""
    return value in ADVISORY_RANGE
