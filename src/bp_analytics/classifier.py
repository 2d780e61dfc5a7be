"""Blood pressure category classification."""

from __future__ import annotations

from src.bp_analytics.ranges import DIASTOLIC_RANGES, SYSTOLIC_RANGES
from src.models import Category


def classify(systolic: int, diastolic: int) -> Category:
    """Classify a systolic/diastolic pair.

    Categories are tested from most to least severe and a single field
    crossing a threshold is enough, so 110/125 is a crisis. Low is checked
    on the upper bound of the low range (inclusive) before falling back
    to normal. Any integer pair is accepted.

    Args:
        systolic: Systolic pressure in mmHg
        diastolic: Diastolic pressure in mmHg

    Returns:
        Category name
    """
    if systolic >= SYSTOLIC_RANGES["crisis"].min or diastolic >= DIASTOLIC_RANGES["crisis"].min:
        return "crisis"
    if systolic >= SYSTOLIC_RANGES["high"].min or diastolic >= DIASTOLIC_RANGES["high"].min:
        return "high"
    if systolic >= SYSTOLIC_RANGES["elevated"].min or diastolic >= DIASTOLIC_RANGES["elevated"].min:
        return "elevated"
    if systolic <= SYSTOLIC_RANGES["low"].max or diastolic <= DIASTOLIC_RANGES["low"].max:
        return "low"
    return "normal"
