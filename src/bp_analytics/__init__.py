"""Blood pressure analytics engine.

Pure functions turning a caller-supplied collection of readings into
categories, statistics, chart series and category distributions.
"""

from src.bp_analytics.aggregator import analyze
from src.bp_analytics.bucketer import bucket
from src.bp_analytics.classifier import classify
from src.bp_analytics.distribution import distribution
from src.bp_analytics.errors import EmptyInputError
from src.bp_analytics.ranges import BP_RANGES
from src.models import CATEGORIES

__all__ = [
    "BP_RANGES",
    "CATEGORIES",
    "EmptyInputError",
    "analyze",
    "bucket",
    "classify",
    "distribution",
]
