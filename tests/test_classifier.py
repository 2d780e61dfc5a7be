"""Tests for the range table and classifier."""

import pytest

from src.bp_analytics import BP_RANGES, classify
from src.bp_analytics.ranges import ADVISORY_RANGE, Range, is_plausible


class TestRangeTable:
    """Tests for the static clinical ranges."""

    def test_has_both_tables(self):
        assert set(BP_RANGES) == {"systolic", "diastolic"}

    @pytest.mark.parametrize("table", ["systolic", "diastolic"])
    def test_ranges_are_contiguous(self, table):
        """Each category starts where the previous one ends."""
        order = ["low", "normal", "elevated", "high", "crisis"]
        ranges = [BP_RANGES[table][c] for c in order]
        for lower, upper in zip(ranges, ranges[1:]):
            assert lower.max == upper.min

    def test_thresholds(self):
        assert BP_RANGES["systolic"]["crisis"].min == 180
        assert BP_RANGES["diastolic"]["crisis"].min == 120
        assert BP_RANGES["systolic"]["low"].max == 90
        assert BP_RANGES["diastolic"]["low"].max == 60

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BP_RANGES["systolic"]["low"] = Range(0, 100)

    def test_range_is_inclusive_exclusive(self):
        assert 120 in Range(120, 130)
        assert 130 not in Range(120, 130)

    @pytest.mark.parametrize(
        "value,expected",
        [(39, False), (40, True), (120, True), (250, True), (251, False)],
    )
    def test_advisory_range(self, value, expected):
        assert ADVISORY_RANGE.min == 40
        assert is_plausible(value) is expected


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "systolic,diastolic,expected_category",
        [
            # Low: systolic <= 90 or diastolic <= 60
            (85, 55, "low"),
            (90, 70, "low"),
            (100, 60, "low"),
            (0, 0, "low"),
            # Normal
            (100, 70, "normal"),
            (91, 61, "normal"),
            (119, 79, "normal"),
            # Elevated: systolic >= 120 or diastolic >= 80
            (120, 80, "elevated"),
            (120, 70, "elevated"),
            (110, 80, "elevated"),
            (129, 89, "elevated"),
            # High: systolic >= 130 or diastolic >= 90
            (135, 95, "high"),
            (130, 70, "high"),
            (110, 90, "high"),
            (179, 119, "high"),
            # Crisis: systolic >= 180 or diastolic >= 120
            (180, 80, "crisis"),
            (110, 120, "crisis"),
            (220, 130, "crisis"),
        ],
    )
    def test_category_classification(self, systolic, diastolic, expected_category):
        """Test BP category classification for various values."""
        assert classify(systolic, diastolic) == expected_category

    @pytest.mark.parametrize("systolic", [180, 200, 300, 1000])
    @pytest.mark.parametrize("diastolic", [0, 40, 70, 100])
    def test_high_systolic_is_crisis_regardless_of_diastolic(self, systolic, diastolic):
        assert classify(systolic, diastolic) == "crisis"

    @pytest.mark.parametrize("diastolic", [120, 150, 200])
    @pytest.mark.parametrize("systolic", [0, 85, 110, 150])
    def test_high_diastolic_is_crisis_regardless_of_systolic(self, systolic, diastolic):
        assert classify(systolic, diastolic) == "crisis"

    def test_low_and_crisis_resolves_to_crisis(self):
        """Most severe category wins when fields disagree."""
        assert classify(85, 125) == "crisis"

    def test_low_systolic_with_elevated_diastolic(self):
        """Elevated is tested before low."""
        assert classify(85, 85) == "elevated"

    def test_negative_values_do_not_raise(self):
        assert classify(-10, -5) == "low"
