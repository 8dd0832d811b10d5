"""
Tests for pediatric BMI-for-age calculations.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from hypothesis import given, strategies as st
from scipy import stats

from bodymass.engines import (
    calculate_child_bmi,
    classify_child,
    interpolate_lms,
    percentile_from_z,
    z_score,
)
from bodymass.models import ChildCategoryKey, DetailLevel, Sex
from knowledge.growth import (
    BMI_FOR_AGE_MALE,
    REFERENCE_CURVES,
    LmsParams,
    LmsPoint,
    build_curve,
)

MALE_CURVE = REFERENCE_CURVES["male"]


class TestReferenceCurves:
    """CDC 2000 BMI-for-age curves."""

    def test_both_sexes_present(self):
        assert set(REFERENCE_CURVES) == {"male", "female"}

    def test_sorted_by_age(self):
        for curve in REFERENCE_CURVES.values():
            ages = [p.age_months for p in curve]
            assert ages == sorted(ages)
            assert ages[0] == 24
            assert ages[-1] == 240

    def test_read_only(self):
        with pytest.raises(TypeError):
            REFERENCE_CURVES["male"] = ()


class TestInterpolateLms:
    """LMS interpolation and clamping."""

    def test_clamps_below_first_point(self):
        lms = interpolate_lms(MALE_CURVE, 10)
        assert lms == LmsParams(L=-0.7766, M=16.42, S=0.0861)

    def test_clamps_above_last_point(self):
        lms = interpolate_lms(MALE_CURVE, 300)
        assert lms == LmsParams(L=-1.3815, M=24.63, S=0.1317)

    @pytest.mark.parametrize("age", [24, 36, 120, 228, 240])
    def test_exact_table_entry(self, age):
        L, M, S = BMI_FOR_AGE_MALE[age]
        assert interpolate_lms(MALE_CURVE, age) == LmsParams(L=L, M=M, S=S)

    def test_midpoint(self):
        lms = interpolate_lms(MALE_CURVE, 30)
        assert lms.L == pytest.approx((-0.7766 + -1.2236) / 2)
        assert lms.M == pytest.approx((16.42 + 15.79) / 2)
        assert lms.S == pytest.approx((0.0861 + 0.0823) / 2)

    def test_fractional_position(self):
        lms = interpolate_lms(MALE_CURVE, 27)
        assert lms.M == pytest.approx(16.42 + 0.25 * (15.79 - 16.42))

    def test_empty_curve(self):
        assert interpolate_lms((), 60) is None

    def test_no_bracket_found(self):
        assert interpolate_lms(MALE_CURVE, float("nan")) is None

    def test_single_point_curve(self):
        curve = (LmsPoint(age_months=100, L=0.5, M=18.0, S=0.1),)
        assert interpolate_lms(curve, 50) == LmsParams(L=0.5, M=18.0, S=0.1)
        assert interpolate_lms(curve, 150) == LmsParams(L=0.5, M=18.0, S=0.1)


class TestZScore:
    """Box-Cox Z-scores."""

    def test_power_case(self):
        z = z_score(17.9, LmsParams(L=0.5, M=18.0, S=0.1))
        assert z == pytest.approx(-0.0556, abs=1e-4)

    @pytest.mark.parametrize("S", [0.05, 0.1, 0.3])
    def test_log_case_at_median(self, S):
        assert z_score(16.0, LmsParams(L=0, M=16.0, S=S)) == 0

    def test_log_case(self):
        z = z_score(20.0, LmsParams(L=0, M=16.0, S=0.1))
        assert z == pytest.approx(2.2314, abs=1e-4)

    def test_median_is_zero(self):
        assert z_score(15.34, LmsParams(L=-1.6315, M=15.34, S=0.0885)) == 0


class TestPercentile:
    """Abramowitz & Stegun normal CDF approximation."""

    @pytest.mark.parametrize("z,expected", [
        (0.0, 50.0),
        (1.96, 97.5),
        (-1.96, 2.5),
        (1.645, 95.0),
        (6.0, 100.0),
        (-6.0, 0.0),
        (7.5, 100.0),
        (-7.5, 0.0),
    ])
    def test_known_values(self, z, expected):
        assert percentile_from_z(z) == expected

    @given(st.floats(min_value=-6, max_value=6, allow_nan=False))
    def test_symmetry(self, z):
        assert abs(percentile_from_z(z) + percentile_from_z(-z) - 100) <= 0.2

    @given(st.floats(min_value=-6, max_value=6, allow_nan=False))
    def test_matches_normal_cdf(self, z):
        assert percentile_from_z(z) == pytest.approx(stats.norm.cdf(z) * 100, abs=0.06)

    @given(st.floats(min_value=-10, max_value=10, allow_nan=False))
    def test_within_bounds(self, z):
        assert 0 <= percentile_from_z(z) <= 100


class TestClassifyChild:
    """CDC BMI-for-age categories."""

    @pytest.mark.parametrize("percentile,key", [
        (0.0, ChildCategoryKey.UNDERWEIGHT),
        (4.9, ChildCategoryKey.UNDERWEIGHT),
        (5, ChildCategoryKey.NORMAL),
        (84.9, ChildCategoryKey.NORMAL),
        (85, ChildCategoryKey.OVERWEIGHT),
        (94.9, ChildCategoryKey.OVERWEIGHT),
        (95, ChildCategoryKey.OBESE),
        (100, ChildCategoryKey.OBESE),
    ])
    def test_boundaries(self, percentile, key):
        assert classify_child(percentile).key == key

    def test_labels(self):
        assert classify_child(50).label == "Healthy weight"
        assert classify_child(99).label == "Obese"


class TestCalculateChildBmi:
    """Full pediatric calculation."""

    @pytest.mark.parametrize("years,months", [(1, 11), (20, 1), (0, 0), (25, 0)])
    def test_age_outside_reference(self, years, months):
        assert calculate_child_bmi(20, 110, "male", years, months) is None

    @pytest.mark.parametrize("years,months,total", [(2, 0, 24), (20, 0, 240), (1, 12, 24)])
    def test_inclusive_age_boundaries(self, years, months, total):
        result = calculate_child_bmi(20, 110, "female", years, months)
        assert result is not None
        assert result.age_months == total

    def test_near_median(self):
        result = calculate_child_bmi(12.13, 86, Sex.MALE, 2)

        assert result.bmi == 16.4
        assert result.median_bmi == 16.4
        assert result.ideal_weight == 12.1
        assert 45 < result.percentile < 55
        assert result.z_score == pytest.approx(-0.01, abs=0.01)
        assert result.category.key == ChildCategoryKey.NORMAL

    def test_obese(self):
        result = calculate_child_bmi(41, 128, "female", 8, 0)
        assert result.bmi == 25.0
        assert result.z_score > 2
        assert result.category.key == ChildCategoryKey.OBESE

    def test_underweight(self):
        result = calculate_child_bmi(26.46, 140, "male", 10)
        assert result.bmi == 13.5
        assert result.percentile < 5
        assert result.category.key == ChildCategoryKey.UNDERWEIGHT

    def test_z_score_two_decimals(self):
        result = calculate_child_bmi(30, 135, "male", 9, 5)
        assert result.z_score == round(result.z_score, 2)

    def test_advisory_note(self):
        result = calculate_child_bmi(25, 128, "female", 8, 6)
        assert len(result.notes) == 1
        assert result.notes[0].level == DetailLevel.WARNING

    def test_missing_curve(self):
        curves = {"male": MALE_CURVE}
        assert calculate_child_bmi(25, 128, "female", 8, curves=curves) is None

    def test_empty_curve(self):
        curves = {"male": (), "female": ()}
        assert calculate_child_bmi(25, 128, "male", 8, curves=curves) is None

    def test_injected_curve(self):
        curves = {"male": build_curve({24: (0, 16.0, 0.1)})}
        result = calculate_child_bmi(16, 100, "male", 5, curves=curves)
        assert result.z_score == 0
        assert result.percentile == 50.0
        assert result.median_bmi == 16.0

    def test_fractional_months(self):
        result = calculate_child_bmi(20, 110, "male", 5, 0.5)
        assert result is not None
        assert result.age_months == 60.5
        assert result.median_bmi == 15.3

    def test_idempotent(self):
        first = calculate_child_bmi(25, 128, "female", 8, 6)
        second = calculate_child_bmi(25, 128, "female", 8, 6)
        assert first == second
        assert first.percentile == second.percentile
