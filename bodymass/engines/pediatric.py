"""
Pediatric BMI-for-age calculations using the LMS method.

Z-score = ((value/M)^L - 1) / (L * S)  when L != 0
Z-score = ln(value/M) / S              when L = 0

Percentile = Phi(Z-score), where Phi is approximated with the
Abramowitz & Stegun formula 26.2.17 (absolute error < 7.5e-8).

Flow: age check -> LMS interpolation -> Z-score -> percentile -> category.
Any failure along the way returns None; no partial result is produced.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from bodymass.engines.calculator import compute_bmi, gauge_position
from bodymass.engines.rounding import round_half_away
from bodymass.models import (
    ChildCategory,
    ChildCategoryKey,
    Detail,
    DetailLevel,
    Measurement,
    PediatricResult,
    Sex,
)
from knowledge.growth import REFERENCE_CURVES, LmsParams, LmsPoint

logger = logging.getLogger(__name__)

# Reference curves are defined for 2-20 years
MIN_AGE_MONTHS = 24
MAX_AGE_MONTHS = 240

# Beyond this the tail probability is 0 / 1 at display precision
Z_LIMIT = 6.0

# Abramowitz & Stegun 26.2.17
_AS_P = 0.2316419
_AS_B = (0.3193815, -0.3565638, 1.781478, -1.8212560, 1.3302744)
_INV_SQRT_2PI = 1 / math.sqrt(2 * math.pi)

CHILD_LABELS = {
    ChildCategoryKey.UNDERWEIGHT: "Underweight",
    ChildCategoryKey.NORMAL: "Healthy weight",
    ChildCategoryKey.OVERWEIGHT: "Overweight",
    ChildCategoryKey.OBESE: "Obese",
}

ADVISORY_NOTE = (
    "BMI results for children are indicative only. "
    "We recommend discussing them with a pediatrician."
)


def interpolate_lms(curve: Sequence[LmsPoint], age_months: float) -> LmsParams | None:
    """
    Interpolate LMS values for a given age.

    Ages outside the curve are clamped to its first or last point. Between
    points, L, M and S are interpolated linearly and independently. The
    curve must be sorted by age; None is returned if no bracketing pair is
    found (unsorted or NaN input).
    """
    if not curve:
        return None

    first, last = curve[0], curve[-1]
    if age_months <= first.age_months:
        return LmsParams(L=first.L, M=first.M, S=first.S)
    if age_months >= last.age_months:
        return LmsParams(L=last.L, M=last.M, S=last.S)

    for lower, upper in zip(curve, curve[1:]):
        if lower.age_months <= age_months < upper.age_months:
            t = (age_months - lower.age_months) / (upper.age_months - lower.age_months)
            return LmsParams(
                L=lower.L + t * (upper.L - lower.L),
                M=lower.M + t * (upper.M - lower.M),
                S=lower.S + t * (upper.S - lower.S),
            )
    return None


def z_score(bmi: float, lms: LmsParams) -> float:
    """Box-Cox Z-score of a BMI against LMS parameters (bmi > 0, M > 0)."""
    if lms.L == 0:
        return math.log(bmi / lms.M) / lms.S
    return (math.pow(bmi / lms.M, lms.L) - 1) / (lms.L * lms.S)


def percentile_from_z(z: float) -> float:
    """
    Convert a Z-score to a percentile (0-100, 1 decimal).

    The polynomial gives the upper-tail probability for |z|; the lower half
    follows by symmetry.
    """
    if z < -Z_LIMIT:
        return 0.0
    if z > Z_LIMIT:
        return 100.0

    x = abs(z)
    t = 1 / (1 + _AS_P * x)
    b1, b2, b3, b4, b5 = _AS_B
    poly = t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    prob = _INV_SQRT_2PI * math.exp(-x * x / 2) * poly

    if z >= 0:
        prob = 1 - prob
    return round_half_away(prob * 1000, 0) / 10


def classify_child(percentile: float) -> ChildCategory:
    """CDC BMI-for-age category: <5, 5-85, 85-95, >=95."""
    if percentile < 5:
        key = ChildCategoryKey.UNDERWEIGHT
    elif percentile < 85:
        key = ChildCategoryKey.NORMAL
    elif percentile < 95:
        key = ChildCategoryKey.OVERWEIGHT
    else:
        key = ChildCategoryKey.OBESE
    return ChildCategory(key=key, label=CHILD_LABELS[key])


def calculate_child_bmi(
    weight_kg: float,
    height_cm: float,
    sex: Sex | str,
    age_years: float,
    age_months: float = 0,
    curves: Mapping[str, Sequence[LmsPoint]] | None = None,
) -> PediatricResult | None:
    """
    Calculate BMI-for-age for a child.

    Args:
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters
        sex: "male" or "female"
        age_years: Completed years
        age_months: Additional months (0-11)
        curves: Reference curves keyed by sex value (defaults to CDC 2000)

    Returns:
        PediatricResult, or None if the age is outside 24-240 months or
        no usable reference curve exists for the sex
    """
    total_months = age_years * 12 + (age_months or 0)
    if total_months < MIN_AGE_MONTHS or total_months > MAX_AGE_MONTHS:
        logger.debug("Age %s months outside %s-%s", total_months, MIN_AGE_MONTHS, MAX_AGE_MONTHS)
        return None

    sex = Sex(sex)
    if curves is None:
        curves = REFERENCE_CURVES
    curve = curves.get(sex.value)
    if not curve:
        logger.warning("No BMI-for-age reference curve for %s", sex.value)
        return None

    lms = interpolate_lms(curve, total_months)
    if lms is None:
        logger.warning("Could not interpolate LMS for %s at %s months", sex.value, total_months)
        return None

    bmi = compute_bmi(weight_kg, height_cm)
    z = z_score(bmi, lms)
    percentile = percentile_from_z(z)

    height_m = height_cm / 100
    return PediatricResult(
        measurement=Measurement(weight_kg=weight_kg, height_cm=height_cm),
        sex=sex,
        age_months=total_months,
        bmi=bmi,
        z_score=round_half_away(z, 2),
        percentile=percentile,
        category=classify_child(percentile),
        median_bmi=round_half_away(lms.M, 1),
        ideal_weight=round_half_away(lms.M * height_m * height_m, 1),
        gauge_position=gauge_position(bmi),
        notes=(Detail(text=ADVISORY_NOTE, level=DetailLevel.WARNING),),
    )
