"""
Adult BMI calculations.

BMI arithmetic, WHO category lookup, age- and sex-adjusted interpretation,
waist circumference risk, gauge placement, and the ideal weight range.

All functions are pure. Table lookups read the process-wide
ThresholdRegistry unless a registry is passed in explicitly.
"""

from __future__ import annotations

import math

from bodymass.engines.rounding import round_half_away
from bodymass.engines.thresholds import ThresholdRegistry
from bodymass.models import (
    AdultAssessment,
    AgeRange,
    BmiCategory,
    Detail,
    DetailLevel,
    IdealWeightRange,
    Measurement,
    Sex,
    WaistRiskLevel,
    WaistRiskResult,
)

# Visual gauge spans this BMI domain
GAUGE_MIN_BMI = 12.0
GAUGE_MAX_BMI = 45.0

# Adult normal band used for the ideal weight range
NORMAL_BMI_LOW = 18.5
NORMAL_BMI_HIGH = 24.9

SENIOR_AGE = 65
SENIOR_NOTE = (
    "For people over 65, a slightly higher BMI (23-30) is considered optimal "
    "and is associated with lower mortality."
)

WAIST_LABELS = {
    WaistRiskLevel.LOW: "Low risk",
    WaistRiskLevel.ELEVATED: "Elevated risk",
    WaistRiskLevel.HIGH: "High risk",
}

WAIST_DETAIL_LEVELS = {
    WaistRiskLevel.LOW: DetailLevel.INFO,
    WaistRiskLevel.ELEVATED: DetailLevel.WARNING,
    WaistRiskLevel.HIGH: DetailLevel.DANGER,
}


def _registry(registry: ThresholdRegistry | None) -> ThresholdRegistry:
    return registry if registry is not None else ThresholdRegistry.get()


def _height_m(height_cm: float) -> float:
    if not math.isfinite(height_cm) or height_cm <= 0:
        raise ValueError(f"Height must be a positive number of cm, got {height_cm!r}")
    return height_cm / 100


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI from weight and height.

    Args:
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters (must be > 0)

    Returns:
        BMI rounded to 1 decimal, ties away from zero
    """
    if not math.isfinite(weight_kg):
        raise ValueError(f"Weight must be a finite number of kg, got {weight_kg!r}")
    height_m = _height_m(height_cm)
    return round_half_away(weight_kg / (height_m * height_m), 1)


def classify(bmi: float, registry: ThresholdRegistry | None = None) -> BmiCategory:
    """
    Get the WHO category for a BMI.

    Bands are scanned in ascending order and the first one whose upper bound
    exceeds the BMI wins, so the table must stay sorted.
    """
    categories = _registry(registry).categories
    for category in categories:
        if bmi < category.max:
            return category
    return categories[-1]


def age_adjusted_range(
    age_years: float,
    registry: ThresholdRegistry | None = None,
) -> AgeRange | None:
    """Recommended BMI range for an adult age, or None below 18 / above 999."""
    for band in _registry(registry).age_ranges:
        if band.min_age <= age_years <= band.max_age:
            return band
    return None


def age_interpretation(
    bmi: float,
    age_years: float,
    registry: ThresholdRegistry | None = None,
) -> str:
    """Compare a BMI with the recommended range for the age ("" if none applies)."""
    band = age_adjusted_range(age_years, registry)
    if band is None:
        return ""

    prefix = f"For your age ({age_years:g} years)"
    recommended = f"{band.low:g}-{band.high:g}"
    if band.low <= bmi <= band.high:
        return f"{prefix} your BMI is within the recommended range of {recommended}."
    elif bmi < band.low:
        return f"{prefix} the recommended BMI is {recommended}. Your value is below this range."
    else:
        return f"{prefix} the recommended BMI is {recommended}. Your value is above this range."


def gender_context(bmi: float, sex: Sex | str) -> str:
    """
    Sex-specific remark for BMIs near the optimum.

    Only a few narrow bands get a remark; outside them the result is "".
    """
    if sex == Sex.FEMALE:
        if 20 <= bmi <= 22:
            return "Your BMI is in the optimal range for women (20-22)."
        elif 18.5 <= bmi < 20:
            return "Your BMI is normal; for women the optimum is around 20-22."
        elif 22 < bmi < 25:
            return "Your BMI is normal. The optimal value for women is usually given as around 20-22."
    elif sex == Sex.MALE:
        if 22 <= bmi <= 25:
            return "Your BMI is in the optimal range for men (22-25)."
        elif 18.5 <= bmi < 22:
            return "Your BMI is normal; for men the optimum is around 22-25."
        elif 25 < bmi < 27:
            return "Your BMI is slightly above the optimum for men (22-25)."
    return ""


def evaluate_waist(
    waist_cm: float,
    sex: Sex | str,
    registry: ThresholdRegistry | None = None,
) -> WaistRiskResult:
    """
    Rate waist circumference risk (WHO European thresholds).

    The elevated band includes both of its edges.
    """
    sex = Sex(sex)
    cutoffs = _registry(registry).waist[sex]
    low_edge = f"{cutoffs.elevated_from:g}"
    high_edge = f"{cutoffs.high_above:g}"

    if waist_cm < cutoffs.elevated_from:
        level = WaistRiskLevel.LOW
        description = f"Waist circumference is within the normal range (below {low_edge} cm)."
    elif waist_cm <= cutoffs.high_above:
        level = WaistRiskLevel.ELEVATED
        description = f"A waist circumference of {low_edge}-{high_edge} cm indicates an elevated health risk."
    else:
        level = WaistRiskLevel.HIGH
        description = f"A waist circumference above {high_edge} cm indicates a substantially elevated health risk."

    return WaistRiskResult(
        level=level,
        label=WAIST_LABELS[level],
        description=description,
        waist_cm=waist_cm,
        sex=sex,
    )


def gauge_position(bmi: float) -> float:
    """Map BMI 12-45 onto 0-100 (percent), clamped."""
    pos = (bmi - GAUGE_MIN_BMI) / (GAUGE_MAX_BMI - GAUGE_MIN_BMI) * 100
    return max(0.0, min(100.0, pos))


def ideal_weight_range(height_cm: float) -> IdealWeightRange:
    """Weights (kg) at BMI 18.5 and 24.9 for this height."""
    height_m = _height_m(height_cm)
    h_sq = height_m * height_m
    return IdealWeightRange(
        min_kg=round_half_away(NORMAL_BMI_LOW * h_sq, 1),
        max_kg=round_half_away(NORMAL_BMI_HIGH * h_sq, 1),
    )


def assess_adult(
    weight_kg: float,
    height_cm: float,
    age_years: float | None = None,
    sex: Sex | str | None = None,
    waist_cm: float | None = None,
    registry: ThresholdRegistry | None = None,
) -> AdultAssessment:
    """
    Full adult assessment.

    Optional inputs that are missing simply contribute no details. Waist
    risk needs a sex to pick the cutoffs.
    """
    registry = _registry(registry)
    sex = Sex(sex) if sex is not None else None

    bmi = compute_bmi(weight_kg, height_cm)
    details: list[Detail] = []

    if age_years is not None:
        age_text = age_interpretation(bmi, age_years, registry)
        if age_text:
            details.append(Detail(text=age_text))

    if sex is not None:
        sex_text = gender_context(bmi, sex)
        if sex_text:
            details.append(Detail(text=sex_text))

    waist = None
    if waist_cm is not None and sex is not None:
        waist = evaluate_waist(waist_cm, sex, registry)
        details.append(Detail(
            text=f"Waist circumference ({waist_cm:g} cm): {waist.description}",
            level=WAIST_DETAIL_LEVELS[waist.level],
        ))

    if age_years is not None and age_years >= SENIOR_AGE:
        details.append(Detail(text=SENIOR_NOTE))

    return AdultAssessment(
        measurement=Measurement(weight_kg=weight_kg, height_cm=height_cm),
        bmi=bmi,
        category=classify(bmi, registry),
        gauge_position=gauge_position(bmi),
        ideal_weight=ideal_weight_range(height_cm),
        age_years=age_years,
        sex=sex,
        waist=waist,
        details=tuple(details),
    )
