"""
BMI calculation engines.
"""

from .rounding import round_half_away
from .thresholds import ThresholdRegistry, ThresholdConfigError
from .calculator import (
    compute_bmi,
    classify,
    age_adjusted_range,
    age_interpretation,
    gender_context,
    evaluate_waist,
    gauge_position,
    ideal_weight_range,
    assess_adult,
)
from .pediatric import (
    interpolate_lms,
    z_score,
    percentile_from_z,
    classify_child,
    calculate_child_bmi,
)

__all__ = [
    "round_half_away",
    "ThresholdRegistry",
    "ThresholdConfigError",
    "compute_bmi",
    "classify",
    "age_adjusted_range",
    "age_interpretation",
    "gender_context",
    "evaluate_waist",
    "gauge_position",
    "ideal_weight_range",
    "assess_adult",
    "interpolate_lms",
    "z_score",
    "percentile_from_z",
    "classify_child",
    "calculate_child_bmi",
]
