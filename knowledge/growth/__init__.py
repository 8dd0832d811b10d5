"""
Growth reference curves.
"""

from .cdc_2000 import (
    BMI_FOR_AGE_MALE,
    BMI_FOR_AGE_FEMALE,
    REFERENCE_CURVES,
    LmsPoint,
    LmsParams,
    build_curve,
)

__all__ = [
    "BMI_FOR_AGE_MALE",
    "BMI_FOR_AGE_FEMALE",
    "REFERENCE_CURVES",
    "LmsPoint",
    "LmsParams",
    "build_curve",
]
