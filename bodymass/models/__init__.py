"""
Data models for bodymass.
"""

from .assessment import (
    Sex,
    BmiCategoryKey,
    ChildCategoryKey,
    WaistRiskLevel,
    DetailLevel,
    BmiCategory,
    AgeRange,
    WaistCutoffs,
    Measurement,
    IdealWeightRange,
    WaistRiskResult,
    Detail,
    ChildCategory,
    AdultAssessment,
    PediatricResult,
)

__all__ = [
    "Sex",
    "BmiCategoryKey",
    "ChildCategoryKey",
    "WaistRiskLevel",
    "DetailLevel",
    "BmiCategory",
    "AgeRange",
    "WaistCutoffs",
    "Measurement",
    "IdealWeightRange",
    "WaistRiskResult",
    "Detail",
    "ChildCategory",
    "AdultAssessment",
    "PediatricResult",
]
