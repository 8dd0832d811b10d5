"""
Core data models for bodymass.

These Pydantic models define the structured results returned by the
calculation engines. All of them are frozen: a result is computed fresh
per call and never mutated afterwards.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class BmiCategoryKey(str, Enum):
    SEVERE_UNDERWEIGHT = "severe-underweight"
    UNDERWEIGHT = "underweight"
    MILD_UNDERWEIGHT = "mild-underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE_1 = "obese1"
    OBESE_2 = "obese2"
    OBESE_3 = "obese3"


class ChildCategoryKey(str, Enum):
    UNDERWEIGHT = "child-underweight"
    NORMAL = "child-normal"
    OVERWEIGHT = "child-overweight"
    OBESE = "child-obese"


class WaistRiskLevel(str, Enum):
    LOW = "low"
    ELEVATED = "elevated"
    HIGH = "high"


class DetailLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


# =============================================================================
# THRESHOLD TABLE ENTRIES (for thresholds/adult.yaml)
# =============================================================================


class BmiCategory(BaseModel):
    """An adult BMI band. min is inclusive, max is exclusive."""
    model_config = ConfigDict(frozen=True)

    key: BmiCategoryKey
    label: str
    min: float = Field(ge=0.0, description="Inclusive lower bound")
    max: float = Field(description="Exclusive upper bound (inf for the last band)")


class AgeRange(BaseModel):
    """Recommended BMI range for an inclusive interval of ages in years."""
    model_config = ConfigDict(frozen=True)

    min_age: int
    max_age: int
    low: float
    high: float


class WaistCutoffs(BaseModel):
    """Waist circumference cutoffs (cm) for one sex."""
    model_config = ConfigDict(frozen=True)

    elevated_from: float = Field(gt=0, description="Smallest waist rated elevated")
    high_above: float = Field(gt=0, description="Waist above this is rated high")


# =============================================================================
# RESULTS
# =============================================================================


class Measurement(BaseModel):
    """Caller-supplied anthropometrics, echoed back in results."""
    model_config = ConfigDict(frozen=True)

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)


class IdealWeightRange(BaseModel):
    """Weight bounds implied by the adult normal BMI band."""
    model_config = ConfigDict(frozen=True)

    min_kg: float
    max_kg: float


class WaistRiskResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: WaistRiskLevel
    label: str
    description: str
    waist_cm: float
    sex: Sex


class Detail(BaseModel):
    """One line of additional interpretation shown under a result."""
    model_config = ConfigDict(frozen=True)

    text: str
    level: DetailLevel = DetailLevel.INFO


class ChildCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: ChildCategoryKey
    label: str


class AdultAssessment(BaseModel):
    """Everything the adult path derives from one set of inputs."""
    model_config = ConfigDict(frozen=True)

    measurement: Measurement
    bmi: float
    category: BmiCategory
    gauge_position: float = Field(ge=0, le=100)
    ideal_weight: IdealWeightRange
    age_years: float | None = None
    sex: Sex | None = None
    waist: WaistRiskResult | None = None
    details: tuple[Detail, ...] = ()


class PediatricResult(BaseModel):
    """BMI-for-age result for a child aged 2-20 years."""
    model_config = ConfigDict(frozen=True)

    measurement: Measurement
    sex: Sex
    age_months: float = Field(ge=24, le=240)
    bmi: float
    z_score: float = Field(description="Rounded to 2 decimals")
    percentile: float = Field(ge=0, le=100, description="Rounded to 1 decimal")
    category: ChildCategory
    median_bmi: float = Field(description="Reference median BMI at this age")
    ideal_weight: float = Field(description="Weight (kg) at the median BMI for this height")
    gauge_position: float = Field(ge=0, le=100)
    notes: tuple[Detail, ...] = ()
