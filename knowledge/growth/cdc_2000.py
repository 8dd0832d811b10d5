"""
CDC 2000 BMI-for-age reference curves for the LMS method.

Reference: https://www.cdc.gov/growthcharts/

The LMS method expresses the BMI distribution at each age as:
- L (lambda): Box-Cox power transformation
- M (mu): Median
- S (sigma): Coefficient of variation

The curves cover 24-240 months (BMI-for-age is only defined after 2 years).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class LmsPoint:
    """A single calibration point on a growth reference curve."""
    age_months: float
    L: float
    M: float
    S: float


@dataclass(frozen=True)
class LmsParams:
    """LMS parameters interpolated at a specific age."""
    L: float
    M: float
    S: float


# Format: age_months -> (L, M, S)

# BMI-for-age, Males, 24-240 months
BMI_FOR_AGE_MALE: dict[int, tuple[float, float, float]] = {
    24: (-0.7766, 16.42, 0.0861),
    36: (-1.2236, 15.79, 0.0823),
    48: (-1.4997, 15.48, 0.0839),
    60: (-1.6315, 15.34, 0.0885),
    72: (-1.6623, 15.32, 0.0950),
    84: (-1.6293, 15.44, 0.1024),
    96: (-1.5635, 15.72, 0.1102),
    108: (-1.4867, 16.15, 0.1178),
    120: (-1.4143, 16.72, 0.1250),
    132: (-1.3563, 17.44, 0.1311),
    144: (-1.3159, 18.30, 0.1360),
    156: (-1.2932, 19.27, 0.1394),
    168: (-1.2865, 20.29, 0.1413),
    180: (-1.2926, 21.29, 0.1417),
    192: (-1.3074, 22.21, 0.1407),
    204: (-1.3268, 23.02, 0.1388),
    216: (-1.3467, 23.69, 0.1364),
    228: (-1.3651, 24.22, 0.1339),
    240: (-1.3815, 24.63, 0.1317),
}

# BMI-for-age, Females, 24-240 months
BMI_FOR_AGE_FEMALE: dict[int, tuple[float, float, float]] = {
    24: (-0.6075, 16.13, 0.0917),
    36: (-0.9803, 15.58, 0.0890),
    48: (-1.1963, 15.29, 0.0903),
    60: (-1.2959, 15.17, 0.0942),
    72: (-1.3224, 15.17, 0.0997),
    84: (-1.3064, 15.32, 0.1063),
    96: (-1.2716, 15.59, 0.1132),
    108: (-1.2353, 16.00, 0.1200),
    120: (-1.2062, 16.53, 0.1264),
    132: (-1.1882, 17.20, 0.1319),
    144: (-1.1814, 18.00, 0.1361),
    156: (-1.1839, 18.88, 0.1389),
    168: (-1.1929, 19.79, 0.1401),
    180: (-1.2053, 20.66, 0.1399),
    192: (-1.2183, 21.43, 0.1388),
    204: (-1.2301, 22.07, 0.1373),
    216: (-1.2399, 22.56, 0.1358),
    228: (-1.2475, 22.93, 0.1346),
    240: (-1.2531, 23.20, 0.1338),
}


def build_curve(table: dict[int, tuple[float, float, float]]) -> tuple[LmsPoint, ...]:
    """Turn an age -> (L, M, S) table into a curve ordered by age."""
    return tuple(
        LmsPoint(age_months=age, L=L, M=M, S=S)
        for age, (L, M, S) in sorted(table.items())
    )


# Keyed by sex value ("male" / "female")
REFERENCE_CURVES: Mapping[str, tuple[LmsPoint, ...]] = MappingProxyType({
    "male": build_curve(BMI_FOR_AGE_MALE),
    "female": build_curve(BMI_FOR_AGE_FEMALE),
})
