"""
Adult threshold tables loaded from knowledge/thresholds/adult.yaml.

The registry loads the YAML once per process, validates the ordering
invariants the first-match lookups depend on, and exposes the tables as
tuples of frozen models.
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

import knowledge
from bodymass.models import AgeRange, BmiCategory, Sex, WaistCutoffs

logger = logging.getLogger(__name__)

THRESHOLDS_ENV_VAR = "BODYMASS_THRESHOLDS"
DEFAULT_THRESHOLDS_PATH = Path(knowledge.__file__).parent / "thresholds" / "adult.yaml"

# Age-band coverage the adult lookup promises
MIN_ADULT_AGE = 18
MAX_ADULT_AGE = 999


class ThresholdConfigError(ValueError):
    """Raised when the threshold YAML is missing or breaks a table invariant."""


class ThresholdRegistry:
    """
    Process-wide access to the adult classification tables.

    Use ThresholdRegistry.get() rather than constructing directly.
    """

    _instance: "ThresholdRegistry | None" = None

    @classmethod
    def get(cls) -> "ThresholdRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reload(cls):
        """Force reload of threshold data."""
        cls._instance = None

    def __init__(self, path: Path | None = None):
        if path is None:
            path = Path(os.environ.get(THRESHOLDS_ENV_VAR) or DEFAULT_THRESHOLDS_PATH)
        self.path = path
        self._load()

    def _load(self):
        """Load and validate tables from YAML."""
        if not self.path.exists():
            raise ThresholdConfigError(f"Threshold file not found: {self.path}")

        with open(self.path) as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded thresholds from %s", self.path)

        try:
            self.categories: tuple[BmiCategory, ...] = tuple(
                BmiCategory(**entry) for entry in data.get("categories", [])
            )
            self.age_ranges: tuple[AgeRange, ...] = tuple(
                AgeRange(**entry) for entry in data.get("age_ranges", [])
            )
            self.waist: dict[Sex, WaistCutoffs] = {
                Sex(sex): WaistCutoffs(**cutoffs)
                for sex, cutoffs in (data.get("waist") or {}).items()
            }
        except (ValidationError, TypeError, ValueError) as e:
            raise ThresholdConfigError(f"Invalid threshold file {self.path}: {e}") from e

        _check_categories(self.categories)
        _check_age_ranges(self.age_ranges)
        _check_waist(self.waist)


def _check_categories(categories: tuple[BmiCategory, ...]) -> None:
    """Bands must partition [0, inf) in ascending order."""
    if not categories:
        raise ThresholdConfigError("No BMI categories defined")
    if categories[0].min != 0:
        raise ThresholdConfigError("First BMI category must start at 0")
    if not math.isinf(categories[-1].max):
        raise ThresholdConfigError("Last BMI category must be unbounded above")

    for lower, upper in zip(categories, categories[1:]):
        if lower.max != upper.min:
            raise ThresholdConfigError(
                f"BMI categories {lower.key.value} and {upper.key.value} are not contiguous"
            )
    for category in categories:
        if category.min >= category.max:
            raise ThresholdConfigError(f"BMI category {category.key.value} is empty")


def _check_age_ranges(age_ranges: tuple[AgeRange, ...]) -> None:
    """Bands must cover MIN_ADULT_AGE..MAX_ADULT_AGE contiguously."""
    if not age_ranges:
        raise ThresholdConfigError("No age ranges defined")
    if age_ranges[0].min_age != MIN_ADULT_AGE or age_ranges[-1].max_age != MAX_ADULT_AGE:
        raise ThresholdConfigError(
            f"Age ranges must cover {MIN_ADULT_AGE}-{MAX_ADULT_AGE}"
        )

    for lower, upper in zip(age_ranges, age_ranges[1:]):
        if upper.min_age != lower.max_age + 1:
            raise ThresholdConfigError(
                f"Age ranges {lower.min_age}-{lower.max_age} and "
                f"{upper.min_age}-{upper.max_age} overlap or leave a gap"
            )
    for band in age_ranges:
        if band.low > band.high:
            raise ThresholdConfigError(
                f"Age range {band.min_age}-{band.max_age} has low > high"
            )


def _check_waist(waist: dict[Sex, WaistCutoffs]) -> None:
    for sex in Sex:
        cutoffs = waist.get(sex)
        if cutoffs is None:
            raise ThresholdConfigError(f"No waist cutoffs for {sex.value}")
        if cutoffs.elevated_from > cutoffs.high_above:
            raise ThresholdConfigError(f"Waist cutoffs for {sex.value} are reversed")
