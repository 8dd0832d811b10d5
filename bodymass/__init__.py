"""
bodymass - BMI and body-composition risk calculator.

Adult BMI classification with age, sex and waist adjustments, plus
CDC BMI-for-age percentiles for children aged 2-20.
"""

__version__ = "0.1.0"
