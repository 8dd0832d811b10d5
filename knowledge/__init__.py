"""
Body mass reference knowledge.

Contains:
- Adult classification thresholds (thresholds/adult.yaml)
- Pediatric growth reference curves (CDC 2000 BMI-for-age)
"""
