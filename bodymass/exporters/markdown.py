"""
Markdown exporter for bodymass.

Exports assessment results as a short human-readable report.
"""

from __future__ import annotations

from pathlib import Path

from bodymass.models import AdultAssessment, Detail, DetailLevel, PediatricResult

_LEVEL_PREFIX = {
    DetailLevel.INFO: "",
    DetailLevel.WARNING: "**Warning:** ",
    DetailLevel.DANGER: "**Risk:** ",
}


def export_markdown(
    result: AdultAssessment | PediatricResult,
    output_path: Path | None = None,
) -> str:
    """
    Export a result to Markdown format.

    Args:
        result: The adult or pediatric result to export
        output_path: Optional path to write the Markdown file

    Returns:
        Markdown string representation of the result
    """
    if isinstance(result, PediatricResult):
        lines = _pediatric_lines(result)
    else:
        lines = _adult_lines(result)

    markdown = "\n".join(lines) + "\n"

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown)

    return markdown


def _adult_lines(result: AdultAssessment) -> list[str]:
    m = result.measurement
    lines = [
        "# BMI Assessment",
        "",
        f"**BMI:** {result.bmi:.1f}",
        f"**Category:** {result.category.label}",
        "",
        "## Measurements",
        "",
        f"- **Weight:** {m.weight_kg:g} kg",
        f"- **Height:** {m.height_cm:g} cm",
    ]
    if result.age_years is not None:
        lines.append(f"- **Age:** {result.age_years:g} years")
    if result.sex is not None:
        lines.append(f"- **Sex:** {result.sex.value.title()}")
    if result.waist is not None:
        lines.append(f"- **Waist:** {result.waist.waist_cm:g} cm ({result.waist.label})")
    lines.append("")

    ideal = result.ideal_weight
    lines.append(f"**Healthy weight for your height:** {ideal.min_kg:.1f}-{ideal.max_kg:.1f} kg")
    lines.extend(_detail_section("Interpretation", result.details))
    return lines


def _pediatric_lines(result: PediatricResult) -> list[str]:
    m = result.measurement
    years, months = divmod(result.age_months, 12)
    lines = [
        "# Child BMI-for-age Assessment",
        "",
        f"**BMI:** {result.bmi:.1f}",
        f"**Category:** {result.category.label}",
        "",
        "## Measurements",
        "",
        f"- **Weight:** {m.weight_kg:g} kg",
        f"- **Height:** {m.height_cm:g} cm",
        f"- **Age:** {int(years)} years {months:g} months",
        f"- **Sex:** {result.sex.value.title()}",
        "",
        "## Growth Reference",
        "",
        f"- **Percentile:** {result.percentile:.1f}",
        f"- **Z-score:** {result.z_score:.2f}",
        f"- **Median BMI at this age:** {result.median_bmi:.1f}",
        f"- **Weight at median BMI:** {result.ideal_weight:.1f} kg",
        "",
        f"A percentile of {result.percentile:.1f} means that {result.percentile:.1f}% of "
        "children of the same age and sex have a lower BMI.",
    ]
    lines.extend(_detail_section("Notes", result.notes))
    return lines


def _detail_section(title: str, details: tuple[Detail, ...]) -> list[str]:
    if not details:
        return []
    lines = ["", f"## {title}", ""]
    for detail in details:
        lines.append(f"- {_LEVEL_PREFIX[detail.level]}{detail.text}")
    return lines
