"""
JSON exporter for bodymass.

Exports assessment results as clean, human-readable JSON.
"""

from __future__ import annotations

import json
from pathlib import Path

from bodymass.models import AdultAssessment, PediatricResult


def export_json(
    result: AdultAssessment | PediatricResult,
    output_path: Path | None = None,
    indent: int = 2,
    include_nulls: bool = False,
) -> str:
    """
    Export a result to JSON format.

    Args:
        result: The adult or pediatric result to export
        output_path: Optional path to write the JSON file
        indent: JSON indentation level
        include_nulls: Whether to include null values in output

    Returns:
        JSON string representation of the result
    """
    data = result.model_dump(mode="json", exclude_none=not include_nulls)
    json_str = json.dumps(data, indent=indent)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str)

    return json_str
