"""SWOT sub-section extraction for company reports."""

from __future__ import annotations

from invest_report.config.settings import get_settings
from invest_report.parsing.sections import extract_list_items, find_heading, index_headings
from invest_report.schemas.report import SwotAnalysis

# Korean sub-heading label -> SwotAnalysis field
SWOT_LABELS = {
    "strengths": "강점",
    "weaknesses": "약점",
    "opportunities": "기회",
    "threats": "위협",
}

# Category headings that may sit at section depth inside the SWOT section
SWOT_LABEL_PATTERN = "|".join(SWOT_LABELS.values())


def extract_swot(swot_body: str | None) -> SwotAnalysis:
    """Extract the four SWOT item lists from the body of the SWOT section.

    Each category is looked up on its own, so the sub-headings may come in
    any order; a missing sub-heading leaves that category empty.
    """
    if not swot_body:
        return SwotAnalysis()

    settings = get_settings()
    headings = index_headings(swot_body)

    categories: dict[str, list[str]] = {}
    for field_name, label in SWOT_LABELS.items():
        heading = find_heading(headings, label, max_depth=6)
        categories[field_name] = extract_list_items(
            heading.body if heading else None,
            max_items=settings.swot_items_limit,
            min_length=settings.min_item_length,
        )

    return SwotAnalysis(**categories)
