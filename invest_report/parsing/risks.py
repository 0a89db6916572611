"""Risk section extraction."""

from __future__ import annotations

from invest_report.config.settings import get_settings
from invest_report.parsing.sections import extract_list_items
from invest_report.topics import TopicType, coerce_topic_type

RISK_HEADING_LABELS = {
    TopicType.COMPANY: "리스크 요인",
    TopicType.ECONOMY: "경제 리스크",
    TopicType.SECTOR: "산업 리스크",
}


def extract_risks(risk_body: str | None) -> list[str]:
    """Bullet items of the risk section, same rules for every topic type."""
    settings = get_settings()
    return extract_list_items(
        risk_body,
        max_items=settings.risks_limit,
        min_length=settings.min_item_length,
    )


def risk_heading_label(topic_type: TopicType | str) -> str:
    """Display label of the risk section; presentation only."""
    return RISK_HEADING_LABELS[coerce_topic_type(topic_type)]
