"""Report Assembler.

Turns the raw markdown report returned by the generation service into a
``ParsedReport``: runs every section extractor against a single heading
index, gates the company-only sections on the topic type, substitutes
placeholders for empty lists and merges the metadata bundle.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from invest_report.config.logging_config import get_logger
from invest_report.config.settings import get_settings
from invest_report.parsing.recommendation import extract_recommendation
from invest_report.parsing.risks import extract_risks
from invest_report.parsing.sections import (
    Heading,
    clean_summary,
    extract_list_items,
    extract_section,
    index_headings,
)
from invest_report.parsing.sources import extract_sources
from invest_report.parsing.stock_metrics import derive_stock_metrics
from invest_report.parsing.swot import SWOT_LABEL_PATTERN, extract_swot
from invest_report.schemas.metadata import MetadataBundle
from invest_report.schemas.report import ParsedReport, Recommendation, SwotAnalysis
from invest_report.topics import TopicType, coerce_topic_type, title_suffix

logger = get_logger("assembler")

# (expected ordinal, heading label pattern)
SUMMARY_SECTION = (1, r"요약")
KEY_POINTS_SECTION = (2, r"(?:핵심|주요).*?(?:포인트|트렌드|지표)")
SWOT_SECTION = (3, r"SWOT")
RISKS_SECTION = (4, r"리스크")
RECOMMENDATION_SECTION = (5, r"투자\s*의견")
INVESTOR_VIEW_SECTION = (6, r"투자자\s*관점")
ADDITIONAL_SECTION = (7, r"추가\s*분석")


def assemble_report(
    raw_text: str | None,
    topic_type: TopicType | str,
    metadata: MetadataBundle | Mapping[str, Any] | None = None,
    topic: str = "",
    horizon: str | None = None,
) -> ParsedReport:
    """Parse a generated report into a structured record.

    Never raises: missing sections produce their empty defaults and
    unusable metadata fields are dropped.

    Args:
        raw_text: Markdown report from the generation service.
        topic_type: ``company``, ``economy`` or ``sector``.
        metadata: Metadata bundle (model or camelCase/snake_case dict).
        topic: Search topic used in the report title.
        horizon: Overrides the configured investment horizon.

    Returns:
        ParsedReport.
    """
    settings = get_settings()
    text = raw_text or ""
    topic_type = coerce_topic_type(topic_type)
    bundle = coerce_metadata(metadata)
    headings = index_headings(text)
    is_company = topic_type == TopicType.COMPANY

    summary = clean_summary(
        _section(text, headings, SUMMARY_SECTION),
        max_chars=settings.summary_max_chars,
    )
    sources = extract_sources(text)

    additional = _section(text, headings, ADDITIONAL_SECTION)
    additional_analysis = additional.strip() if additional else None

    key_points = extract_list_items(
        _section(text, headings, KEY_POINTS_SECTION),
        max_items=settings.key_points_limit,
        min_length=settings.min_item_length,
    )

    swot = SwotAnalysis()
    recommendation = Recommendation(horizon=horizon or settings.recommendation_horizon)
    if is_company:
        swot = extract_swot(
            _section(text, headings, SWOT_SECTION, continue_pattern=SWOT_LABEL_PATTERN),
        )
        recommendation = extract_recommendation(
            _section(text, headings, RECOMMENDATION_SECTION),
            horizon=horizon,
        )

    risks = extract_risks(_section(text, headings, RISKS_SECTION))

    stock_metrics: dict[str, str] = {}
    if is_company and bundle.stock_data is not None:
        stock_metrics = derive_stock_metrics(bundle.stock_data)

    key_points, risks, pending = apply_placeholders(key_points, risks)

    report = ParsedReport(
        title=f"{topic} {title_suffix(topic_type)}".strip(),
        topic_type=topic_type,
        summary=summary,
        ai_summary=extract_ai_summary(text, headings),
        key_points=key_points,
        swot=swot,
        recommendation=recommendation,
        risks=risks,
        sources=sources,
        additional_analysis=additional_analysis or None,
        pending_sections=pending,
        stock_metrics=stock_metrics,
        news=bundle.news_with_links,
        comparative_stocks=bundle.comparative_stocks,
        sector_heatmap=bundle.sector_heatmap,
        file_sources=bundle.file_sources,
        data_quality=bundle.data_quality,
        news_count=bundle.news_count,
        sentiment=bundle.sentiment,
        sentiment_score=bundle.sentiment_score,
        generated_at=bundle.timestamp,
    )

    logger.info(
        "report_assembled",
        topic_type=topic_type.value,
        key_points=len(key_points),
        risks=len(risks),
        sources=len(sources),
        opinion=recommendation.opinion,
        upside=recommendation.upside,
        pending=pending,
    )

    return report


def apply_placeholders(
    key_points: list[str],
    risks: list[str],
    placeholder: str | None = None,
) -> tuple[list[str], list[str], list[str]]:
    """Replace empty key point / risk lists with a single placeholder item.

    Returns:
        (key_points, risks, names of the substituted sections).
    """
    placeholder = placeholder or get_settings().pending_placeholder
    pending: list[str] = []

    if not key_points:
        key_points = [placeholder]
        pending.append("key_points")
    if not risks:
        risks = [placeholder]
        pending.append("risks")

    return key_points, risks, pending


def extract_ai_summary(text: str, headings: list[Heading] | None = None) -> str:
    """Short investor-facing summary.

    Prefers the investor perspective section, then the summary section,
    then the start of the report.
    """
    settings = get_settings()
    if headings is None:
        headings = index_headings(text)

    view = _section(text, headings, INVESTOR_VIEW_SECTION)
    if view:
        return _strip_markdown(view)[:settings.ai_summary_max_chars]

    summary = _section(text, headings, SUMMARY_SECTION)
    if summary:
        return _strip_markdown(summary)[:settings.ai_summary_fallback_chars]

    return text[:settings.ai_summary_fallback_chars]


def coerce_metadata(
    metadata: MetadataBundle | Mapping[str, Any] | None,
) -> MetadataBundle:
    """Validate the metadata bundle, dropping fields that fail validation."""
    if metadata is None:
        return MetadataBundle()
    if isinstance(metadata, MetadataBundle):
        return metadata
    if not isinstance(metadata, Mapping):
        logger.warning("metadata_ignored", type=type(metadata).__name__)
        return MetadataBundle()

    try:
        return MetadataBundle.model_validate(dict(metadata))
    except ValidationError as exc:
        logger.warning("metadata_invalid", errors=exc.error_count())

    valid: dict[str, Any] = {}
    for key, value in metadata.items():
        try:
            MetadataBundle.model_validate({key: value})
        except ValidationError:
            logger.warning("metadata_field_dropped", field=key)
            continue
        valid[key] = value
    return MetadataBundle.model_validate(valid)


def _section(
    text: str,
    headings: list[Heading],
    section: tuple[int, str],
    continue_pattern: str | None = None,
) -> str | None:
    number, label = section
    body = extract_section(
        text, number, label, headings=headings, continue_pattern=continue_pattern,
    )
    if body is None:
        logger.debug("section_not_found", label=label)
    return body


def _strip_markdown(text: str) -> str:
    return re.sub(r"[*#]", "", text.strip()).strip()
