"""Pydantic schemas for the parsed report record."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from invest_report.schemas.metadata import NewsItem
from invest_report.topics import TopicType

Opinion = Literal["BUY", "HOLD", "SELL"]


class _FrozenCamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SwotAnalysis(_FrozenCamelModel):
    """SWOT item lists. Empty for non-company topics."""

    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    opportunities: list[str] = Field(default_factory=list)
    threats: list[str] = Field(default_factory=list)


class Recommendation(_FrozenCamelModel):
    """Investment opinion block."""

    opinion: Opinion = "HOLD"
    target_price: str = "-"
    current_price: str = "-"
    upside: str | None = Field(
        default=None,
        description="Signed percentage, present only when both prices parsed",
    )
    horizon: str = "12개월"
    reason: str | None = None


class ParsedReport(_FrozenCamelModel):
    """Structured record built from one generated report."""

    title: str = ""
    topic_type: TopicType

    # Extracted from the text
    summary: str = ""
    ai_summary: str = ""
    key_points: list[str] = Field(default_factory=list)
    swot: SwotAnalysis = Field(default_factory=SwotAnalysis)
    recommendation: Recommendation = Field(default_factory=Recommendation)
    risks: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    additional_analysis: str | None = None
    pending_sections: list[str] = Field(
        default_factory=list,
        description="Sections whose empty list was replaced by the placeholder",
    )

    # Derived from metadata.stock_data
    stock_metrics: dict[str, str] = Field(default_factory=dict)

    # Merged verbatim from the metadata bundle
    news: list[NewsItem] = Field(default_factory=list)
    comparative_stocks: list[dict[str, Any]] = Field(default_factory=list)
    sector_heatmap: Any = None
    file_sources: list[Any] = Field(default_factory=list)
    data_quality: float | None = None
    news_count: int | None = None
    sentiment: str | None = None
    sentiment_score: dict[str, float] | float | None = None
    generated_at: str | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys, ready for ``json.dumps``."""
        return self.model_dump(mode="json", by_alias=True)
