"""Pydantic schemas for the metadata bundle sent alongside a raw report."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts both camelCase (wire) and snake_case (Python) keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class StockSnapshot(_CamelModel):
    """Quote snapshot for the analysed company."""

    current_price: float | None = None
    target_price: float | None = None
    pe: float | None = Field(default=None, description="Price-to-earnings ratio")
    eps: float | None = Field(default=None, description="Earnings per share (KRW)")
    market_cap: float | None = Field(default=None, description="Market capitalization (KRW)")
    fifty_two_week_high: float | None = None
    fifty_two_week_low: float | None = None
    source: str | None = None
    warning: str | None = None


class NewsItem(_CamelModel):
    """A news article the report was generated from."""

    title: str = ""
    url: str = ""
    date: str | None = None
    relevance: float | None = None


class MetadataBundle(_CamelModel):
    """Side-channel data produced next to the report text.

    Every field is optional. The parser merges these values into its output
    as-is and never checks them against each other.
    """

    stock_data: StockSnapshot | None = None
    data_quality: float | None = Field(default=None, description="Data quality score 0-100")
    news_count: int | None = None
    sentiment: str | None = Field(default=None, description="Sentiment label, e.g. 긍정적")
    sentiment_score: dict[str, float] | float | None = None
    news_with_links: list[NewsItem] = Field(default_factory=list)
    comparative_stocks: list[dict[str, Any]] = Field(default_factory=list)
    sector_heatmap: Any = None
    file_sources: list[Any] = Field(default_factory=list)
    timestamp: str | None = None
