"""Display formatting of stock snapshot metrics.

Works only on ``MetadataBundle.stock_data``; nothing here reads the report
text.
"""

from __future__ import annotations

from invest_report.schemas.metadata import StockSnapshot

TRILLION = 1_000_000_000_000
HUNDRED_MILLION = 100_000_000
MISSING = "데이터 없음"


def format_price(price: float | None) -> str:
    """Format a KRW price, e.g. ``71500.4 -> '71,500원'``."""
    if not price:
        return MISSING
    return f"{round(price):,}원"


def format_market_cap(market_cap: float | None) -> str:
    """Format a KRW market capitalization in 조원 / 억원 units."""
    if not market_cap:
        return MISSING
    hundred_millions = round(market_cap / HUNDRED_MILLION)
    # Pick the unit after rounding so 9,999.99억 reads as 조
    if hundred_millions >= TRILLION // HUNDRED_MILLION:
        return f"{market_cap / TRILLION:.1f}조원"
    if market_cap >= HUNDRED_MILLION:
        return f"{hundred_millions}억원"
    return f"{round(market_cap):,}원"


def derive_stock_metrics(stock_data: StockSnapshot | None) -> dict[str, str]:
    """Display strings for PER, EPS, market cap and the 52-week range.

    Returns:
        Dict with any of ``per``, ``eps``, ``market_cap``, ``week52_high``,
        ``week52_low``. Values missing from the snapshot are left out, and
        no snapshot gives an empty dict.
    """
    if stock_data is None:
        return {}

    metrics: dict[str, str] = {}
    if stock_data.pe is not None:
        metrics["per"] = f"{stock_data.pe:.1f}"
    if stock_data.eps is not None:
        metrics["eps"] = f"{round(stock_data.eps):,}원"
    if stock_data.market_cap:
        metrics["market_cap"] = format_market_cap(stock_data.market_cap)
    if stock_data.fifty_two_week_high:
        metrics["week52_high"] = format_price(stock_data.fifty_two_week_high)
    if stock_data.fifty_two_week_low:
        metrics["week52_low"] = format_price(stock_data.fifty_two_week_low)
    return metrics
