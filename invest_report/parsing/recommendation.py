"""Investment opinion extraction for company reports.

Reads the ``투자 의견`` section body, e.g.::

    - 투자 등급: BUY
    - 목표 주가: 80,000원
    - 현재 주가: 60,000원
    - 투자 근거: HBM 수요 확대에 따른 실적 개선

Each field is optional; missing fields keep their defaults.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from invest_report.config.logging_config import get_logger
from invest_report.config.settings import get_settings
from invest_report.schemas.report import Recommendation

logger = get_logger("parsing.recommendation")

OPINION_RE = re.compile(r"투자\s*등급[\s*:：]*([A-Za-z]+|매수|매도|보유|중립)", re.IGNORECASE)
TARGET_PRICE_RE = re.compile(r"목표\s*주가[\s*:：]*([\d,]+)\s*원")
CURRENT_PRICE_RE = re.compile(r"현재\s*주가[\s*:：]*([\d,]+)\s*원")
REASON_RE = re.compile(r"(?:투자\s*)?(?:근거|이유|사유)[ \t*]*[:：][ \t*]*(.+)")

OPINION_CODES = {"BUY", "HOLD", "SELL"}
KOREAN_OPINIONS = {
    "매수": "BUY",
    "보유": "HOLD",
    "중립": "HOLD",
    "매도": "SELL",
}

PRICE_UNIT = "원"


def extract_recommendation(
    recommendation_body: str | None,
    horizon: str | None = None,
) -> Recommendation:
    """Build a ``Recommendation`` from the investment opinion section.

    Args:
        recommendation_body: Body of the ``투자 의견`` section, or None.
        horizon: Overrides the configured investment horizon.

    Returns:
        Recommendation with HOLD, ``"-"`` prices and no upside as defaults.
    """
    horizon = horizon or get_settings().recommendation_horizon
    if not recommendation_body:
        return Recommendation(horizon=horizon)

    target_digits = _match_group(TARGET_PRICE_RE, recommendation_body)
    current_digits = _match_group(CURRENT_PRICE_RE, recommendation_body)

    reason = _match_group(REASON_RE, recommendation_body)
    if reason:
        reason = reason.strip().strip("*").strip() or None

    return Recommendation(
        opinion=parse_opinion(recommendation_body),
        target_price=f"{target_digits}{PRICE_UNIT}" if target_digits else "-",
        current_price=f"{current_digits}{PRICE_UNIT}" if current_digits else "-",
        upside=compute_upside(target_digits, current_digits),
        horizon=horizon,
        reason=reason,
    )


def parse_opinion(text: str) -> str:
    """Opinion code after the ``투자 등급`` label; HOLD if absent or unknown."""
    raw = _match_group(OPINION_RE, text)
    if not raw:
        return "HOLD"
    code = raw.upper()
    if code in OPINION_CODES:
        return code
    if raw in KOREAN_OPINIONS:
        return KOREAN_OPINIONS[raw]
    logger.debug("unrecognized_opinion", value=raw)
    return "HOLD"


def compute_upside(target: str | None, current: str | None) -> str | None:
    """Signed upside from target to current price, e.g. ``'+33.3%'``.

    Returns None unless both prices parse as integers and current > 0.
    The sign follows ``target - current`` even when the rounded value is 0.
    """
    target_value = _parse_int(target)
    current_value = _parse_int(current)
    if target_value is None or current_value is None or current_value <= 0:
        return None

    diff = target_value - current_value
    with localcontext() as ctx:
        # Enough digits to hold the whole percentage plus one decimal
        ctx.prec = len(str(abs(diff))) + 10
        pct = (Decimal(diff) * 100 / Decimal(current_value)).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP,
        )
    sign = "-" if diff < 0 else "+"
    return f"{sign}{abs(pct)}%"


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.replace(",", ""))
    except ValueError:
        return None


def _match_group(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None
