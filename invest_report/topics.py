"""Topic types and keyword-based topic classification.

A search query is scored against economy, sector and company keyword lists;
the topic with the strictly highest score wins.
"""

from __future__ import annotations

from enum import Enum

from invest_report.config.logging_config import get_logger

logger = get_logger("topics")


class TopicType(str, Enum):
    """Which report layout the generator was asked for."""

    COMPANY = "company"
    ECONOMY = "economy"
    SECTOR = "sector"


TITLE_SUFFIXES = {
    TopicType.COMPANY: "기업 분석 리포트",
    TopicType.ECONOMY: "경제 분석 리포트",
    TopicType.SECTOR: "산업 분석 리포트",
}

ECONOMY_WORDS = [
    "금리", "환율", "인플레이션", "물가", "gdp", "경기", "통화정책",
    "기준금리", "연준", "fed", "fomc", "중앙은행", "한은", "금통위",
    "국채", "채권", "수익률", "스프레드", "달러", "엔화", "위안화",
    "고용", "실업률", "경제성장", "무역수지", "경상수지", "cpi", "ppi",
    "미국 경제", "한국 경제", "중국 경제", "글로벌 경제", "세계 경제",
]

# Industry names that mean a sector report when searched on their own
INDUSTRY_NAMES = [
    "반도체", "배터리", "자동차", "철강", "조선", "건설", "유통",
    "금융", "제약", "화학", "정유", "통신", "게임", "엔터", "바이오",
    "헬스케어", "전기차", "2차전지", "태양광", "풍력", "신재생", "로봇",
    "드론", "ai", "인공지능", "클라우드", "데이터센터", "it", "ict",
]

INDUSTRY_QUERY_SUFFIXES = ["", " 산업", " 시장", " 업계", " 전망", " 분석"]

SECTOR_WORDS = [
    "산업", "섹터", "업종", "시장", "업계", "분야", "전망",
    "반도체산업", "ai산업", "2차전지산업", "바이오산업", "게임산업",
    "반도체 시장", "배터리 시장", "자동차 시장", "ai 시장",
]

COMPANY_WORDS = [
    "삼성전자", "sk하이닉스", "네이버", "카카오", "현대차", "lg전자",
    "삼성", "sk", "lg", "현대", "기아", "포스코", "셀트리온", "삼성바이오",
    "주가", "실적", "배당", "목표가", "투자의견", "매수", "매도",
]


def coerce_topic_type(value: TopicType | str | None) -> TopicType:
    """Map a caller-supplied topic type onto ``TopicType``.

    Unknown values fall back to ``economy``, which disables the
    company-only sections.
    """
    if isinstance(value, TopicType):
        return value
    try:
        return TopicType(str(value).strip().lower())
    except ValueError:
        logger.warning("unknown_topic_type", value=value, fallback=TopicType.ECONOMY.value)
        return TopicType.ECONOMY


def title_suffix(topic_type: TopicType | str) -> str:
    """Report title suffix for a topic type."""
    return TITLE_SUFFIXES[coerce_topic_type(topic_type)]


def classify_topic(query: str) -> TopicType:
    """Guess the topic type of a free-text search query.

    Args:
        query: User search text, e.g. '삼성전자' or '미국 금리 전망'.

    Returns:
        The topic with the strictly highest keyword score. Ties fall back to
        ``company`` when any company keyword matched, otherwise to
        ``company`` for short queries and ``sector`` for long ones.
    """
    q = query.lower().strip()

    economy_score = sum(10 for word in ECONOMY_WORDS if word in q)
    sector_score = sum(10 for word in SECTOR_WORDS if word in q)
    company_score = sum(10 for word in COMPANY_WORDS if word in q)

    for industry in INDUSTRY_NAMES:
        if q in {f"{industry}{suffix}" for suffix in INDUSTRY_QUERY_SUFFIXES}:
            sector_score += 50

    if len(q) <= 4 and q in INDUSTRY_NAMES:
        sector_score += 30

    logger.debug(
        "topic_scores",
        query=query,
        economy=economy_score,
        sector=sector_score,
        company=company_score,
    )

    if economy_score > sector_score and economy_score > company_score:
        return TopicType.ECONOMY
    if sector_score > economy_score and sector_score > company_score:
        return TopicType.SECTOR
    if company_score > 0:
        return TopicType.COMPANY
    return TopicType.COMPANY if len(q) <= 6 else TopicType.SECTOR
