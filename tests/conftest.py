"""Shared pytest fixtures for the report parser test suite."""

import pytest

COMPANY_REPORT = """# 삼성전자 투자 분석

## 1. 요약
삼성전자는 HBM 공급 확대와 파운드리 수율 개선으로 실적 반등이 기대됩니다 [뉴스1].
**메모리 업황** 회복이 본격화되고 있습니다.
- 요약 내 불릿은 요약문에서 제외됩니다

## 2. 핵심 포인트
- HBM3E 양산 본격화로 메모리 수익성이 개선되고 있음 [뉴스1]
- 파운드리 2나노 공정 수율이 목표치에 근접하고 있음 [뉴스2]
- 스마트폰 출하량이 전년 대비 안정적으로 유지되는 중 [업로드파일]
- 짧음

## 3. SWOT 분석
### 강점 (Strengths)
- 메모리 반도체 글로벌 점유율 1위 유지
- 수직계열화된 생산 체계와 원가 경쟁력
### 약점 (Weaknesses)
- 파운드리 사업부의 고객 확보 지연 지속
### 기회 (Opportunities)
- AI 서버 투자 확대에 따른 HBM 수요 증가
### 위협 (Threats)
- 미중 무역 갈등에 따른 수출 규제 강화 우려

## 4. 리스크 요인
- 메모리 가격 하락 사이클 재진입 가능성 [뉴스3]
- 환율 변동에 따른 수익성 변동성 확대 우려

## 5. 투자 의견
- 투자 등급: BUY
- 목표 주가: 80,000원
- 현재 주가: 60,000원
- 투자 기간: 중기
- 투자 근거: HBM 경쟁력 회복과 메모리 업황 개선 [뉴스1]

## 6. 추가 분석
사용자 요청에 따라 배당 정책을 검토했습니다 [samsung_ir.pdf].
"""

ECONOMY_REPORT = """## 1. 요약
미국 연준의 금리 인하 기대가 커지면서 원/달러 환율이 하락했습니다 [뉴스1].

## 2. 핵심 경제 포인트
- 연준의 연내 두 차례 금리 인하 가능성이 부각됨 [뉴스1]
- 국내 소비자물가 상승률이 2%대 초반으로 안정됨 [뉴스2]

## 3. SWOT 분석
### 강점
- 이 항목은 경제 리포트에서 무시되어야 합니다

## 4. 시장 영향 분석
- 주식시장에는 유동성 확대에 따른 긍정적 영향

## 5. 리스크 요인
- 미국 경기 둔화 신호가 확대될 가능성 [뉴스2]

## 6. 투자 의견
- 투자 등급: SELL
- 목표 주가: 10,000원
- 현재 주가: 20,000원
"""

METADATA = {
    "timestamp": "2025-01-15T09:00:00.000Z",
    "newsCount": 12,
    "newsWithLinks": [
        {
            "title": "삼성전자, HBM3E 엔비디아 공급 임박",
            "url": "https://news.example.com/1",
            "date": "Wed, 15 Jan 2025 08:00:00 +0900",
        },
    ],
    "sentiment": "긍정적",
    "sentimentScore": {"positive": 60, "negative": 20, "neutral": 20},
    "dataQuality": 90,
    "stockData": {
        "currentPrice": 60000,
        "pe": 12.34,
        "eps": 4950.6,
        "marketCap": 358_000_000_000_000,
        "fiftyTwoWeekHigh": 88800,
        "fiftyTwoWeekLow": 49900,
    },
    "comparativeStocks": [{"name": "SK하이닉스", "price": 180000}],
    "sectorHeatmap": {"반도체": 2.4, "2차전지": -1.1},
    "fileSources": ["samsung_ir.pdf"],
}


@pytest.fixture
def company_report() -> str:
    """Well-formed company report with every section."""
    return COMPANY_REPORT


@pytest.fixture
def economy_report() -> str:
    """Economy report that still contains SWOT and opinion headings."""
    return ECONOMY_REPORT


@pytest.fixture
def metadata() -> dict:
    """camelCase metadata bundle as sent by the report API."""
    return {**METADATA, "stockData": dict(METADATA["stockData"])}
