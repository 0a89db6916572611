"""Citation token extraction over the full report text."""

from __future__ import annotations

import re

# [뉴스3], [업로드파일], [annual_report.pdf]
CITATION_RE = re.compile(r"\[(?:뉴스\d+|업로드파일|[^\[\]\n]+?\.pdf)\]", re.IGNORECASE)


def extract_sources(full_text: str | None) -> list[str]:
    """Return every distinct citation token in order of first appearance."""
    if not full_text:
        return []
    return list(dict.fromkeys(CITATION_RE.findall(full_text)))
