"""Heading index, section lookup and bullet-list extraction.

Generated reports use numbered markdown headings such as ``## 1. 요약``.
The document is indexed once into ``Heading`` records; each section lookup
then matches a label against that index instead of re-scanning the text, so
headings may appear in any order and with any ordinal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Markers need trailing whitespace, except before an ordinal (``##1. 요약``)
HEADING_RE = re.compile(r"^(#{1,6})(?:[ \t]+|(?=\d)|$)(.*?)[ \t#]*$", re.MULTILINE)
ORDINAL_RE = re.compile(r"^(\d+)\s*[.)]\s*")
BULLET_RE = re.compile(r"^\s*[-*•]\s+(.*?)\s*$")
SUMMARY_BULLET_RE = re.compile(r"^[-*]\s")

# Headings at this depth or shallower delimit top-level sections
SECTION_MAX_DEPTH = 2


@dataclass(frozen=True)
class Heading:
    """A markdown heading and the text it owns."""

    depth: int
    title: str
    body: str
    position: int
    ordinal: int | None = None


def index_headings(text: str) -> list[Heading]:
    """Split a document into headings in one pass.

    A heading's body runs from the end of its line up to the next heading
    of the same or shallower depth, so deeper sub-headings stay inside it.

    Args:
        text: Full report text.

    Returns:
        Headings in document order.
    """
    if not text:
        return []

    matches = list(HEADING_RE.finditer(text))
    headings: list[Heading] = []

    for i, match in enumerate(matches):
        depth = len(match.group(1))
        end = len(text)
        for following in matches[i + 1:]:
            if len(following.group(1)) <= depth:
                end = following.start()
                break

        raw_title = match.group(2).replace("**", "").strip()
        ordinal = None
        ordinal_match = ORDINAL_RE.match(raw_title)
        if ordinal_match:
            ordinal = int(ordinal_match.group(1))
            raw_title = raw_title[ordinal_match.end():].strip()

        headings.append(Heading(
            depth=depth,
            title=raw_title,
            body=text[match.end():end].strip(),
            position=match.start(),
            ordinal=ordinal,
        ))

    return headings


def find_heading(
    headings: list[Heading],
    label_pattern: str,
    heading_number: int | None = None,
    max_depth: int = SECTION_MAX_DEPTH,
) -> Heading | None:
    """Pick the heading whose title matches ``label_pattern``.

    The stated ordinal is only a tie-breaker: a heading numbered
    ``heading_number`` wins over any other numbered heading, which wins over
    an unnumbered one. Remaining ties go to the earliest heading.
    """
    label_re = re.compile(label_pattern, re.IGNORECASE)
    candidates = [
        h for h in headings
        if h.depth <= max_depth and label_re.search(h.title)
    ]
    if not candidates:
        return None

    def rank(heading: Heading) -> tuple[int, int]:
        if heading_number is not None and heading.ordinal == heading_number:
            return (0, heading.position)
        if heading.ordinal is not None:
            return (1, heading.position)
        return (2, heading.position)

    return min(candidates, key=rank)


def extract_section(
    text: str,
    heading_number: int | None,
    label_pattern: str,
    headings: list[Heading] | None = None,
    continue_pattern: str | None = None,
) -> str | None:
    """Return the body of a top-level section, or None if it is missing.

    Args:
        text: Full report text.
        heading_number: Ordinal the section is expected to carry.
        label_pattern: Case-insensitive regex matched against heading titles.
        headings: Pre-built index of ``text``; built on demand when omitted.
        continue_pattern: Unnumbered headings at section depth whose title
            matches this regex are treated as sub-headings and do not end
            the section.
    """
    if headings is None:
        headings = index_headings(text)
    heading = find_heading(headings, label_pattern, heading_number)
    if heading is None:
        return None
    if continue_pattern is None:
        return heading.body

    continue_re = re.compile(continue_pattern, re.IGNORECASE)
    end = len(text)
    for following in headings:
        if following.position <= heading.position or following.depth > heading.depth:
            continue
        if following.ordinal is None and continue_re.search(following.title):
            continue
        end = following.position
        break

    line_end = text.find("\n", heading.position)
    if line_end == -1:
        return ""
    return text[line_end:end].strip()


def extract_list_items(
    body: str | None,
    max_items: int = 5,
    min_length: int = 10,
) -> list[str]:
    """Collect bullet items from a section body.

    Lines not starting with ``-``, ``*`` or ``•`` are ignored. Items not longer
    than ``min_length`` characters are dropped before truncating to
    ``max_items``.
    """
    if not body:
        return []

    items: list[str] = []
    for line in body.splitlines():
        match = BULLET_RE.match(line)
        if not match:
            continue
        item = match.group(1).strip()
        if len(item) <= min_length:
            continue
        items.append(item)
        if len(items) >= max_items:
            break
    return items


def clean_summary(body: str | None, max_chars: int = 500) -> str:
    """Flatten a summary section into plain prose.

    Bullet lines are removed, the rest joined and capped at ``max_chars``,
    then leftover ``*``/``#`` markdown characters are stripped.
    """
    if not body:
        return ""
    lines = [
        line for line in body.splitlines()
        if line.strip() and not SUMMARY_BULLET_RE.match(line)
    ]
    text = "\n".join(lines).strip()[:max_chars]
    return re.sub(r"[*#]", "", text).strip()
