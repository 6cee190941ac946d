"""
Best-effort parsers for model completions.

Models do not reliably follow the heading format they are asked for, so
``parse_explanation`` walks an ordered chain of strategies:

    headings -> paragraphs -> sentences -> placeholder -> raw text

Each tier is a separate function returning ``None`` when it finds no
structure. Nothing here raises; the worst case is the whole text as overview.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from dumbify.constants import MAX_BREAKDOWNS, OVERVIEW_PLACEHOLDER

HEADING_MARKER = "##"

OVERVIEW_KEYWORDS = ("summary", "gist", "tea", "executive summary")
OVERVIEW_GLYPH = "🎯"
DETAIL_KEYWORDS = ("line", "breakdown", "roast", "breaking it down", "technical breakdown")
DETAIL_GLYPH = "🔍"

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")
BREAKDOWN_LABEL = re.compile(r"^BREAKDOWN_\d+")


@dataclass(frozen=True)
class ParsedSections:
    overview: str
    line_by_line: str = ""

    def to_dict(self) -> dict:
        return {"overview": self.overview, "lineByLine": self.line_by_line}


@dataclass(frozen=True)
class SocialContent:
    overview: str
    code_overview: str = ""
    breakdowns: List[str] = field(default_factory=list)


def classify_heading(header: str) -> Optional[str]:
    """Return 'overview', 'detail' or None for a section's first line."""
    header = header.lower()
    if OVERVIEW_GLYPH in header or any(k in header for k in OVERVIEW_KEYWORDS):
        return "overview"
    if DETAIL_GLYPH in header or any(k in header for k in DETAIL_KEYWORDS):
        return "detail"
    return None


def split_by_headings(text: str) -> Optional[ParsedSections]:
    # Text before the first marker is preamble, never a heading.
    overview = ""
    line_by_line = ""
    found = False

    for fragment in text.split(HEADING_MARKER)[1:]:
        fragment = fragment.strip()
        if not fragment:
            continue

        header, _, body = fragment.partition("\n")
        family = classify_heading(header)
        # Last write wins when two sections share a family.
        if family == "overview":
            overview = body.strip()
            found = True
        elif family == "detail":
            line_by_line = body.strip()
            found = True

    if not found or not (overview or line_by_line):
        return None
    return ParsedSections(overview=overview, line_by_line=line_by_line)


def split_by_paragraphs(text: str) -> Optional[ParsedSections]:
    paragraphs = [p.strip() for p in PARAGRAPH_BREAK.split(text.strip()) if p.strip()]
    if len(paragraphs) < 2:
        return None
    return ParsedSections(overview=paragraphs[0], line_by_line="\n\n".join(paragraphs[1:]))


def split_by_sentences(text: str) -> Optional[ParsedSections]:
    text = text.strip()
    if not text:
        return None

    sentences = [s for s in SENTENCE_BREAK.split(text) if s.strip()]
    if len(sentences) <= 3:
        return ParsedSections(overview=text)

    # Cut the original text after the second sentence so line breaks survive.
    second_break = list(SENTENCE_BREAK.finditer(text))[1]
    return ParsedSections(
        overview=text[:second_break.start()].strip(),
        line_by_line=text[second_break.end():].strip(),
    )


def parse_explanation(raw: Optional[str]) -> ParsedSections:
    """Split a raw explanation into overview and line-by-line sections."""
    text = (raw or "").strip()
    if not text:
        # Whitespace-only input is kept as is, so only "" and None give an empty overview.
        return ParsedSections(overview=raw or "")

    parsed = split_by_headings(text) or split_by_paragraphs(text) or split_by_sentences(text)

    overview = parsed.overview if parsed else ""
    line_by_line = parsed.line_by_line if parsed else ""

    if not overview and line_by_line:
        overview = OVERVIEW_PLACEHOLDER
    if not overview:
        overview = text

    return ParsedSections(overview=overview, line_by_line=line_by_line)


def parse_social_content(raw: Optional[str], tone) -> SocialContent:
    """
    Parse a labeled social-media completion.

    Recognizes ``## CODE_OVERVIEW``, ``## QUICK_SUMMARY`` and ``## BREAKDOWN_<n>``
    sections. Unlabeled and empty breakdown sections are dropped and at most
    ``MAX_BREAKDOWNS`` are kept.
    """
    code_overview = ""
    summary = ""
    breakdowns = []

    for fragment in (raw or "").split(HEADING_MARKER):
        fragment = fragment.strip()
        if not fragment:
            continue

        if fragment.startswith("CODE_OVERVIEW"):
            code_overview = _strip_label(fragment[len("CODE_OVERVIEW"):])
        elif fragment.startswith("QUICK_SUMMARY"):
            summary = _strip_label(fragment[len("QUICK_SUMMARY"):])
        else:
            label = BREAKDOWN_LABEL.match(fragment)
            if label:
                content = _strip_label(fragment[label.end():])
                if content:
                    breakdowns.append(content)

    tone_name = getattr(tone, "value", tone)
    overview = summary or code_overview or f"Check out this {tone_name} explanation of some code! 🚀"

    return SocialContent(
        overview=overview,
        code_overview=code_overview,
        breakdowns=breakdowns[:MAX_BREAKDOWNS],
    )


def _strip_label(rest: str) -> str:
    return rest.strip().lstrip(":").strip()
