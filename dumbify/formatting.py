import math
import re
from dataclasses import dataclass
from typing import List, Optional

from dumbify.constants import CODE_SPAN_HEAD, CODE_SPAN_LIMIT, CODE_SPAN_TAIL, WORDS_PER_MINUTE
from dumbify.parsing import ParsedSections, parse_explanation

CODE_SPAN = re.compile(r"`([^`]+)`")
BULLET_MARKER = re.compile(r"^[-•]\s*")


@dataclass(frozen=True)
class DisplayRow:
    text: str
    bullet: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "bullet": self.bullet}


@dataclass(frozen=True)
class RenderedExplanation:
    sections: ParsedSections
    rows: List[DisplayRow]
    word_count: int
    reading_time: int

    def to_dict(self) -> dict:
        return {
            **self.sections.to_dict(),
            "rows": [row.to_dict() for row in self.rows],
            "wordCount": self.word_count,
            "readingTime": self.reading_time,
        }


def _shorten_span(match: re.Match) -> str:
    code = match.group(1)
    if len(code) <= CODE_SPAN_LIMIT:
        return match.group(0)
    return f"`{code[:CODE_SPAN_HEAD]}...{code[-CODE_SPAN_TAIL:]}`"


def truncate_code_spans(line: str) -> str:
    """Shorten long inline code spans for display, keeping their backticks."""
    if "`" not in line:
        return line
    return CODE_SPAN.sub(_shorten_span, line)


def format_line_by_line(text: Optional[str]) -> List[DisplayRow]:
    rows = []
    for line in (text or "").split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        stripped = truncate_code_spans(stripped)
        if stripped.startswith("-") or stripped.startswith("•"):
            rows.append(DisplayRow(text=BULLET_MARKER.sub("", stripped), bullet=True))
        else:
            rows.append(DisplayRow(text=stripped))
    return rows


def word_count(text: Optional[str]) -> int:
    return len((text or "").split())


def reading_time(text: Optional[str]) -> int:
    """Minutes to read ``text`` at a fixed words-per-minute rate, rounded up."""
    return math.ceil(word_count(text) / WORDS_PER_MINUTE)


def render_explanation(raw: Optional[str]) -> RenderedExplanation:
    sections = parse_explanation(raw)
    return RenderedExplanation(
        sections=sections,
        rows=format_line_by_line(sections.line_by_line),
        word_count=word_count(raw),
        reading_time=reading_time(raw),
    )


def smart_truncate(text: str, max_length: int) -> str:
    """
    Cut ``text`` to about ``max_length`` characters at a natural break.

    Prefers a sentence end within the last 50 characters, then a comma within
    the last 30, then a space within the last 20, and appends '...' when
    anything was dropped.
    """
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_period = truncated.rfind(".")
    last_comma = truncated.rfind(",")
    last_space = truncated.rfind(" ")

    if last_period >= 0 and last_period > max_length - 50:
        cut = last_period + 1
    elif last_comma >= 0 and last_comma > max_length - 30:
        cut = last_comma + 1
    elif last_space >= 0 and last_space > max_length - 20:
        cut = last_space
    else:
        cut = max_length

    return text[:cut].strip() + ("..." if cut < len(text) else "")


def smart_code_truncate(code: str, max_length: int) -> str:
    """Cut ``code`` on line boundaries so a card shows whole lines where possible."""
    if len(code) <= max_length:
        return code

    result = ""
    for line in code.split("\n"):
        if len(result) + len(line) > max_length:
            remaining = max_length - len(result) - 3
            if remaining > 20:
                result += line[:remaining].strip() + "..."
            else:
                result = result.strip() + "..."
            break
        result += line + "\n"

    return result.strip()
