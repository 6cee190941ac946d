"""
Share-card view models.

Cards are plain data: the client owns the actual rendering, and nothing is
persisted.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dumbify.constants import (
    BREAKDOWN_HOOKS,
    CARD_TEMPLATES,
    DEFAULT_BREAKDOWN_HOOK,
    DEFAULT_CARD_TEMPLATE,
    MAX_BREAKDOWNS,
    OVERVIEW_HOOKS,
)
from dumbify.errors import ValidationError
from dumbify.formatting import smart_code_truncate

CODE_CARD_LIMIT = 600

SENTENCE_SPLIT = re.compile(r"[.!?]+")
BULLET_SPLIT = re.compile(r"\n\s*[-•]\s*")
OVERVIEW_PREFIX = re.compile(r"^(overview|summary)[:\-\s]*", re.IGNORECASE)
DETAIL_PREFIX = re.compile(r"^(line.*breakdown|breakdown|explanation)[:\-\s]*", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class CardTemplate:
    id: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class ShareCard:
    kind: str
    title: str
    content: str
    template: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "title": self.title, "content": self.content, "template": self.template}


TEMPLATES = {t["id"]: CardTemplate(**t) for t in CARD_TEMPLATES}


def get_template(template_id: Optional[str]) -> CardTemplate:
    template = TEMPLATES.get(template_id or DEFAULT_CARD_TEMPLATE)
    if template is None:
        raise ValidationError(f"Unknown card template: {template_id}")
    return template


def build_share_cards(code: str, overview: str, breakdowns: List[str], template: Optional[str] = None) -> List[ShareCard]:
    template_id = get_template(template).id

    cards = [
        ShareCard("code", "The Code", smart_code_truncate(code, CODE_CARD_LIMIT), template_id),
        ShareCard("overview", "Quick Overview", overview, template_id),
    ]
    for index, breakdown in enumerate(breakdowns, start=1):
        cards.append(ShareCard("line", f"Breakdown {index}", breakdown, template_id))
    return cards


def _collapse(text: str) -> str:
    return WHITESPACE.sub(" ", text).strip()


def _long_sentences(text: str) -> List[str]:
    return [s.strip() for s in SENTENCE_SPLIT.split(text) if len(s.strip()) > 20]


def _loose_sections(explanation: str) -> Tuple[str, str]:
    sections = [s.strip() for s in explanation.split("##") if s.strip()]
    overview = ""
    line_by_line = ""

    for index, section in enumerate(sections):
        lowered = section.lower()
        if "overview" in lowered or "summary" in lowered or index == 0:
            overview = OVERVIEW_PREFIX.sub("", section).strip()
        elif "line" in lowered or "breakdown" in lowered or "explanation" in lowered:
            line_by_line = DETAIL_PREFIX.sub("", section).strip()

    if not overview and not line_by_line:
        sentences = _long_sentences(explanation)
        overview = ". ".join(sentences[:2]).strip() + "."
        line_by_line = ". ".join(sentences[2:]).strip()

    return overview, line_by_line


def _breakdown_items(text: str) -> List[str]:
    items = [item for item in BULLET_SPLIT.split(text) if len(item.strip()) > 30]
    if len(items) <= 1:
        items = [s + "." for s in _long_sentences(text)]
    return items


def build_fallback_content(explanation: str, tone) -> Tuple[str, List[str]]:
    """
    Derive share-card content from an ordinary explanation.

    Used when labeled social content could not be generated. Returns the
    hooked overview and at most ``MAX_BREAKDOWNS`` hooked breakdowns.
    """
    tone_name = getattr(tone, "value", tone)
    overview, line_by_line = _loose_sections(explanation)

    overview = OVERVIEW_HOOKS.get(tone_name, "") + _collapse(overview)

    breakdowns = []
    if line_by_line:
        hooks = BREAKDOWN_HOOKS.get(tone_name)
        for index, item in enumerate(_breakdown_items(line_by_line)):
            hook = hooks[index % len(hooks)] if hooks else DEFAULT_BREAKDOWN_HOOK
            card = hook + _collapse(item)
            if len(card) > 30:
                breakdowns.append(card)

    return overview, breakdowns[:MAX_BREAKDOWNS]
