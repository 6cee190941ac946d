import pytest
from dumbify.constants import OVERVIEW_HOOKS
from dumbify.errors import ValidationError
from dumbify.models import Tone
from dumbify.share import build_fallback_content, build_share_cards, get_template

EXPLANATION = (
    "## Summary\n"
    "This function adds two numbers together and returns the result.\n"
    "## Line by Line\n"
    "- `def add(a, b)` declares a function taking two numbers\n"
    "- `return a + b` hands back the sum of both arguments"
)


def test_build_share_cards_order_and_titles():
    cards = build_share_cards("x = 1", "Overview text", ["part one", "part two"], "retro")
    assert [card.kind for card in cards] == ["code", "overview", "line", "line"]
    assert [card.title for card in cards] == ["The Code", "Quick Overview", "Breakdown 1", "Breakdown 2"]
    assert cards[0].content == "x = 1"
    assert all(card.template == "retro" for card in cards)

def test_default_template_is_modern():
    cards = build_share_cards("x = 1", "o", [])
    assert len(cards) == 2
    assert cards[0].template == "modern"
    assert get_template(None).name == "Modern Gradient"

def test_unknown_template_is_rejected():
    with pytest.raises(ValidationError):
        get_template("comic-sans")

def test_code_card_is_truncated():
    code = "\n".join(f"value_{i} = {i}" for i in range(200))
    card = build_share_cards(code, "o", [])[0]
    assert len(card.content) <= 603
    assert card.content.endswith("...")

def test_fallback_content_from_sectioned_explanation():
    overview, breakdowns = build_fallback_content(EXPLANATION, Tone.BABY)
    assert overview == (
        "🧒 Ever wondered what this code does? Let me explain it like you're 5! "
        "This function adds two numbers together and returns the result."
    )
    assert len(breakdowns) == 2
    assert breakdowns[0] == "🧒 This part is like...`def add(a, b)` declares a function taking two numbers"
    assert breakdowns[1].startswith("🎈 And then we have...")

def test_fallback_content_without_detail_section():
    text = "This code reads a file from disk.\n\nIt then counts   every word in that file."
    overview, breakdowns = build_fallback_content(text, "professor")
    assert overview == (
        OVERVIEW_HOOKS["professor"]
        + "This code reads a file from disk. It then counts every word in that file."
    )
    assert breakdowns == []

def test_fallback_content_limits_breakdowns():
    bullets = "\n".join(f"- step number {i} does something rather important here" for i in range(9))
    _, breakdowns = build_fallback_content(f"## Gist\nIt runs.\n## Line by Line Roast\n{bullets}", "sarcastic")
    assert len(breakdowns) == 5
    assert breakdowns[0].startswith("💀 Of course, this line...")
