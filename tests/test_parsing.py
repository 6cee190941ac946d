import pytest
from dumbify.formatting import render_explanation
from dumbify.models import Tone
from dumbify.parsing import (
    ParsedSections,
    classify_heading,
    parse_explanation,
    parse_social_content,
    split_by_headings,
    split_by_paragraphs,
    split_by_sentences,
)

# --- Heading tier ---

def test_heading_sections_are_extracted():
    parsed = parse_explanation("## Quick Summary\nA.\n## Line by Line\n- B\n- C")
    assert parsed.overview == "A."
    assert parsed.line_by_line == "- B\n- C"

@pytest.mark.parametrize("overview_header, detail_header", [
    ("🎯 Quick Summary (1-2 sentences)", "🔍 Line by Line"),
    ("🎯 The Gist", "🔍 Line by Line Roast"),
    ("🎯 The Tea ☕", "🔍 Breaking It Down, Bestie"),
    ("🎯 Executive Summary", "🔍 Technical Breakdown"),
    ("The Tea", "Breaking it down"),
    ("Executive Summary", "Technical Breakdown"),
])
def test_every_tone_heading_format_is_recognized(overview_header, detail_header):
    text = f"## {overview_header}\nShort version.\n\n## {detail_header}\n- first\n- second"
    parsed = parse_explanation(text)
    assert parsed.overview == "Short version."
    assert parsed.line_by_line == "- first\n- second"

def test_classify_heading():
    assert classify_heading("The GIST") == "overview"
    assert classify_heading("🎯") == "overview"
    assert classify_heading("Roast time") == "detail"
    assert classify_heading("🔍 Details") == "detail"
    assert classify_heading("Conclusion") is None

def test_overview_family_wins_when_header_matches_both():
    assert classify_heading("Summary, line by line") == "overview"

def test_later_section_of_same_family_overwrites_earlier():
    parsed = parse_explanation("## Summary\nfirst\n## Gist\nsecond\n## Breakdown\ndetail")
    assert parsed.overview == "second"
    assert parsed.line_by_line == "detail"

def test_preamble_before_first_heading_is_ignored():
    parsed = parse_explanation("Sure thing, here you go!\n## Summary\nA.\n## Breakdown\nB.")
    assert parsed.overview == "A."
    assert parsed.line_by_line == "B."

def test_split_by_headings_without_known_headings():
    assert split_by_headings("## Intro\nhello\n## Outro\nbye") is None
    assert split_by_headings("no markers at all") is None

def test_detail_only_gets_placeholder_overview():
    parsed = parse_explanation("## 🔍 Line by Line\n- x = 1 sets x")
    assert parsed.overview == "Here's the explanation:"
    assert parsed.line_by_line == "- x = 1 sets x"

# --- Paragraph tier ---

def test_paragraph_fallback():
    parsed = parse_explanation("First paragraph here.\n\nSecond one.\n\nThird one.")
    assert parsed.overview == "First paragraph here."
    assert parsed.line_by_line == "Second one.\n\nThird one."

def test_split_by_paragraphs_needs_two_paragraphs():
    assert split_by_paragraphs("Just one paragraph. With two sentences.") is None
    result = split_by_paragraphs("a\n   \nb")
    assert result == ParsedSections(overview="a", line_by_line="b")

# --- Sentence tier ---

def test_sentence_fallback_splits_after_two_sentences():
    parsed = parse_explanation("One is here. Two is here! Three is here? Four is here.")
    assert parsed.overview == "One is here. Two is here!"
    assert parsed.line_by_line == "Three is here? Four is here."

def test_three_sentences_stay_in_overview():
    text = "One. Two. Three."
    assert split_by_sentences(text) == ParsedSections(overview=text)
    assert parse_explanation(text) == ParsedSections(overview=text, line_by_line="")

def test_split_by_sentences_empty():
    assert split_by_sentences("   ") is None

def test_sentence_fallback_keeps_line_breaks():
    text = "It adds numbers. Really simple.\n- `a` is the first input.\n- `b` is the second input."
    parsed = parse_explanation(text)
    assert parsed.overview == "It adds numbers. Really simple."
    assert parsed.line_by_line == "- `a` is the first input.\n- `b` is the second input."

    rows = render_explanation(text).rows
    assert [(row.text, row.bullet) for row in rows] == [
        ("`a` is the first input.", True),
        ("`b` is the second input.", True),
    ]

# --- Final guarantees ---

def test_empty_input_gives_empty_overview():
    assert parse_explanation("") == ParsedSections(overview="")
    assert parse_explanation(None) == ParsedSections(overview="")

def test_whitespace_only_input_is_kept_as_overview():
    assert parse_explanation("   \n ") == ParsedSections(overview="   \n ")

@pytest.mark.parametrize("raw", [
    "##",
    "## ##",
    "   x  ",
    "## Summary\n",
    "🎯",
    "## Intro\nhello there",
    "word",
])
def test_overview_never_empty_for_non_empty_input(raw):
    assert parse_explanation(raw).overview

def test_unrecognized_headings_fall_back_to_raw_text():
    parsed = parse_explanation("## Intro\nhello there")
    assert parsed.overview == "## Intro\nhello there"
    assert parsed.line_by_line == ""

def test_parsing_is_idempotent():
    text = "## 🎯 The Gist\nIt works.\n## 🔍 Line by Line Roast\n- somehow"
    assert parse_explanation(text) == parse_explanation(text)

def test_to_dict_uses_wire_names():
    parsed = ParsedSections(overview="o", line_by_line="l")
    assert parsed.to_dict() == {"overview": "o", "lineByLine": "l"}

# --- Social content parser ---

SOCIAL = """## CODE_OVERVIEW
This code adds numbers.

## QUICK_SUMMARY
Addition, but fancy ✨

## BREAKDOWN_1
Takes two inputs.

## BREAKDOWN_2

## BREAKDOWN_3: Returns the sum.

## SOMETHING_ELSE
Ignored.
"""

def test_social_content_sections():
    social = parse_social_content(SOCIAL, Tone.BABY)
    assert social.overview == "Addition, but fancy ✨"
    assert social.code_overview == "This code adds numbers."
    assert social.breakdowns == ["Takes two inputs.", "Returns the sum."]

def test_social_content_keeps_at_most_five_breakdowns():
    raw = "\n".join(f"## BREAKDOWN_{i}\npart {i}" for i in range(1, 8))
    social = parse_social_content(raw, "baby")
    assert social.breakdowns == [f"part {i}" for i in range(1, 6)]

def test_social_content_falls_back_to_code_overview():
    social = parse_social_content("## CODE_OVERVIEW\nWhat it does.", "sarcastic")
    assert social.overview == "What it does."

def test_social_content_synthesizes_overview():
    social = parse_social_content("no labels here", Tone.PROFESSOR)
    assert social.overview == "Check out this professor explanation of some code! 🚀"
    assert social.breakdowns == []
