"""
Dumbify: explains code snippets in a chosen tone.

Sends code to a chat-completion API, splits the reply into an overview and a
line-by-line breakdown, and builds shareable cards from it.
"""

from .models import Tone
from .dispatcher import LLMConfig, PromptDispatcher
from .parsing import ParsedSections, parse_explanation, parse_social_content

__all__ = [
    "Tone",
    "LLMConfig",
    "PromptDispatcher",
    "ParsedSections",
    "parse_explanation",
    "parse_social_content",
]
