import logging
from dataclasses import dataclass
from typing import Optional

from openai import APIError, OpenAI

from dumbify.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    EXPLAIN_USER_PROMPT,
    SOCIAL_PROMPTS,
    SOCIAL_USER_PROMPT,
    TONE_PROMPTS,
)
from dumbify.errors import ConfigurationError, UpstreamError, ValidationError
from dumbify.models import Tone


@dataclass(frozen=True)
class LLMConfig:
    """Everything the dispatcher needs to reach the completion endpoint."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = 60.0

    @classmethod
    def from_settings(cls, settings) -> "LLMConfig":
        return cls(
            api_key=settings.OPENROUTER_API_KEY,
            base_url=settings.LLM_BASE_URL,
            model=settings.LLM_MODEL,
            max_tokens=settings.LLM_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
            timeout=settings.LLM_TIMEOUT,
        )


class PromptDispatcher:
    """
    Sends code to an OpenAI-compatible chat-completion endpoint under a tone's
    system prompt.

    One attempt per call: the SDK's own retries are switched off, and any
    failure is raised to the caller as an UpstreamError.
    """

    def __init__(self, config: LLMConfig, client: Optional[OpenAI] = None):
        self.config = config
        self._client = client

    def explain(self, code: str, tone) -> str:
        """Return the raw explanation text for ``code`` in the given tone."""
        tone = self._validate(code, tone)
        return self._complete(
            TONE_PROMPTS[tone.value],
            EXPLAIN_USER_PROMPT.format(code=code),
            empty_message="Failed to generate explanation",
        )

    def social_content(self, code: str, tone) -> str:
        """Return labeled social-media content (CODE_OVERVIEW, QUICK_SUMMARY, BREAKDOWN_n)."""
        tone = self._validate(code, tone)
        return self._complete(
            SOCIAL_PROMPTS[tone.value],
            SOCIAL_USER_PROMPT.format(code=code),
            empty_message="Failed to generate social media content",
        )

    def _validate(self, code: str, tone) -> Tone:
        if not code or not code.strip():
            raise ValidationError("Code is required")

        tone = Tone.from_value(tone)

        if not self.config.api_key:
            raise ConfigurationError("OpenRouter API key not configured")

        return tone

    def _get_client(self) -> OpenAI:
        if self._client is None:
            try:
                self._client = OpenAI(
                    api_key=self.config.api_key,
                    base_url=self.config.base_url,
                    timeout=self.config.timeout,
                    max_retries=0,
                )
            except Exception as e:
                logging.error(f"Failed to initialize completion client: {e}")
                raise UpstreamError(f"Completion client is not initialized: {e}") from e
        return self._client

    def _complete(self, system_prompt: str, user_content: str, empty_message: str) -> str:
        client = self._get_client()

        try:
            completion = client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},
                ],
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except APIError as e:
            logging.error(f"Completion API Error: {e}")
            raise UpstreamError(f"API Error: {e}") from e
        except Exception as e:
            logging.error(f"An unexpected error occurred during completion: {e}")
            raise UpstreamError(f"API Error: {e}") from e

        text = _completion_text(completion)
        if not text.strip():
            logging.warning(f"Completion returned no text for model {self.config.model}")
            raise UpstreamError(empty_message)

        return text


def _completion_text(completion) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""

    message = choices[0].message
    if message is None or not isinstance(message.content, str):
        return ""
    return message.content
