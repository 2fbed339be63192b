"""
Text-completion providers for the writing assistant, plus response cleanup.

Provider SDKs are imported lazily: QUILL works without them, and only the
assistant fails (gracefully) when the configured provider cannot be built.
"""

import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

MAX_RETRIES = 5
BASE_DELAY = 1.0

# Resume text is short; these keep completions (and costs) small
DEFAULT_MAX_TOKENS = 512
DEFAULT_TEMPERATURE = 0.7

T = TypeVar("T")


def _with_retries(
    attempt_call: Callable[[], T],
    retry_on: type,
    label: str,
    base_delay: float = BASE_DELAY,
) -> T:
    """
    Call attempt_call, retrying with exponential backoff while it raises retry_on.

    Any other exception propagates immediately. After MAX_RETRIES attempts
    the last retry_on error propagates too.

    Args:
        attempt_call: Zero-argument callable making one request
        retry_on: Exception type meaning "try again later" (rate limits, overload)
        label: Short description used in the retry warning
        base_delay: Seconds before the first retry, doubled each time
    """
    delay = base_delay
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            return attempt_call()
        except retry_on:
            if attempt == MAX_RETRIES:
                raise
            logger.warning(f"{label}; retry {attempt}/{MAX_RETRIES - 1} in {delay:.1f}s")
            time.sleep(delay)
            delay *= 2


@dataclass
class LLMResponse:
    """One completion and its token usage."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Base class for completion providers.

    Subclasses set _provider_prefix, _retryable_exception and _retry_message,
    implement _call_api(), and call update_model() once their client exists.

    Attributes:
        name: "{prefix}/{model}", used in logs
        model: Model identifier sent to the API
        max_tokens: Completion length cap
        temperature: Sampling temperature
    """

    _provider_prefix: str
    _retryable_exception: type
    _retry_message: str = "Provider busy"

    name: str
    model: str
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def update_model(self, model: str):
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Make a single request, without retries."""
        pass

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Complete user_prompt, retrying while the provider reports it is busy."""
        return _with_retries(
            lambda: self._call_api(system_prompt, user_prompt),
            self._retryable_exception,
            f"{self.name}: {self._retry_message}",
        )


def _require_api_key(env_var: str) -> str:
    api_key = os.getenv(env_var)
    if not api_key:
        raise ValueError(f"{env_var} environment variable not set")
    return api_key


class AnthropicProvider(LLMProvider):
    """Claude models through the anthropic SDK."""

    _provider_prefix = "anthropic"
    _retry_message = "API overloaded"
    DEFAULT_MODEL = "claude-sonnet-4-20250514"

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install quill[llm]")

        self.client = anthropic.Anthropic(api_key=_require_api_key("ANTHROPIC_API_KEY"))
        self._retryable_exception = anthropic.RateLimitError
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.update_model(model or self.DEFAULT_MODEL)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        text = "".join(block.text for block in response.content if block.type == "text")
        return LLMResponse(
            content=text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """GPT models through the openai SDK."""

    _provider_prefix = "openai"
    _retry_message = "Rate limit hit"
    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install quill[llm]")

        self.client = openai.OpenAI(api_key=_require_api_key("OPENAI_API_KEY"))
        self._retryable_exception = openai.RateLimitError
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.update_model(model or self.DEFAULT_MODEL)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )


PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(
    provider_name: Optional[str] = None,
    model: Optional[str] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> LLMProvider:
    """
    Build a provider by name.

    Args:
        provider_name: Key of PROVIDERS (default: LLM_PROVIDER env var, else "openai")
        model: Model name (default: the provider's DEFAULT_MODEL)
        max_tokens: Completion length cap
        temperature: Sampling temperature

    Raises:
        ValueError: Unknown provider or missing API key
        ImportError: Provider SDK not installed
    """
    provider_name = (provider_name or os.getenv("LLM_PROVIDER") or "openai").lower()
    if provider_name not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {provider_name}. Use one of: {', '.join(sorted(PROVIDERS))}"
        )
    return PROVIDERS[provider_name](model=model, max_tokens=max_tokens, temperature=temperature)


def strip_wrapping_quotes(text: str) -> str:
    """Remove one pair of matching quotes models like to wrap rewritten text in."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1].strip()
    return text


def _strip_list_marker(line: str) -> str:
    """Drop a leading bullet ("-", "*", "•") or number ("1.", "2)")."""
    line = line.strip().lstrip("-•*").strip()
    head, sep, rest = line.partition(" ")
    if sep and head[-1:] in ".)" and head[:-1].isdigit():
        return rest.strip()
    return line


def parse_lines_response(text: str, max_items: Optional[int] = None) -> List[str]:
    """
    Turn a completion into a list of short lines.

    Accepts a JSON array of strings or plain text with one item per line.
    List markers, trailing commas and wrapping quotes are removed; empty
    lines and stray brackets are dropped.

    Args:
        text: Completion text
        max_items: Optional cap on the number of items returned

    Returns:
        List of non-empty strings
    """
    text = text.strip()

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, list):
        items = [str(item).strip() for item in parsed]
    else:
        items = [
            strip_wrapping_quotes(_strip_list_marker(line).rstrip(","))
            for line in text.splitlines()
        ]

    items = [item for item in items if item and item not in ("[", "]")]
    return items[:max_items] if max_items else items
