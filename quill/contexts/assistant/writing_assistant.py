"""
Writing assistant for resume text.

Wraps a text-completion provider behind three calls: polish an existing text,
draft a summary, draft experience bullets. Every call degrades to a no-op when
the assistant is disabled or the provider fails, so callers never need to
handle provider errors:

- polish() returns the input unchanged ("" for blank input)
- generate_summary() and generate_bullets() return ""
"""

from typing import Optional

from omegaconf import DictConfig

from quill.contexts.assistant.logger import _log_debug, _log_info, _log_warning
from quill.contexts.authoring.editing import FieldAddress, get_field, set_field
from quill.contexts.authoring.resume_data_structure import ResumeData
from quill.utils.config import load_settings
from quill.utils.llm import LLMProvider, get_provider, parse_lines_response, strip_wrapping_quotes

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

_SYSTEM_PROMPT = """\
You are a professional career coach helping a user write their resume.
Return only the requested text, with no quotes, preamble or conversational filler."""

_POLISH_PROMPT_TEMPLATE = """\
Rewrite the following {context} text to be more impactful, professional, and concise.
Do not add quotes or conversational filler. Just return the polished text.

Original text: "{text}\""""

_SUMMARY_PROMPT_TEMPLATE = """\
Write a professional resume summary (max 3 sentences) for a {role}.
Key experience highlights: {experience}. Use an active voice."""

_BULLETS_PROMPT_TEMPLATE = """\
Generate {count} impactful, metric-driven resume bullet points for a {role} position at {company}.
Return them as a simple list separated by newlines, no bullets or numbers at the start."""

DEFAULT_BULLET_COUNT = 3


class WritingAssistant:
    """
    Text-completion helper with graceful degradation.

    Attributes:
        provider: LLM provider, or None when no provider could be created
        enabled: Explicit capability flag; False turns every call into a no-op
    """

    def __init__(self, provider: Optional[LLMProvider] = None, enabled: bool = True):
        self.provider = provider
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Optional[DictConfig] = None) -> "WritingAssistant":
        """
        Build an assistant from the assistant.* settings.

        A provider that cannot be created (SDK not installed, API key missing)
        leaves the assistant unavailable instead of raising.
        """
        settings = settings or load_settings()
        if not settings.assistant.enabled:
            _log_debug("Assistant disabled by settings")
            return cls(provider=None, enabled=False)

        try:
            provider = get_provider(
                settings.assistant.provider,
                settings.assistant.model,
                max_tokens=settings.assistant.max_tokens,
                temperature=settings.assistant.temperature,
            )
        except (ImportError, ValueError) as e:
            _log_warning(f"Assistant unavailable: {e}")
            return cls(provider=None, enabled=False)

        _log_info(f"Assistant using {provider.name}")
        return cls(provider=provider, enabled=True)

    @property
    def available(self) -> bool:
        return self.enabled and self.provider is not None

    def _complete(self, user_prompt: str) -> Optional[str]:
        """Run one completion; None when unavailable or on any provider failure."""
        if not self.available:
            return None
        try:
            response = self.provider.generate(_SYSTEM_PROMPT, user_prompt)
        except Exception as e:
            # Provider SDKs raise their own error hierarchies (network, quota, auth)
            _log_warning(f"Completion failed ({type(e).__name__}): {e}")
            return None
        _log_debug(
            f"Completion from {response.model}: "
            f"{response.input_tokens} in / {response.output_tokens} out tokens"
        )
        return response.content.strip()

    def polish(self, text: str, context: str = "resume") -> str:
        """
        Rewrite text to be more impactful and concise.

        Args:
            text: Text to polish
            context: What the text is (e.g., "summary", "experience description")

        Returns:
            Polished text, the input unchanged when unavailable or failed,
            "" when the input is blank
        """
        if not text.strip():
            return ""
        result = self._complete(_POLISH_PROMPT_TEMPLATE.format(context=context, text=text))
        if not result:
            return text
        return strip_wrapping_quotes(result) or text

    def generate_summary(self, role: str, experience: str) -> str:
        """Draft a summary of at most three sentences; "" when unavailable."""
        result = self._complete(
            _SUMMARY_PROMPT_TEMPLATE.format(role=role, experience=experience)
        )
        return strip_wrapping_quotes(result) if result else ""

    def generate_bullets(self, role: str, company: str, count: int = DEFAULT_BULLET_COUNT) -> str:
        """
        Draft experience bullets as newline-separated text; "" when unavailable.

        List markers the model adds anyway are stripped, so each line is plain
        text ready for an Experience description.
        """
        result = self._complete(
            _BULLETS_PROMPT_TEMPLATE.format(count=count, role=role, company=company)
        )
        if not result:
            return ""
        return "\n".join(parse_lines_response(result, max_items=count))


def apply_polish(
    data: ResumeData,
    address: FieldAddress,
    assistant: WritingAssistant,
    context: Optional[str] = None,
) -> ResumeData:
    """
    Polish one addressed field and write the result back.

    The field is replaced as a whole or not at all: when the assistant returns
    the text unchanged (unavailable, failed, nothing to improve) the original
    data is returned as is.

    Args:
        data: Resume holding the field
        address: Field to polish (e.g., FieldAddress("experience", "description", "1"))
        assistant: Writing assistant to use
        context: Prompt context (default: the field name with underscores as spaces)

    Returns:
        New ResumeData with the field replaced, or data itself when unchanged

    Raises:
        EntryNotFoundError, UnknownFieldError: If address does not name a text field
    """
    current = get_field(data, address)
    polished = assistant.polish(current, context or address.field.replace("_", " "))
    if polished == current:
        return data
    return set_field(data, address, polished)
