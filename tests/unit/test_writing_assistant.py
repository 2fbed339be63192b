"""Unit tests for the writing assistant (no network: providers are faked)."""

import pytest
from omegaconf import OmegaConf

from quill.contexts.assistant import WritingAssistant, apply_polish
from quill.contexts.authoring import EntryNotFoundError, FieldAddress
from quill.utils.config import load_settings
from quill.utils.llm import LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """Provider returning a canned reply, or raising a canned error."""

    _provider_prefix = "fake"
    _retryable_exception = TimeoutError
    _retry_message = "Busy"

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []
        self.update_model("test-model")

    def _call_api(self, system_prompt, user_prompt):
        self.prompts.append(user_prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=self.model, input_tokens=10, output_tokens=5)


@pytest.mark.unit
class TestPolish:
    """Test WritingAssistant.polish()."""

    def test_returns_polished_text(self):
        provider = FakeProvider('"Led a team of five engineers."')
        assistant = WritingAssistant(provider)

        assert assistant.polish("I led some people", "summary") == "Led a team of five engineers."
        assert "I led some people" in provider.prompts[0]
        assert "summary" in provider.prompts[0]

    def test_blank_input_returns_empty_without_call(self):
        provider = FakeProvider("anything")
        assert WritingAssistant(provider).polish("   ") == ""
        assert provider.prompts == []

    def test_provider_failure_returns_input(self):
        assistant = WritingAssistant(FakeProvider(error=RuntimeError("quota exceeded")))
        assert assistant.polish("Original text") == "Original text"

    def test_empty_reply_returns_input(self):
        assistant = WritingAssistant(FakeProvider("  "))
        assert assistant.polish("Original text") == "Original text"

    def test_disabled_returns_input(self):
        provider = FakeProvider("Polished")
        assistant = WritingAssistant(provider, enabled=False)

        assert assistant.available is False
        assert assistant.polish("Original text") == "Original text"
        assert provider.prompts == []

    def test_no_provider(self):
        assistant = WritingAssistant()
        assert assistant.available is False
        assert assistant.polish("Original text") == "Original text"


@pytest.mark.unit
class TestGenerate:
    """Test generate_summary() and generate_bullets()."""

    def test_summary(self):
        provider = FakeProvider("Seasoned engineer with a record of shipping.")
        summary = WritingAssistant(provider).generate_summary("Backend Engineer", "APIs, Go")

        assert summary == "Seasoned engineer with a record of shipping."
        assert "Backend Engineer" in provider.prompts[0]

    def test_summary_unavailable(self):
        assert WritingAssistant().generate_summary("Engineer", "x") == ""

    def test_bullets_strip_markers_and_cap_count(self):
        provider = FakeProvider("1. Cut latency 30%\n2. Led migration\n- Hired 4 engineers\n- Extra")
        bullets = WritingAssistant(provider).generate_bullets("Engineer", "Acme", count=3)

        assert bullets == "Cut latency 30%\nLed migration\nHired 4 engineers"
        assert "3" in provider.prompts[0]
        assert "Acme" in provider.prompts[0]

    def test_bullets_failure(self):
        assistant = WritingAssistant(FakeProvider(error=ConnectionError("offline")))
        assert assistant.generate_bullets("Engineer", "Acme") == ""


@pytest.mark.unit
class TestFromSettings:
    """Test WritingAssistant.from_settings()."""

    def test_disabled_by_default(self):
        assistant = WritingAssistant.from_settings(load_settings(use_env=False))
        assert assistant.available is False

    def test_unusable_provider_is_unavailable(self):
        settings = OmegaConf.merge(
            load_settings(use_env=False),
            {"assistant": {"enabled": True, "provider": "nonexistent"}},
        )
        assistant = WritingAssistant.from_settings(settings)
        assert assistant.available is False


@pytest.mark.unit
class TestApplyPolish:
    """Test apply_polish()."""

    def test_writes_only_addressed_field(self, sample_resume):
        assistant = WritingAssistant(FakeProvider("Shipped a dashboard."))
        address = FieldAddress("projects", "description", "1")

        updated = apply_polish(sample_resume, address, assistant)

        assert updated.projects[0].description == "Shipped a dashboard."
        assert updated.projects[0].name == sample_resume.projects[0].name
        assert updated.experience == sample_resume.experience
        assert sample_resume.projects[0].description.startswith("Real-time")

    def test_unchanged_returns_same_object(self, sample_resume):
        assistant = WritingAssistant(FakeProvider(error=RuntimeError("down")))
        address = FieldAddress("profile", "summary")

        assert apply_polish(sample_resume, address, assistant) is sample_resume

    def test_context_defaults_to_field_name(self, sample_resume):
        provider = FakeProvider("Alex M.")
        apply_polish(sample_resume, FieldAddress("profile", "full_name"), WritingAssistant(provider))
        assert "full name" in provider.prompts[0]

    def test_bad_address(self, sample_resume):
        with pytest.raises(EntryNotFoundError):
            apply_polish(
                sample_resume,
                FieldAddress("experience", "description", "999"),
                WritingAssistant(FakeProvider("x")),
            )
