"""
Assistant Context

Responsibilities:
- Polishes and drafts resume text through an optional LLM provider
- Writes an accepted result back into exactly one field

Owns: Prompts and graceful degradation of provider failures
Never: Required by rendering or export; everything works offline
"""

from quill.contexts.assistant.writing_assistant import WritingAssistant, apply_polish

__all__ = ["WritingAssistant", "apply_polish"]
