# ============================================================
# Typed dataclasses shared across the generate layer.
# ============================================================

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError


class NoteTask(str, Enum):
    """What the generated text is for. Picks persona, template and profile."""
    SUMMARY = "summary"
    FLASHCARDS = "flashcards"


class FailureReason(str, Enum):
    TRANSPORT = "transport"  # unreachable, non-2xx, not JSON
    CONTENT = "content"      # valid JSON, nothing usable in it


@dataclass
class ChatMessage:
    """Single chat turn: system or user."""
    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class GenerationConfig:
    """Everything one completion call needs. Built per call, never stored."""
    api_key: str
    prompt_template: str
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 512
    temperature: float = 1.0
    frequency_penalty: float = 0.0

    def validate(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("API key is missing or empty")
        try:
            self.api_key.encode("latin-1")
        except UnicodeEncodeError:
            # HTTP headers are latin-1; pasted keys sometimes carry smart quotes
            raise ConfigurationError("API key contains characters that cannot be sent in a header")
        if not self.prompt_template or not self.prompt_template.strip():
            raise ConfigurationError("prompt template is missing or empty")
        if not self.model:
            raise ConfigurationError("model identifier is missing")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise ConfigurationError(f"max_tokens must be an integer, got {self.max_tokens!r}")
        if self.max_tokens <= 0:
            raise ConfigurationError(f"max_tokens must be > 0, got {self.max_tokens}")
        if not 0.0 <= float(self.temperature) <= 2.0:
            raise ConfigurationError(f"temperature must be within [0, 2], got {self.temperature}")
        if not -2.0 <= float(self.frequency_penalty) <= 2.0:
            raise ConfigurationError(
                f"frequency_penalty must be within [-2, 2], got {self.frequency_penalty}"
            )

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return (
            f"GenerationConfig(api_key='***', model={self.model!r}, max_tokens={self.max_tokens}, "
            f"temperature={self.temperature}, frequency_penalty={self.frequency_penalty})"
        )


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of one completion call: trimmed text, or a failure reason."""
    ok: bool
    text: str = ""
    reason: Optional[FailureReason] = None
    detail: str = ""

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(ok=True, text=text.strip())

    @classmethod
    def failure(cls, reason: FailureReason, detail: str) -> "CompletionResult":
        return cls(ok=False, reason=reason, detail=detail)

    def describe(self) -> str:
        if self.ok:
            return "ok"
        return f"{self.reason.value}: {self.detail}"
