# Generate package

# Exposes the composer, the completion client and the per-task generator.

from .client import CompletionClient, build_payload
from .composer import compose
from .errors import ConfigurationError
from .generator import NoteGenerator
from .types import ChatMessage, CompletionResult, FailureReason, GenerationConfig, NoteTask

__all__ = [
    "ChatMessage",
    "CompletionClient",
    "CompletionResult",
    "ConfigurationError",
    "FailureReason",
    "GenerationConfig",
    "NoteGenerator",
    "NoteTask",
    "build_payload",
    "compose",
]
