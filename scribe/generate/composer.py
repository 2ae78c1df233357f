# Prompt Composer: turns note content + config into the two chat messages.

from __future__ import annotations
from typing import List

from .prompts import PROMPT_SEPARATOR, persona_for
from .types import ChatMessage, GenerationConfig, NoteTask


def compose_user_message(template: str, content: str) -> str:
    """Template first, then the separator, then the content verbatim."""
    return f"{template}{PROMPT_SEPARATOR}{content}"


def compose(content: str, config: GenerationConfig, task: NoteTask = NoteTask.SUMMARY) -> List[ChatMessage]:
    """
    Build [system, user] for one request.

    No truncation or encoding checks happen here; keeping the content inside
    the model's context window is the caller's job.
    """
    return [
        ChatMessage(role="system", content=persona_for(task)),
        ChatMessage(role="user", content=compose_user_message(config.prompt_template, content)),
    ]
