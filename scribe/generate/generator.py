# ============================================================
# NoteGenerator
# ------------------------------------------------------------
# Joins the composer and the completion client per note task.
# Builds a fresh GenerationConfig for every call from:
#   request overrides > settings > config.yaml profile > defaults
# ============================================================

from __future__ import annotations
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .client import CompletionClient
from .composer import compose
from .prompts import DEFAULT_TEMPLATES
from .types import ChatMessage, CompletionResult, GenerationConfig, NoteTask

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


def load_profiles(config_path: os.PathLike = DEFAULT_CONFIG_PATH) -> Dict[str, Dict[str, Any]]:
    if not os.path.exists(config_path):
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class NoteGenerator:
    def __init__(self, client: CompletionClient, settings, config_path: os.PathLike = DEFAULT_CONFIG_PATH):
        self.client = client
        self.settings = settings
        self.cfg = load_profiles(config_path)

    @classmethod
    def from_settings(cls, settings) -> "NoteGenerator":
        client = CompletionClient(endpoint=settings.COMPLETION_URL, timeout=settings.REQUEST_TIMEOUT)
        return cls(client=client, settings=settings)

    def _template_for(self, task: NoteTask, profile: Dict[str, Any]) -> str:
        override = self.settings.SUMMARY_PROMPT if task is NoteTask.SUMMARY else self.settings.FLASHCARD_PROMPT
        return override or profile.get("template") or DEFAULT_TEMPLATES[task]

    def generation_config(self, task: NoteTask, **overrides: Any) -> GenerationConfig:
        """Fresh config for one call; None-valued overrides are ignored."""
        task = NoteTask(task)
        profile = self.cfg.get(task.value, {}) or {}
        config = GenerationConfig(
            api_key=self.settings.OPENAI_API_KEY or "",
            prompt_template=self._template_for(task, profile),
            model=self.settings.OPENAI_MODEL or profile.get("model", "gpt-3.5-turbo"),
            max_tokens=int(profile.get("max_tokens", 512)),
            temperature=float(profile.get("temperature", 1.0)),
            frequency_penalty=float(profile.get("frequency_penalty", 0.0)),
        )
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(config, **given) if given else config

    def messages_for(self, content: str, task: NoteTask, config: Optional[GenerationConfig] = None) -> List[ChatMessage]:
        config = config or self.generation_config(task)
        return compose(content, config, task)

    def generate(self, content: str, task: NoteTask, config: Optional[GenerationConfig] = None) -> CompletionResult:
        """Main entry point: compose, send once, hand back the result value."""
        task = NoteTask(task)
        config = config or self.generation_config(task)
        return self.client.complete(compose(content, config, task), config)

    def summarize(self, content: str, **overrides: Any) -> CompletionResult:
        return self.generate(content, NoteTask.SUMMARY, self.generation_config(NoteTask.SUMMARY, **overrides))

    def flashcards(self, content: str, **overrides: Any) -> CompletionResult:
        return self.generate(content, NoteTask.FLASHCARDS, self.generation_config(NoteTask.FLASHCARDS, **overrides))
