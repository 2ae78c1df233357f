# ============================================================
# Completion Client for the Chat Completions HTTP API.
# ------------------------------------------------------------
# One POST per call, no retries. Failures come back as
# CompletionResult values; only a bad GenerationConfig raises.
# ============================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .types import ChatMessage, CompletionResult, FailureReason, GenerationConfig

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
NO_CHOICES = "no choices returned"
EMPTY_CHOICE = "empty completion returned"


def build_payload(messages: List[ChatMessage], config: GenerationConfig) -> Dict[str, Any]:
    return {
        "messages": [m.to_dict() for m in messages],
        "model": config.model,
        "max_tokens": config.max_tokens,
        "temperature": float(config.temperature),
        "frequency_penalty": float(config.frequency_penalty),
    }


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def extract_text(data: Any) -> Optional[str]:
    """First choice's message content, or None when the body has nothing usable."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


class CompletionClient:
    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        # anything with a requests-style post() works; tests pass fakes
        self.session = session

    def _post(self, payload: Dict[str, Any], headers: Dict[str, str]) -> requests.Response:
        poster = self.session.post if self.session is not None else requests.post
        return poster(self.endpoint, json=payload, headers=headers, timeout=self.timeout)

    def complete(self, messages: List[ChatMessage], config: GenerationConfig) -> CompletionResult:
        config.validate()
        payload = build_payload(messages, config)
        logger.debug("POST %s model=%s max_tokens=%s", self.endpoint, config.model, config.max_tokens)

        try:
            resp = self._post(payload, build_headers(config.api_key))
        except requests.RequestException as exc:
            logger.warning("completion request failed: %s", exc)
            return CompletionResult.failure(FailureReason.TRANSPORT, f"request failed: {exc}")

        if not 200 <= resp.status_code < 300:
            logger.warning("completion endpoint answered http %s", resp.status_code)
            return CompletionResult.failure(
                FailureReason.TRANSPORT, f"http {resp.status_code}: {resp.text[:500]}"
            )

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("completion response is not valid JSON: %s", exc)
            return CompletionResult.failure(FailureReason.TRANSPORT, f"invalid JSON in response: {exc}")

        text = extract_text(data)
        if text is None:
            logger.warning("completion response had no usable choice")
            return CompletionResult.failure(FailureReason.CONTENT, NO_CHOICES)
        if not text.strip():
            logger.warning("completion response had only whitespace")
            return CompletionResult.failure(FailureReason.CONTENT, EMPTY_CHOICE)
        return CompletionResult.success(text)
