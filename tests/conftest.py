# ===============================================
# Shared fixtures: a fake requests session that
# records calls and replays canned responses.
# ===============================================

import json

import pytest
import requests

from scribe.generate import CompletionClient, GenerationConfig, NoteGenerator
from scribe.settings import Settings


def make_response(body, status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    resp._content = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")
    return resp


def choices(*texts):
    return {"choices": [{"message": {"role": "assistant", "content": t}} for t in texts]}


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def config():
    return GenerationConfig(
        api_key="sk-test",
        prompt_template="Summarize:",
        model="gpt-3.5-turbo",
        max_tokens=512,
        temperature=0.8,
        frequency_penalty=0.1,
    )


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, OPENAI_API_KEY="sk-test", OPENAI_MODEL=None, SUMMARY_PROMPT=None, FLASHCARD_PROMPT=None)


@pytest.fixture
def make_generator(test_settings):
    def _make(session, settings=None):
        client = CompletionClient(endpoint="https://llm.test/v1/chat/completions", session=session)
        return NoteGenerator(client=client, settings=settings or test_settings)
    return _make
