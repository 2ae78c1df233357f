from scribe.generate import GenerationConfig, NoteTask, compose
from scribe.generate.prompts import FLASHCARD_TEACHER_PERSONA, SUMMARIZER_PERSONA


def test_round_trip_separator_is_literal(config):
    msgs = compose("The sky is blue.", config)
    assert msgs[1].content == "Summarize: \n\nThe sky is blue."


def test_two_messages_system_then_user(config):
    msgs = compose("Mitochondria make ATP.", config, NoteTask.FLASHCARDS)
    assert [m.role for m in msgs] == ["system", "user"]
    user = msgs[1].content
    assert config.prompt_template in user
    assert user.index(config.prompt_template) < user.index("Mitochondria make ATP.")
    assert user.endswith("Mitochondria make ATP.")


def test_persona_follows_task(config):
    assert compose("x", config, NoteTask.SUMMARY)[0].content == SUMMARIZER_PERSONA
    assert compose("x", config, NoteTask.FLASHCARDS)[0].content == FLASHCARD_TEACHER_PERSONA
    assert compose("x", config, "flashcards")[0].content == FLASHCARD_TEACHER_PERSONA


def test_deterministic(config):
    assert compose("same text", config) == compose("same text", config)


def test_empty_content_is_allowed(config):
    msgs = compose("", config)
    assert msgs[1].content == "Summarize: \n\n"


def test_content_is_not_truncated():
    cfg = GenerationConfig(api_key="k", prompt_template="T")
    big = "word " * 50_000
    assert compose(big, cfg)[1].content == "T \n\n" + big
