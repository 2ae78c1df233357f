from datetime import date

import pytest
import requests

from scribe.generate import FailureReason, NoteTask
from scribe.settings import Settings
from scribe.vault import FileVault
from scribe.workflow import NoteWorkflow

from conftest import FakeSession, choices, make_response

NOTE = "Photosynthesis turns light into chemical energy."


@pytest.fixture
def vault(tmp_path):
    (tmp_path / "bio").mkdir()
    (tmp_path / "bio" / "plants.md").write_text(NOTE, encoding="utf-8")
    return FileVault(tmp_path)


def _workflow(vault, session, make_generator, settings=None):
    gen = make_generator(session, settings)
    return NoteWorkflow(gen, source=vault, sink=vault, settings=gen.settings, today=lambda: date(2024, 5, 17))


def test_summary_is_appended_under_heading(vault, make_generator):
    wf = _workflow(vault, FakeSession(make_response(choices("  - light -> sugar \n"))), make_generator)
    outcome = wf.summarize("bio/plants.md")
    assert outcome.ok and outcome.task is NoteTask.SUMMARY
    assert vault.read("bio/plants.md") == NOTE + "\n\n### Summary\n- light -> sugar"


def test_flashcards_written_tagged_and_linked(vault, make_generator):
    session = FakeSession(make_response(choices("What powers photosynthesis?\n?\nLight.")))
    outcome = _workflow(vault, session, make_generator).flashcards("bio/plants.md")

    assert outcome.target == "07-learning/plants-flashcard.md"
    assert vault.read(outcome.target) == (
        "What powers photosynthesis?\n?\nLight.\n\n#learning #learning/2024-05"
    )
    assert vault.read("bio/plants.md") == NOTE + "\n [[07-learning/plants-flashcard.md|Learning Flashcard]]"
    # the note text went out, not the key
    user = session.calls[0]["json"]["messages"][1]["content"]
    assert user.endswith(NOTE)


def test_flashcard_link_at_cursor(vault, make_generator):
    wf = _workflow(vault, FakeSession(make_response(choices("Q\n?\nA"))), make_generator)
    wf.flashcards("bio/plants.md", cursor=len("Photosynthesis"))
    assert vault.read("bio/plants.md").startswith(
        "Photosynthesis [[07-learning/plants-flashcard.md|Learning Flashcard]] turns light"
    )


def test_flashcards_existing_note_is_overwritten(vault, make_generator):
    vault.write("07-learning/plants-flashcard.md", "old cards")
    wf = _workflow(vault, FakeSession(make_response(choices("new cards"))), make_generator)
    wf.flashcards("bio/plants.md", link=False)
    assert vault.read("07-learning/plants-flashcard.md").startswith("new cards")
    assert vault.read("bio/plants.md") == NOTE


def test_month_tag_can_be_disabled(vault, make_generator):
    settings = Settings(_env_file=None, OPENAI_API_KEY="sk-test", TAG_BY_MONTH=False, LEARNING_TAG="srs")
    wf = _workflow(vault, FakeSession(make_response(choices("cards"))), make_generator, settings)
    outcome = wf.flashcards("bio/plants.md")
    assert vault.read(outcome.target) == "cards\n\n#srs"


def test_failure_writes_nothing(vault, make_generator, tmp_path):
    session = FakeSession(error=requests.ConnectionError("offline"))
    wf = _workflow(vault, session, make_generator)

    outcome = wf.flashcards("bio/plants.md")
    assert not outcome.ok
    assert outcome.result.reason is FailureReason.TRANSPORT
    assert outcome.target is None and outcome.link is None
    assert not (tmp_path / "07-learning").exists()

    assert not wf.summarize("bio/plants.md").ok
    assert vault.read("bio/plants.md") == NOTE


def test_missing_note_raises(vault, make_generator):
    wf = _workflow(vault, FakeSession(), make_generator)
    with pytest.raises(FileNotFoundError):
        wf.summarize("bio/missing.md")


def test_whitespace_completion_writes_nothing(vault, make_generator, tmp_path):
    wf = _workflow(vault, FakeSession(make_response(choices("   \n"))), make_generator)

    assert not wf.summarize("bio/plants.md").ok
    assert not wf.flashcards("bio/plants.md").ok
    assert vault.read("bio/plants.md") == NOTE
    assert not (tmp_path / "07-learning").exists()
