# ============================================================
# Note workflow
# ------------------------------------------------------------
# The two vault commands:
#   - summarize: append a "### Summary" block to the note itself
#   - flashcards: write <folder>/<stem>-flashcard.md, tag it, and
#     link it from the source note (at the cursor, or appended)
# Nothing is written when the completion fails.
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from scribe.generate import CompletionResult, NoteGenerator, NoteTask
from scribe.vault import TextSink, TextSource
from scribe.vault.notes import flashcard_note_path, summary_block, wiki_link, with_tags

logger = logging.getLogger(__name__)


@dataclass
class NoteOutcome:
    task: NoteTask
    source: str
    result: CompletionResult
    target: Optional[str] = None
    link: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result.ok


class NoteWorkflow:
    def __init__(
        self,
        generator: NoteGenerator,
        source: TextSource,
        sink: TextSink,
        settings,
        today: Callable[[], date] = date.today,
    ):
        self.generator = generator
        self.source = source
        self.sink = sink
        self.settings = settings
        self.today = today

    def summarize(self, note_path: str) -> NoteOutcome:
        content = self.source.read(note_path)
        result = self.generator.summarize(content)
        outcome = NoteOutcome(task=NoteTask.SUMMARY, source=note_path, result=result)
        if not result.ok:
            logger.error("failed to summarize %s (%s)", note_path, result.describe())
            return outcome

        self.sink.insert(note_path, summary_block(self.settings.SUMMARY_HEADING, result.text))
        outcome.target = note_path
        return outcome

    def flashcards(self, note_path: str, cursor: Optional[int] = None, link: bool = True) -> NoteOutcome:
        content = self.source.read(note_path)
        result = self.generator.flashcards(content)
        outcome = NoteOutcome(task=NoteTask.FLASHCARDS, source=note_path, result=result)
        if not result.ok:
            logger.error("failed to create flashcards for %s (%s)", note_path, result.describe())
            return outcome

        target = flashcard_note_path(note_path, self.settings.FLASHCARD_FOLDER)
        month = self.today() if self.settings.TAG_BY_MONTH else None
        self.sink.write(target, with_tags(result.text, self.settings.LEARNING_TAG, month))
        outcome.target = target

        if link:
            outcome.link = wiki_link(target, self.settings.FLASHCARD_LINK_LABEL)
            # appended links start on their own line, cursor inserts go in as-is
            text = f" {outcome.link}" if cursor is not None else f"\n {outcome.link}"
            self.sink.insert(note_path, text, cursor)
        return outcome
