# Prompt fragments per note task: the fixed system persona and the default
# instruction template placed before the note content.

from .types import NoteTask

# Goes between the template and the note content in the user message.
PROMPT_SEPARATOR = " \n\n"

SUMMARIZER_PERSONA = "You're a summarizer that writes short, precise summaries in key items."

FLASHCARD_TEACHER_PERSONA = (
    "You're a teacher that creates short and memorable flashcards for spaced repetition learning."
)

SUMMARY_TEMPLATE = "Give a short, precise summary in key items for the following content:"

FLASHCARD_TEMPLATE = """\
Write (multiple) flashcards that summarize relevant key items from content. \
Each flashcard must have 3 lines: A short question, then a single ? and a third line \
with just the answer not longer than 2 sentences. \
Example: ```What are Flashcards?
?
Summaries for Learning
``` \
Never use sources, related items, links, topics and common knowledge for flashcards. \
Correct facts if needed. If the content is short, try to find one more flashcard \
with a relevant question. Questions are not numbered! The Content:"""

PERSONAS = {
    NoteTask.SUMMARY: SUMMARIZER_PERSONA,
    NoteTask.FLASHCARDS: FLASHCARD_TEACHER_PERSONA,
}

DEFAULT_TEMPLATES = {
    NoteTask.SUMMARY: SUMMARY_TEMPLATE,
    NoteTask.FLASHCARDS: FLASHCARD_TEMPLATE,
}


def persona_for(task: NoteTask) -> str:
    return PERSONAS[NoteTask(task)]
