# Naming, linking and tagging rules for generated notes.

from __future__ import annotations
from datetime import date
from pathlib import PurePosixPath
from typing import List, Optional


def flashcard_note_path(source_path: str, folder: str) -> str:
    stem = PurePosixPath(source_path).stem
    return str(PurePosixPath(folder) / f"{stem}-flashcard.md")


def wiki_link(target: str, label: Optional[str] = None) -> str:
    return f"[[{target}|{label}]]" if label else f"[[{target}]]"


def month_tag(tag: str, when: date) -> str:
    return f"#{tag}/{when:%Y-%m}"


def tag_line(tag: str, when: Optional[date] = None) -> str:
    """'#learning', plus '#learning/2024-05' when a month is given."""
    tags: List[str] = [f"#{tag}"]
    if when is not None:
        tags.append(month_tag(tag, when))
    return " ".join(tags)


def with_tags(text: str, tag: str, when: Optional[date] = None) -> str:
    return f"{text}\n\n{tag_line(tag, when)}"


def summary_block(heading: str, summary: str) -> str:
    return f"\n\n{heading}\n{summary}"
