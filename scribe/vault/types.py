# Capabilities the note workflow needs from a host: read a note, write or
# create a note, insert text into a note. FileVault is the on-disk version.

from __future__ import annotations
from typing import Optional, Protocol


class TextSource(Protocol):
    def read(self, path: str) -> str:
        ...


class TextSink(Protocol):
    def write(self, path: str, text: str) -> None:
        """Create the note, or overwrite it when it already exists."""
        ...

    def insert(self, path: str, text: str, offset: Optional[int] = None) -> None:
        """Insert at a character offset (the cursor); append when offset is None."""
        ...


class VaultPathError(ValueError):
    """A vault-relative path that would resolve outside the vault root."""
