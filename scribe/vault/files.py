from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .types import VaultPathError

logger = logging.getLogger(__name__)


class FileVault:
    """A directory of Markdown notes addressed by vault-relative paths."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise VaultPathError(f"path escapes the vault: {path}")
        return target

    def relative(self, path: Union[str, Path]) -> str:
        """Vault-relative posix path for a note given absolute or relative."""
        p = Path(path)
        target = p.resolve() if p.is_absolute() else self.resolve(str(p))
        if target != self.root and self.root not in target.parents:
            raise VaultPathError(f"path escapes the vault: {path}")
        return target.relative_to(self.root).as_posix()

    def exists(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def read(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def write(self, path: str, text: str) -> None:
        target = self.resolve(path)
        existed = target.exists()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.info("%s %s", "updated" if existed else "created", path)

    def insert(self, path: str, text: str, offset: Optional[int] = None) -> None:
        current = self.read(path)
        if offset is None:
            updated = current + text
        else:
            # clamp so a stale cursor still lands inside the note
            at = max(0, min(int(offset), len(current)))
            updated = current[:at] + text + current[at:]
        self.resolve(path).write_text(updated, encoding="utf-8")
        logger.info("inserted %d chars into %s", len(text), path)
