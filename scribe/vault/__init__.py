from .files import FileVault
from .types import TextSink, TextSource, VaultPathError

__all__ = ["FileVault", "TextSink", "TextSource", "VaultPathError"]
