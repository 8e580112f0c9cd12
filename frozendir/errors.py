"""Exception types raised by tree construction and glob compilation."""

from __future__ import annotations

import errno
import os


class PatternError(ValueError):
    """Malformed glob pattern, reported before any traversal starts."""

    def __init__(self, pos: int, msg: str) -> None:
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")
        self.pos = pos
        self.msg = msg


class UnsupportedEntryError(OSError):
    """Directory entry the reader cannot represent as a file or directory."""

    def __init__(self, message: str, filename: str | os.PathLike[str] | None = None) -> None:
        super().__init__(errno.ENOTSUP, message, filename)


class NonUtf8NameError(UnsupportedEntryError):
    """Filesystem name that does not decode as UTF-8."""


__all__ = [
    "PatternError",
    "UnsupportedEntryError",
    "NonUtf8NameError",
]
