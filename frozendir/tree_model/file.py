"""File leaf entries and their optional timestamp metadata."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from ..storage import Cow, borrow

if TYPE_CHECKING:
    from .directory import Directory


def _timestamp(seconds: float | None) -> datetime | None:
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@dataclass(frozen=True)
class Metadata:
    """Timestamps observed for a file.

    ``modified`` is always present; ``accessed`` and ``created`` are ``None``
    on platforms that do not report them.
    """

    modified: datetime
    accessed: datetime | None = None
    created: datetime | None = None

    @classmethod
    def from_stat(cls, stat: os.stat_result) -> Metadata:
        """Build metadata from an ``os.stat`` result."""
        created = getattr(stat, "st_birthtime", None)
        return cls(
            modified=_timestamp(stat.st_mtime),
            accessed=_timestamp(stat.st_atime),
            created=_timestamp(created),
        )


@dataclass(frozen=True)
class File:
    """A file with its path and full contents held in memory.

    Plain ``str``/``bytes`` arguments are stored as borrowed data; pass
    ``Owned`` values to give the file its own copy.
    """

    raw_path: Cow[str]
    raw_contents: Cow[bytes]
    metadata: Metadata | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_path", borrow(self.raw_path))
        object.__setattr__(self, "raw_contents", borrow(self.raw_contents))
        if isinstance(self.raw_contents.value, str):
            raise TypeError("file contents must be bytes, not str")

    @property
    def path(self) -> PurePosixPath:
        """Root-relative path of this file."""
        return PurePosixPath(self.raw_path.value)

    @property
    def contents(self) -> bytes | memoryview:
        """Raw file contents."""
        return self.raw_contents.value

    def contents_utf8(self) -> str | None:
        """Return contents decoded as UTF-8, or ``None`` when not valid UTF-8."""
        try:
            return str(self.contents, "utf-8")
        except UnicodeDecodeError:
            return None

    def with_metadata(self, metadata: Metadata) -> File:
        """Return a copy of this file with ``metadata`` attached."""
        return dataclasses.replace(self, metadata=metadata)

    def to_owned(self) -> File:
        return File(self.raw_path.to_owned(), self.raw_contents.to_owned(), self.metadata)

    def as_file(self) -> File:
        return self

    def as_dir(self) -> Directory | None:
        return None

    def children(self) -> tuple[()]:
        """Files never have children."""
        return ()

    def __repr__(self) -> str:
        return (
            f"File(path={self.raw_path.value!r}, contents=<{len(self.raw_contents)} bytes>, "
            f"metadata={self.metadata!r})"
        )


__all__ = [
    "Metadata",
    "File",
]
