"""Directory nodes: recursive lookup, projections, search, and extraction."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Mapping, Union

from ..globs import Globs, MatchOptions, Pattern
from ..storage import Cow, Owned, borrow
from .file import File

if TYPE_CHECKING:
    from ..fs import ReaderSettings

PathArg = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Directory:
    """A directory with an ordered tuple of child entries.

    Child paths are root-relative and stored on each entry; lookups compare
    against those stored paths rather than rebuilding them from nesting. A
    plain list of entries is frozen into a borrowed tuple.
    """

    raw_path: Cow[str]
    raw_entries: Cow[tuple[Entry, ...]] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_path", borrow(self.raw_path))
        entries = self.raw_entries
        if isinstance(entries, list):
            entries = tuple(entries)
        object.__setattr__(self, "raw_entries", borrow(entries))

    @classmethod
    def from_fs(cls, path: PathArg, settings: ReaderSettings | None = None) -> Directory:
        """Read a real directory recursively into an owned tree."""
        from ..fs import read_directory

        return read_directory(path, settings)

    @classmethod
    def from_mapping(cls, tree: Mapping[str, object]) -> Directory:
        """Build a borrowed tree from nested mappings of names to contents."""
        from .literal import build_directory

        return build_directory(tree)

    @property
    def path(self) -> PurePosixPath:
        """Root-relative path of this directory (empty for a tree root)."""
        return PurePosixPath(self.raw_path.value)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Direct children in construction order."""
        return self.raw_entries.value

    def files(self) -> Iterator[File]:
        """Yield the direct children that are files."""
        for entry in self.entries:
            file = entry.as_file()
            if file is not None:
                yield file

    def dirs(self) -> Iterator[Directory]:
        """Yield the direct children that are directories."""
        for entry in self.entries:
            directory = entry.as_dir()
            if directory is not None:
                yield directory

    def walk(self) -> Iterator[Entry]:
        """Yield every descendant entry in pre-order."""
        for entry in self.entries:
            yield entry
            directory = entry.as_dir()
            if directory is not None:
                yield from directory.walk()

    def get_entry(self, path: PathArg) -> Entry | None:
        """Return the first entry, at any depth, whose path equals ``path``.

        Search is pre-order depth-first: a subdirectory is searched in full
        before its next sibling is compared.
        """
        target = PurePosixPath(os.fspath(path))
        return self._find_entry(target)

    def _find_entry(self, target: PurePosixPath) -> Entry | None:
        for entry in self.entries:
            if entry.path == target:
                return entry
            directory = entry.as_dir()
            if directory is not None:
                nested = directory._find_entry(target)
                if nested is not None:
                    return nested
        return None

    def get_file(self, path: PathArg) -> File | None:
        entry = self.get_entry(path)
        return entry.as_file() if entry is not None else None

    def get_dir(self, path: PathArg) -> Directory | None:
        entry = self.get_entry(path)
        return entry.as_dir() if entry is not None else None

    def contains(self, path: PathArg) -> bool:
        return self.get_entry(path) is not None

    def find(self, pattern: str, options: MatchOptions | None = None) -> Globs:
        """Lazily search the whole tree for entries matching a glob pattern.

        Raises ``PatternError`` immediately for malformed patterns.
        """
        return Globs(Pattern(pattern, options), self)

    def extract(self, base_path: PathArg) -> None:
        """Write this subtree under ``base_path``.

        Existing files are never overwritten; a failure leaves whatever was
        already written in place.
        """
        from ..fs import extract_directory

        extract_directory(self, base_path)

    def to_owned(self) -> Directory:
        """Return a copy of the tree with every path and buffer owned."""
        return Directory(
            self.raw_path.to_owned(),
            Owned(tuple(entry.to_owned() for entry in self.entries)),
        )

    def as_file(self) -> File | None:
        return None

    def as_dir(self) -> Directory:
        return self

    def children(self) -> tuple[Entry, ...]:
        return self.entries


Entry = Union[Directory, File]


__all__ = [
    "Directory",
    "Entry",
]
