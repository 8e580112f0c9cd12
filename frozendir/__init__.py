"""Public package surface for frozendir.

Read-only in-memory directory trees built from literal data or a recursive
filesystem snapshot, with path lookup, glob search, and extraction.
"""

from __future__ import annotations

from .config import ReaderSettings
from .errors import NonUtf8NameError, PatternError, UnsupportedEntryError
from .fs import extract_directory, read_directory
from .globs import Globs, MatchOptions, Pattern
from .storage import Borrowed, Cow, Owned
from .tree_model import Directory, Entry, File, Metadata, build_directory

__all__ = [
    "Borrowed",
    "Cow",
    "Directory",
    "Entry",
    "File",
    "Globs",
    "MatchOptions",
    "Metadata",
    "NonUtf8NameError",
    "Owned",
    "Pattern",
    "PatternError",
    "ReaderSettings",
    "UnsupportedEntryError",
    "build_directory",
    "extract_directory",
    "read_directory",
]
