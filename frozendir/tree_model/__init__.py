"""Immutable in-memory file/directory tree model.

This package contains the tree primitives:
- file and directory datatypes over borrowed or owned storage
- recursive lookup and filtered projections over directory children
- literal construction from nested mappings
"""

from __future__ import annotations

from .directory import Directory, Entry
from .file import File, Metadata
from .literal import build_directory

__all__ = [
    "Directory",
    "Entry",
    "File",
    "Metadata",
    "build_directory",
]
