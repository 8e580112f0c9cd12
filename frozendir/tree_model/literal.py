"""Build borrowed trees from literal nested mappings.

Nested mappings are directories; ``bytes``/``memoryview`` values are files
stored without copying; ``str`` values are files encoded as UTF-8.

Example::

    build_directory({
        "readme.txt": "Hello, world!",
        "docs": {
            "guide.txt": b"A guide",
        },
    })
"""

from __future__ import annotations

from collections.abc import Mapping

from .directory import Directory, Entry
from .file import File


def _child_path(parent: str, name: str) -> str:
    if not name or "/" in name or name in {".", ".."}:
        raise ValueError(f"invalid entry name: {name!r}")
    return f"{parent}/{name}" if parent else name


def _build_entries(parent: str, tree: Mapping[str, object]) -> tuple[Entry, ...]:
    entries: list[Entry] = []
    for name, value in tree.items():
        path = _child_path(parent, name)
        if isinstance(value, Mapping):
            entries.append(Directory(path, _build_entries(path, value)))
        elif isinstance(value, str):
            entries.append(File(path, value.encode("utf-8")))
        elif isinstance(value, (bytes, memoryview)):
            entries.append(File(path, value))
        else:
            raise TypeError(f"unsupported literal for {path!r}: {type(value).__name__}")
    return tuple(entries)


def build_directory(tree: Mapping[str, object], path: str = "") -> Directory:
    """Return a tree rooted at ``path`` with entries in mapping order."""
    return Directory(path, _build_entries(path, tree))


__all__ = [
    "build_directory",
]
