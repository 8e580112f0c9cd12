"""Filesystem reading into owned trees and extraction back onto disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import ReaderSettings
from .errors import NonUtf8NameError, UnsupportedEntryError
from .storage import Owned
from .tree_model.directory import Directory, Entry, PathArg
from .tree_model.file import File, Metadata

logger = logging.getLogger(__name__)


def _utf8_name(child: os.DirEntry[str]) -> str:
    """Return the entry name, rejecting names that are not valid UTF-8."""
    try:
        child.name.encode("utf-8")
    except UnicodeEncodeError:
        raise NonUtf8NameError("Filename contains non-utf8 characters", child.path) from None
    return child.name


def _child_path(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


def _read_entry(child: os.DirEntry[str], path: str, settings: ReaderSettings) -> Entry:
    follow = settings.follow_symlinks
    if child.is_file(follow_symlinks=follow):
        with open(child.path, "rb") as handle:
            contents = handle.read()
        file = File(Owned(path), Owned(contents))
        if settings.include_metadata:
            file = file.with_metadata(Metadata.from_stat(child.stat(follow_symlinks=follow)))
        return file
    if child.is_dir(follow_symlinks=follow):
        return Directory(Owned(path), Owned(_read_entries(child.path, path, settings)))
    raise UnsupportedEntryError(
        "Directory contains something that is neither a file nor a directory",
        child.path,
    )


def _read_entries(directory: str, parent: str, settings: ReaderSettings) -> tuple[Entry, ...]:
    """Read all children of ``directory``; any failure aborts the whole subtree."""
    with os.scandir(directory) as listing:
        children = list(listing)
    if settings.sort_entries:
        children.sort(key=lambda child: child.name)
    logger.debug("Reading %s entries from %s", len(children), directory)

    return tuple(
        _read_entry(child, _child_path(parent, _utf8_name(child)), settings)
        for child in children
    )


def read_directory(root: PathArg, settings: ReaderSettings | None = None) -> Directory:
    """Recursively read ``root`` into an owned tree.

    The returned root directory has an empty path and every descendant path
    is relative to ``root``. Raises ``UnsupportedEntryError`` for entries that
    are neither plain files nor directories, ``NonUtf8NameError`` for names
    that are not UTF-8, and ``OSError`` for any failure to open or read.

    ``settings=None`` means ``ReaderSettings()``; persisted defaults apply
    only when passed explicitly, e.g. ``read_directory(root, load_reader_settings())``.
    """
    if settings is None:
        settings = ReaderSettings()
    root_path = os.fspath(root)
    logger.debug("Reading directory tree at %s (%s)", root_path, settings)
    try:
        entries = _read_entries(root_path, "", settings)
    except OSError as exc:
        logger.debug("Failed to read directory tree at %s: %s", root_path, exc)
        raise
    return Directory(Owned(""), Owned(entries))


def _extract_entries(directory: Directory, base: Path) -> None:
    for entry in directory.entries:
        target = base / entry.path
        if isinstance(entry, Directory):
            target.mkdir(parents=True, exist_ok=True)
            _extract_entries(entry, base)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "xb") as handle:
                handle.write(entry.contents)
            logger.debug("Wrote %s (%s bytes)", target, len(entry.contents))


def extract_directory(directory: Directory, base_path: PathArg) -> None:
    """Write ``directory`` under ``base_path``, creating directories as needed.

    Files are created exclusively: an existing file at a target path raises
    ``FileExistsError``. Nothing written before a failure is rolled back.
    """
    base = Path(base_path)
    logger.debug("Extracting directory tree into %s", base)
    try:
        base.mkdir(parents=True, exist_ok=True)
        _extract_entries(directory, base)
    except OSError as exc:
        logger.debug("Extraction into %s stopped: %s", base, exc)
        raise


__all__ = [
    "read_directory",
    "extract_directory",
]
