"""Glob pattern compilation and lazy stack-based tree search.

Pattern syntax:
- ``?`` matches any single character
- ``*`` matches any (possibly empty) sequence of characters
- ``**`` matches any number of whole path components and must stand alone
  between separators (``a/**/b``, ``**/x``, ``a/**``)
- ``[abc]``, ``[a-z]`` match one listed character; ``[!abc]`` negates;
  ``]`` may appear as the first listed character

Patterns are validated up front: a malformed pattern raises ``PatternError``
before any entry is visited.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import PatternError

if TYPE_CHECKING:
    from .tree_model.directory import Directory, Entry

ERROR_WILDCARDS = "wildcards are either regular `*` or recursive `**`"
ERROR_RECURSIVE_WILDCARDS = "recursive wildcards must form a single path component"
ERROR_INVALID_RANGE = "invalid range pattern"

_CLASS_SPECIALS = frozenset("\\]^-[")


@dataclass(frozen=True)
class MatchOptions:
    """Matching switches applied when a pattern is compiled."""

    case_sensitive: bool = True
    require_literal_separator: bool = False
    require_literal_leading_dot: bool = False


def _class_char(ch: str) -> str:
    return "\\" + ch if ch in _CLASS_SPECIALS else ch


def _class_members(chars: str) -> list[str]:
    """Translate bracket contents into regex class members.

    Reversed ranges match nothing and are dropped.
    """
    members: list[str] = []
    i = 0
    while i < len(chars):
        if i + 3 <= len(chars) and chars[i + 1] == "-":
            start, end = chars[i], chars[i + 2]
            if start <= end:
                members.append(f"{_class_char(start)}-{_class_char(end)}")
            i += 3
        else:
            members.append(_class_char(chars[i]))
            i += 1
    return members


def translate(source: str, options: MatchOptions) -> str:
    """Translate a glob pattern into an anchored-by-fullmatch regex source."""
    literal_sep = options.require_literal_separator
    literal_dot = options.require_literal_leading_dot
    any_char = "[^/]" if literal_sep else "."
    # a wildcard may not consume a "." at the start of any path component
    dot_guard = r"(?!(?<![^/])\.)" if literal_dot else ""
    parts: list[str] = []
    last_recursive = False
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]

        if ch == "?":
            parts.append(dot_guard + any_char)
            i += 1
        elif ch == "*":
            old = i
            while i < n and source[i] == "*":
                i += 1
            count = i - old
            if count > 2:
                raise PatternError(old + 2, ERROR_WILDCARDS)
            if count == 2:
                if old != 0 and source[old - 1] != "/":
                    raise PatternError(old - 1, ERROR_RECURSIVE_WILDCARDS)
                if i < n and source[i] == "/":
                    i += 1
                    if not last_recursive:
                        component = r"(?!\.)[^/]*/" if literal_dot else "[^/]*/"
                        parts.append(f"(?:{component})*")
                elif i == n:
                    if not last_recursive:
                        if literal_dot:
                            parts.append(r"(?:(?!\.)[^/]*(?:/(?!\.)[^/]*)*)?")
                        else:
                            parts.append(".*")
                else:
                    raise PatternError(i, ERROR_RECURSIVE_WILDCARDS)
                last_recursive = True
                continue
            parts.append(f"(?:{dot_guard}{any_char})*" if dot_guard else any_char + "*")
        elif ch == "[":
            close = -1
            negated = False
            body_start = i + 1
            if i + 4 <= n and source[i + 1] == "!":
                close = source.find("]", i + 3)
                negated = True
                body_start = i + 2
            elif i + 3 <= n and source[i + 1] != "!":
                close = source.find("]", i + 2)
            if close < 0:
                raise PatternError(i, ERROR_INVALID_RANGE)
            members = _class_members(source[body_start:close])
            if negated:
                if literal_sep:
                    members.append("/")
                parts.append(dot_guard + ("[^" + "".join(members) + "]" if members else any_char))
            elif members:
                prefix = "(?!/)" if literal_sep else ""
                parts.append(dot_guard + prefix + "[" + "".join(members) + "]")
            else:
                parts.append("(?!)")
            i = close + 1
        else:
            parts.append(re.escape(ch))
            i += 1

        last_recursive = False

    return "".join(parts)


@dataclass(frozen=True)
class Pattern:
    """A compiled glob pattern."""

    source: str
    options: MatchOptions | None = None
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        options = self.options if self.options is not None else MatchOptions()
        flags = re.DOTALL
        if not options.case_sensitive:
            flags |= re.IGNORECASE
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "regex", re.compile(translate(self.source, options), flags))

    def matches(self, text: str) -> bool:
        """Return whether the whole of ``text`` matches this pattern."""
        return self.regex.fullmatch(text) is not None

    def matches_path(self, path: str | os.PathLike[str]) -> bool:
        return self.matches(os.fspath(path))


class Globs:
    """Iterator over tree entries whose root-relative path matches a pattern.

    Keeps an explicit stack seeded with the root's children in order. Each
    step pops the most recently pushed entry and pushes its children, so
    subtrees are explored depth-first and siblings come out in reverse order.
    Every entry is visited exactly once.
    """

    def __init__(self, pattern: Pattern, root: Directory) -> None:
        self.pattern = pattern
        self._stack: list[Entry] = list(root.entries)

    def __iter__(self) -> Globs:
        return self

    def __next__(self) -> Entry:
        while self._stack:
            entry = self._stack.pop()
            self._stack.extend(entry.children())
            if self.pattern.matches(entry.raw_path.value):
                return entry
        raise StopIteration


__all__ = [
    "ERROR_WILDCARDS",
    "ERROR_RECURSIVE_WILDCARDS",
    "ERROR_INVALID_RANGE",
    "MatchOptions",
    "Pattern",
    "Globs",
    "translate",
]
