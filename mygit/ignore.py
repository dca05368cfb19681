"""Ignore-file patterns and matching."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Iterable


def parse_ignore_patterns(contents: str) -> list[str]:
    """Split ignore-file contents into patterns, one per line."""
    patterns = contents.split("\n")
    if patterns[-1] == "":
        patterns.pop()
    return patterns


def is_excluded(path: str, patterns: Iterable[str], db_name: str = ".mygit") -> bool:
    """Whether ``path`` lies in the database or contains an ignored pattern."""
    text = str(path)
    if fnmatchcase(text, f"*{db_name}*"):
        return True
    return any(fnmatchcase(text, f"*{pattern}*") for pattern in patterns)