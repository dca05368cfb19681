"""Path cleaning and conversion between repository, working and current paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .errors import MyGitError

_SPECIAL = re.compile(r"\.\./+|\./+|//+")


def clean_path(path: str) -> str:
    """Drop ``./`` segments and repeated slashes; an empty result becomes ``./``."""
    pieces: list[str] = []
    position = 0
    for match in _SPECIAL.finditer(path):
        pieces.append(path[position:match.start()])
        token = match.group()
        if token.startswith("../"):
            pieces.append("../")
        elif token.startswith("//") and any(pieces):
            pieces.append("/")
        position = match.end()
    pieces.append(path[position:])
    cleaned = "".join(pieces)
    return "./" if cleaned in ("", ".") else cleaned


def _split(path) -> tuple[Path, str]:
    """Separate a path into its directory and file name (empty for directories)."""
    candidate = Path(path)
    if candidate.is_dir():
        return candidate, ""
    return candidate.parent, candidate.name


def relative_to_root(repo, path) -> str:
    """The path of ``path`` relative to the repository root."""
    directory, name = _split(path)
    absolute = (Path.cwd() / directory).resolve()
    try:
        relative = absolute.relative_to(repo.root)
    except ValueError:
        raise MyGitError(f"'{path}' is outside the repository.") from None
    if relative == Path("."):
        return clean_path(name)
    return clean_path(f"{relative.as_posix()}/{name}")


def relative_to_cwd(path) -> str:
    """The path of ``path`` relative to the current directory."""
    directory, name = _split(path)
    cwd = Path.cwd().resolve()
    absolute = (cwd / directory).resolve()
    if absolute == cwd:
        return name
    if absolute.is_relative_to(cwd):
        return clean_path(f"{absolute.relative_to(cwd).as_posix()}/{name}")
    if cwd.is_relative_to(absolute):
        depth = len(cwd.relative_to(absolute).parts)
        return clean_path("../" * depth + name)
    return str(path)


def create_parent_dirs(path) -> str | None:
    """Create the missing directories above ``path``; return the first one created."""
    text = str(path)
    first_created = None
    for match in re.finditer("/", text):
        prefix = text[:match.end()]
        if not os.path.isdir(prefix):
            os.mkdir(prefix)
            if first_created is None:
                first_created = prefix
    return first_created


def is_dir_empty(path) -> bool:
    """Whether the directory ``path`` has no entries."""
    with os.scandir(path) as entries:
        return next(entries, None) is None


def remove_empty_parent(path) -> Path | None:
    """Remove the outermost empty directory along ``path``; return it if removed."""
    target = Path(path)
    for candidate in (*reversed(target.parents), target):
        if candidate == Path(".") or not candidate.is_dir():
            continue
        try:
            empty = is_dir_empty(candidate)
        except OSError:
            continue
        if empty:
            os.rmdir(candidate)
            return candidate
    return None