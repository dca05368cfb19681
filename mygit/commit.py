"""Commit objects, their log format and their date stamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .compression import compress, sha1_hex

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _utc(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return now.astimezone(timezone.utc)


def commit_date_stamp(now: datetime | None = None) -> str:
    """Seconds since the epoch followed by the UTC offset, as in commit headers."""
    return f"{int(_utc(now).timestamp())} +0000"


def commit_date(now: datetime | None = None) -> str:
    """A readable UTC date for the ``date`` header of a commit."""
    return _utc(now).strftime("%a, %d %b %Y %H:%M:%S +0000 (GMT)")


@dataclass(frozen=True)
class Commit:
    """A snapshot: a tree, its parent commits, authorship and a message."""

    tree: str
    parents: tuple[str, ...]
    author: str
    committer: str
    date_stamp: str
    date: str
    message: str

    @property
    def contents(self) -> str:
        """The body stored in the object file."""
        parents = "".join(f"parent {parent}\n" for parent in self.parents if parent)
        return (
            f"tree {self.tree}\n"
            f"{parents}"
            f"author {self.author} {self.date_stamp}\n"
            f"comitter {self.committer} {self.date_stamp}\n"
            f"date {self.date}\n"
            f"\n{self.message}\n"
        )

    def serialize(self) -> str:
        """The text the commit's digest is computed from (only the tree line)."""
        return f"commit;tree {self.tree}\n;"

    def digest(self) -> str:
        return sha1_hex(self.serialize())

    def store(self, repo, digest: str) -> Path:
        """Write the commit compressed into the object store under ``digest``."""
        repo.object_dir(digest).mkdir(parents=True, exist_ok=True)
        body = self.contents
        size = len(body.encode(_ENCODING, _ERRORS))
        target = repo.object_path(digest)
        target.write_bytes(compress(f"type=commit\nsize={size}\n\n{body}"))
        return target


def format_log_entry(content: str, digest: str) -> str:
    """Render a commit body as one entry of the log."""
    parts = [f"\033[1;33mcommit {digest}\033[0m\n"]
    message = ""
    start = content.find("author ")
    if start != -1:
        header, separator, message = content[start:].partition("\n\n")
        lines = header.split("\n")
        if not separator:
            lines = lines[:-1]
        for line in lines:
            key, _, value = line.partition(" ")
            if key == "date":
                parts.append(f"Date: {value}\n")
            elif key == "author":
                parts.append(f"Author: {value}\n")
    parts.append(f"\n\t{message}\n\033[1;32m___\033[0m\n\n")
    return "".join(parts)


def extract_parent(content: str) -> str:
    """The first parent digest named in a commit body, or an empty string."""
    marker = "parent "
    position = content.find(marker)
    if position == -1:
        return ""
    return content[position + len(marker):].split("\n", 1)[0]