"""The staging area: a compressed list of file paths and their blob digests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from .compression import compress, decompress


def parse_index(text: str) -> dict[str, str]:
    """Read ``digest path`` lines; the first entry for a path wins."""
    entries: dict[str, str] = {}
    for line in text.split("\n")[:-1]:
        if not line:
            continue
        digest, _, path = line.partition(" ")
        entries.setdefault(path, digest)
    return dict(sorted(entries.items()))


def read_index(repo) -> dict[str, str]:
    """The index entries of ``repo``, sorted by path; empty if there is no index."""
    path = Path(repo.index_path)
    raw = path.read_bytes() if path.is_file() else b""
    return parse_index(decompress(raw))


def write_index(repo, entries: Mapping[str, str]) -> None:
    """Replace the index of ``repo`` with ``entries``."""
    text = "".join(f"{digest} {path}\n" for path, digest in sorted(entries.items()))
    Path(repo.index_path).write_bytes(compress(text))


def update_index(repo, to_add: Mapping[str, str], to_remove: Iterable[str] = ()) -> dict[str, str]:
    """Add or replace ``to_add``, drop ``to_remove``, write and return the index."""
    entries = read_index(repo)
    entries.update(to_add)
    for path in to_remove:
        entries.pop(path, None)
    write_index(repo, entries)
    return dict(sorted(entries.items()))