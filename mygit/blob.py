"""Blob objects: stored snapshots of a single file's contents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .compression import compress, decompress, sha1_hex

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _read_bytes(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


def _read_text(path) -> str:
    return _read_bytes(path).decode(_ENCODING, _ERRORS)


@dataclass(frozen=True)
class Blob:
    """A file's path relative to the repository root, with its contents."""

    path: str
    contents: str

    @classmethod
    def from_file(cls, path, full_path=None) -> "Blob":
        """Read the file at ``full_path`` (or ``path``) and record it under ``path``."""
        source = Path(full_path if full_path is not None else path)
        return cls(str(path), _read_text(source))

    def serialize(self) -> str:
        """The text the blob's digest is computed from."""
        return f"blob;{self.path};{self.contents};"

    def digest(self) -> str:
        return sha1_hex(self.serialize())


def store_blob(repo, blob: Blob, digest: str) -> Path:
    """Write ``blob`` compressed into the object store under ``digest``."""
    repo.object_dir(digest).mkdir(parents=True, exist_ok=True)
    size = len(blob.contents.encode(_ENCODING, _ERRORS))
    data = f"type=blob\nfilepath={blob.path}\nsize={size}\n\n{blob.contents}"
    target = repo.object_path(digest)
    target.write_bytes(compress(data))
    return target


def create_blob(repo, path: str) -> str:
    """Store the file at ``path`` (relative to the root) and return its digest."""
    blob = Blob.from_file(path, repo.in_root(path))
    digest = blob.digest()
    store_blob(repo, blob, digest)
    return digest


def object_type_of(raw: str) -> str:
    """The value of the first ``key=value`` header of a decompressed object."""
    position = raw.find("=")
    if position == -1:
        return ""
    return raw[position + 1:].split("\n", 1)[0]


def object_content(raw: str) -> str:
    """The body of a decompressed object, after the blank line ending its headers."""
    _, separator, body = raw.partition("\n\n")
    return body if separator else ""


def read_object_content(repo, digest: str) -> str:
    """The body of the stored object ``digest``; empty if it does not exist."""
    return object_content(decompress(_read_bytes(repo.object_path(digest))))