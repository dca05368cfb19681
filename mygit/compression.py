"""Compression of stored objects and SHA-1 digests."""

from __future__ import annotations

import hashlib
import zlib

from .errors import MyGitError

BEST_COMPRESSION = 9

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _to_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode(_ENCODING, _ERRORS)
    return bytes(data)


def compress(data: str | bytes, level: int = BEST_COMPRESSION) -> bytes:
    """Compress text or bytes with zlib; empty input gives empty output."""
    raw = _to_bytes(data)
    if not raw:
        return b""
    try:
        return zlib.compress(raw, level)
    except zlib.error as exc:
        raise MyGitError(f"Exception during zlib compression: {exc}") from exc


def decompress(data: bytes) -> str:
    """Inflate zlib data back into text; empty input gives an empty string."""
    if not data:
        return ""
    try:
        raw = zlib.decompress(data)
    except zlib.error as exc:
        raise MyGitError(f"Exception during zlib decompression: {exc}") from exc
    return raw.decode(_ENCODING, _ERRORS)


def sha1_hex(text: str | bytes) -> str:
    """Return the hex SHA-1 of ``text``, which ends at its first NUL character."""
    raw = _to_bytes(text).split(b"\0", 1)[0]
    return hashlib.sha1(raw).hexdigest()