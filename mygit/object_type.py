"""Kinds of object kept in the object store."""

from __future__ import annotations

import enum

from .errors import MyGitError


class ObjectType(enum.Enum):
    """The type of a stored object."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"

    @classmethod
    def parse(cls, text: str) -> "ObjectType":
        """Read a type name, raising MyGitError for anything unknown."""
        try:
            return cls(text)
        except ValueError:
            raise MyGitError("Unknown type (valid types : blob, commit, tree)") from None

    def __str__(self) -> str:
        return self.value