"""Location of a repository and of the files inside its database."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ignore import is_excluded as _is_excluded
from .ignore import parse_ignore_patterns

DB_NAME = ".mygit"


def global_config_path(db_name: str = DB_NAME) -> Path:
    """The per-user configuration file, e.g. ``~/.mygitconfig``."""
    return Path.home() / f"{db_name}config"


@dataclass(frozen=True)
class Repository:
    """A working directory whose root holds the database directory."""

    root: Path
    db_name: str = DB_NAME
    ignore_patterns: tuple[str, ...] = ()

    @classmethod
    def open(cls, root, db_name: str = DB_NAME) -> "Repository":
        """Open the repository rooted at ``root`` and load its ignore patterns."""
        root_path = Path(root).resolve()
        ignore_file = root_path / f"{db_name}ignore"
        patterns: list[str] = []
        if ignore_file.is_file():
            patterns = parse_ignore_patterns(
                ignore_file.read_text(encoding="utf-8", errors="surrogateescape")
            )
        return cls(root_path, db_name, tuple(patterns))

    @classmethod
    def find(cls, start=None, db_name: str = DB_NAME) -> "Repository | None":
        """Search ``start`` and its parents for a database; None if there is none."""
        origin = Path(start if start is not None else ".").resolve()
        for directory in (origin, *origin.parents):
            if (directory / db_name).is_dir():
                return cls.open(directory, db_name)
        return None

    @property
    def db_path(self) -> Path:
        return self.root / self.db_name

    @property
    def head_path(self) -> Path:
        return self.db_path / "HEAD"

    @property
    def index_path(self) -> Path:
        return self.db_path / "index"

    @property
    def local_config_path(self) -> Path:
        return self.db_path / "config"

    @property
    def ignore_path(self) -> Path:
        return self.root / f"{self.db_name}ignore"

    @property
    def refs_heads_path(self) -> Path:
        return self.db_path / "refs" / "heads"

    def branch_path(self, name: str) -> Path:
        return self.refs_heads_path / name

    def object_dir(self, digest: str) -> Path:
        return self.db_path / "objects" / digest[:2]

    def object_path(self, digest: str) -> Path:
        return self.object_dir(digest) / digest[2:]

    def in_root(self, path) -> Path:
        """``path`` (relative to the root) joined onto the root."""
        return self.root / path

    def in_db(self, path) -> Path:
        """``path`` (relative to the database) joined onto the database directory."""
        return self.db_path / path

    def is_excluded(self, path) -> bool:
        return _is_excluded(str(path), self.ignore_patterns, self.db_name)