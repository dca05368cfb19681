"""Tree objects: directory listings built from the index."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .blob import object_content
from .compression import compress, decompress, sha1_hex
from .errors import MyGitError
from .pathutil import clean_path

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _read_bytes(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


@dataclass
class Tree:
    """A node of the snapshot: a directory (``tree``) or a file (``blob``)."""

    kind: str = "tree"
    digest: str = ""
    filename: str = ""
    contents: str = ""
    children: list["Tree"] = field(default_factory=list)

    @classmethod
    def from_index(cls, repo, entries: dict, cur_dir: str = "", level: int = 1) -> "Tree":
        """Build the tree for ``cur_dir`` from index entries of files still on disk."""
        tree = cls()
        marker = clean_path(cur_dir + "/") if cur_dir else ""
        seen: set[str] = set()
        for filename, digest in sorted(entries.items()):
            if marker not in filename:
                continue
            prefix = "/".join(filename.split("/")[:level])
            location = repo.in_root(prefix)
            if location.is_dir() and prefix not in seen:
                seen.add(prefix)
                tree.children.append(cls.from_index(repo, entries, prefix, level + 1))
            elif location.is_file():
                tree.children.append(cls("blob", digest, filename))
        return tree

    def serialize(self) -> str:
        """The text the tree's digest is computed from."""
        return f"tree;{self.contents};"

    def digest_contents(self) -> str:
        return sha1_hex(self.serialize())

    def store(self, repo) -> Path:
        """Write this tree compressed into the object store under its digest."""
        repo.object_dir(self.digest).mkdir(parents=True, exist_ok=True)
        size = len(self.contents.encode(_ENCODING, _ERRORS))
        target = repo.object_path(self.digest)
        target.write_bytes(compress(f"type=tree\nsize={size}\n\n{self.contents}"))
        return target

    def store_all(self, repo) -> str:
        """Store this tree and every subtree; return this tree's digest."""
        if self.kind != "tree":
            return self.digest
        for child in self.children:
            child.store_all(repo)
        self.contents = "".join(
            f"{child.kind} {child.digest} {child.filename}\n" for child in self.children
        )
        self.digest = self.digest_contents()
        self.store(repo)
        return self.digest

    def render(self, pad: int = 0) -> str:
        """An indented outline of the tree, for debugging."""
        indent = " " * pad
        lines = [f"{indent}CUR TREE\n"]
        for child in self.children:
            if child.kind == "tree":
                lines.append(child.render(pad + 10))
            else:
                lines.append(f"{indent}{child.kind} \\ {child.digest}\n")
        return "".join(lines)


def read_tree(repo, digest: str) -> str:
    """The body of the stored tree ``digest``."""
    raw = _read_bytes(repo.object_path(digest))
    if not raw:
        raise MyGitError("Tree contents should not be empty (TreeHashToEntryMap).")
    return object_content(decompress(raw))


def _collect(repo, digest: str, entries: dict) -> None:
    for line in read_tree(repo, digest).split("\n"):
        kind, _, rest = line.partition(" ")
        child_digest, _, path = rest.partition(" ")
        if kind == "blob":
            entries[path] = child_digest
        elif kind == "tree":
            _collect(repo, child_digest, entries)


def tree_entries(repo, digest: str) -> dict[str, str]:
    """Every file path in the tree ``digest`` and its subtrees, mapped to its blob."""
    entries: dict[str, str] = {}
    _collect(repo, digest, entries)
    return dict(sorted(entries.items()))