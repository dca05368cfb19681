"""HEAD, branches and walking the commit history."""

from __future__ import annotations

from pathlib import Path

from .blob import read_object_content
from .commit import extract_parent
from .compression import decompress
from .errors import MyGitError

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _read_text(path) -> str:
    try:
        return Path(path).read_bytes().decode(_ENCODING, _ERRORS)
    except OSError:
        return ""


def read_head(repo) -> str:
    """The contents of the HEAD file."""
    return _read_text(repo.head_path)


def branch_ref_in_head(head_contents: str) -> str:
    """The reference HEAD points to (``refs/heads/...``), or empty when detached."""
    marker = "ref: "
    position = head_contents.find(marker)
    if position == -1:
        return ""
    return head_contents[position + len(marker):]


def current_branch(repo) -> str:
    """The checked-out branch name, or empty when HEAD is detached."""
    redirect = branch_ref_in_head(read_head(repo))
    marker = "refs/heads/"
    position = redirect.find(marker)
    if position == -1:
        return ""
    return redirect[position + len(marker):]


def most_recent_commit(repo, head_contents: str | None = None) -> str:
    """The commit HEAD resolves to; ``head_contents`` is used when HEAD is detached."""
    if head_contents is None:
        head_contents = read_head(repo)
    redirect = branch_ref_in_head(read_head(repo))
    if redirect:
        return _read_text(repo.in_db(redirect))
    return head_contents


def list_branches(repo) -> list[str]:
    """Names of the branches, sorted."""
    heads = Path(repo.refs_heads_path)
    if not heads.is_dir():
        return []
    return sorted(entry.name for entry in heads.iterdir())


def format_branches(repo) -> str:
    """The branch listing: the current branch (or detached HEAD) first, starred."""
    main = current_branch(repo)
    branches = list_branches(repo)
    if main in branches:
        lines = [f"\033[1;32m* {main}\033[0m\n"]
    else:
        lines = [f"\033[1;32m* {read_head(repo)} (Detached HEAD)\033[0m\n"]
    lines.extend(f"  {branch}\n" for branch in branches if branch != main)
    return "".join(lines)


def branch_exists(repo, name: str) -> bool:
    return name in list_branches(repo)


def has_commit(repo) -> bool:
    """Whether HEAD resolves to a commit."""
    return bool(most_recent_commit(repo))


def is_already_on(repo, target: str) -> bool:
    """Whether HEAD already is ``target`` (a commit digest or the current branch)."""
    return read_head(repo) == target or current_branch(repo) == target


def is_commit_object(repo, name: str) -> bool:
    """Whether ``name`` is a branch or the digest of a stored object."""
    if branch_exists(repo, name):
        return True
    if len(name) < 2:
        return False
    return repo.object_path(name).is_file()


def resolve_commit(repo, name: str) -> str:
    """The commit digest a branch points to, or ``name`` itself."""
    if branch_exists(repo, name):
        return _read_text(repo.branch_path(name))
    return name


def tree_of_commit(repo, digest: str) -> str:
    """The tree digest recorded in the commit ``digest``."""
    try:
        raw = repo.object_path(digest).read_bytes()
    except OSError:
        raw = b""
    if not raw:
        raise MyGitError("Commit contents = empty (GetTreeHashFromCommit method).")
    contents = decompress(raw)
    marker = "tree "
    position = contents.find(marker)
    if position == -1:
        raise MyGitError("Commit wrongly formatted (GetTreeHashFromCommit method).")
    return contents[position + len(marker):].split("\n", 1)[0]


def _history(repo, digest: str):
    while digest:
        yield digest
        digest = extract_parent(read_object_content(repo, digest))


def is_ancestor(repo, ancestor: str, descendant: str) -> bool:
    """Whether ``ancestor`` lies on the first-parent history of ``descendant``."""
    return any(digest == ancestor for digest in _history(repo, descendant))


def common_ancestor(repo, first: str, second: str) -> str:
    """The nearest commit of ``first``'s history that is in ``second``'s; or empty."""
    for candidate in _history(repo, first):
        if any(digest == candidate for digest in _history(repo, second)):
            return candidate
    return ""