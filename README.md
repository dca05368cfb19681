# mygit

Building blocks of a small version control system. A repository keeps its
data in a `.mygit` directory at the root of a project: zlib-compressed
objects named by their SHA-1 digests (under `objects/<first two>/<rest>`),
a compressed staging index, branch references under `refs/heads`, and a
`HEAD` file. Patterns listed one per line in a `.mygitignore` file at the
root exclude matching paths.

## Installation

```
pip install .
```

The package has no dependencies beyond the standard library.

## What is in the package

| Module | Contents |
| --- | --- |
| `mygit.errors` | `MyGitError`, raised when an operation cannot complete. |
| `mygit.compression` | `compress`, `decompress` (zlib, level 9 by default) and `sha1_hex`. |
| `mygit.object_type` | `ObjectType` (`BLOB`, `TREE`, `COMMIT`) with `ObjectType.parse`. |
| `mygit.ignore` | `parse_ignore_patterns` and `is_excluded` (shell-style matching of `*pattern*`). |
| `mygit.repository` | `Repository`: `open`, `find` (searches the start directory and its parents), and the paths of HEAD, the index, the local config, branches and objects; `global_config_path` (`~/.mygitconfig`). |
| `mygit.pathutil` | `clean_path`, `relative_to_root`, `relative_to_cwd`, `create_parent_dirs`, `remove_empty_parent`, `is_dir_empty`. |
| `mygit.blob` | `Blob`, `store_blob`, `create_blob`, `object_type_of`, `object_content`, `read_object_content`. |
| `mygit.commit` | `Commit` (with `store`), `format_log_entry`, `extract_parent`, `commit_date_stamp`, `commit_date`. |
| `mygit.tree` | `Tree` (`from_index`, `store_all`, `render`), `read_tree`, `tree_entries`. |
| `mygit.index` | `parse_index`, `read_index`, `write_index`, `update_index`. |
| `mygit.config` | `Config` (`add`, `unset`, `get`, `lookup`), `parse_config`, `render_config`, `strip_padding`. |
| `mygit.refs` | HEAD and branch helpers (`read_head`, `current_branch`, `most_recent_commit`, `list_branches`, `format_branches`, `resolve_commit`, `tree_of_commit`, ...) and history walks (`is_ancestor`, `common_ancestor`). |
| `mygit.textdiff` | `split_lines`, `lcs_matrix`, `diff_lines` (coloured changes with four lines of context), `merge_lines` (conflict markers), `mark_lines`. |
| `mygit.options` | Argument parsers for each command: `AddOptions`, `CommitOptions`, `BranchOptions`, `CheckoutOptions`, `ConfigOptions`, `MergeOptions`, `HashObjectOptions`, `CatFileOptions`, `LogOptions`, each with `parse(args)`. |

## Example

```python
from pathlib import Path

from mygit.blob import create_blob, read_object_content
from mygit.commit import Commit, commit_date, commit_date_stamp
from mygit.config import Config
from mygit.index import read_index, update_index
from mygit.repository import Repository
from mygit.textdiff import diff_lines, split_lines
from mygit.tree import Tree, tree_entries

root = Path("project")
(root / ".mygit" / "refs" / "heads").mkdir(parents=True, exist_ok=True)
(root / "notes.txt").write_text("first line\n")

repo = Repository.open(root)

# Stage a file: store it as a blob and record it in the index.
digest = create_blob(repo, "notes.txt")
update_index(repo, {"notes.txt": digest})
print(read_object_content(repo, digest))        # "first line\n"

# Store the index as trees.
tree_digest = Tree.from_index(repo, read_index(repo)).store_all(repo)
print(tree_entries(repo, tree_digest))          # {"notes.txt": digest}

# Record a commit object.
config = Config(repo)
config.add(True, "user.name", "Alice")
config.add(True, "user.email", "alice@example.com")
identity = f"{config.lookup('user.name')} <{config.lookup('user.email')}>"
commit = Commit(
    tree=tree_digest,
    parents=(),
    author=identity,
    committer=identity,
    date_stamp=commit_date_stamp(),
    date=commit_date(),
    message="First commit",
)
commit.store(repo, commit.digest())

# Compare two versions of a text.
print(diff_lines(split_lines("a\nb\n"), split_lines("a\nc\n")))
```

## What the package does not do

The package is a library only. It installs no `mygit` command and has no
functions that carry out whole commands: there is nothing that initialises a
repository directory, scans the working directory for added, deleted or
modified files, switches the working directory to another commit, merges
branches, or pages output. `mygit.options` parses the arguments such commands
would take, but nothing in the package acts on them. The caller writes HEAD
and branch files and creates the `.mygit` directory layout itself.

## Running the tests

```
pip install ".[test]"
pytest
```