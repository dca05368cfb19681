from pathlib import Path

import pytest

from mygit.errors import MyGitError
from mygit.pathutil import (
    clean_path,
    create_parent_dirs,
    is_dir_empty,
    relative_to_cwd,
    relative_to_root,
    remove_empty_parent,
)
from mygit.repository import Repository


@pytest.fixture
def repo(tmp_path, monkeypatch):
    (tmp_path / ".mygit").mkdir()
    monkeypatch.chdir(tmp_path)
    return Repository.open(tmp_path)


@pytest.mark.parametrize("path", ["", ".", "./", ".//"])
def test_clean_path_empty_forms(path):
    assert clean_path(path) == "./"


def test_clean_path_collapses_slashes():
    assert clean_path("a//b") == "a/b"


def test_clean_path_drops_dot_segments():
    assert clean_path("./a/./b") == "a/b"


def test_clean_path_keeps_parent_segments():
    assert clean_path("../x.txt") == "../x.txt"


@pytest.mark.parametrize("path", ["a//b///c", "./x/./y", "..//..//z", "plain/path.txt", "//lead"])
def test_clean_path_is_idempotent(path):
    once = clean_path(path)
    assert clean_path(once) == once
    assert "//" not in once


def test_relative_to_root_at_root(repo):
    Path("test.txt").write_text("x")
    assert relative_to_root(repo, "test.txt") == "test.txt"


def test_relative_to_root_while_in_subdir(repo, monkeypatch):
    (repo.root / "dummySubDir").mkdir()
    monkeypatch.chdir(repo.root / "dummySubDir")
    Path("hehehehe.txt").write_text("x")
    assert relative_to_root(repo, "hehehehe.txt") == "dummySubDir/hehehehe.txt"


def test_relative_to_root_while_not_in_subdir(repo):
    (repo.root / "dummySubDir").mkdir()
    Path("dummySubDir/bonsoir.txt").write_text("x")
    assert relative_to_root(repo, "dummySubDir/bonsoir.txt") == "dummySubDir/bonsoir.txt"


def test_relative_to_root_of_root_directory(repo):
    assert relative_to_root(repo, ".") == "./"


def test_relative_to_root_outside_repository(repo, tmp_path_factory):
    outside = tmp_path_factory.mktemp("elsewhere") / "f.txt"
    outside.write_text("x")
    with pytest.raises(MyGitError):
        relative_to_root(repo, str(outside))


def test_relative_to_cwd_same_directory(repo):
    assert relative_to_cwd(repo.in_root("test.txt")) == "test.txt"


def test_relative_to_cwd_from_subdir_to_root_file(repo, monkeypatch):
    (repo.root / "dummySubDir102").mkdir()
    monkeypatch.chdir(repo.root / "dummySubDir102")
    filename = "hezazazazaeazeazhehehe.txt"
    assert relative_to_cwd(repo.in_root(filename)) == "../" + filename
    assert relative_to_cwd("../" + filename) == "../" + filename


def test_relative_to_cwd_into_subdir(repo):
    (repo.root / "dummySubDir111").mkdir()
    filename = "dummySubDir111/hehehehzzaeezaezaze.txt"
    assert relative_to_cwd(repo.in_root(filename)) == filename


def test_create_parent_dirs_returns_first_created(tmp_path):
    target = tmp_path / "a" / "b" / "c.txt"
    first = create_parent_dirs(str(target))
    assert Path(first) == tmp_path / "a"
    assert (tmp_path / "a" / "b").is_dir()
    assert create_parent_dirs(str(target)) is None


def test_is_dir_empty(tmp_path):
    assert is_dir_empty(tmp_path)
    (tmp_path / "f").write_text("x")
    assert not is_dir_empty(tmp_path)


def test_remove_empty_parent(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "keep.txt").write_text("x")
    removed = remove_empty_parent(tmp_path / "a" / "b" / "gone.txt")
    assert removed == tmp_path / "a" / "b"
    assert not (tmp_path / "a" / "b").exists()
    assert (tmp_path / "a").is_dir()


def test_remove_empty_parent_nothing_empty(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "f.txt").write_text("x")
    assert remove_empty_parent(tmp_path / "a" / "f.txt") is None
    assert (tmp_path / "a" / "f.txt").is_file()