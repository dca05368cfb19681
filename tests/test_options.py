import pytest

from mygit.errors import MyGitError
from mygit.object_type import ObjectType
from mygit.options import (
    AddOptions,
    BranchOptions,
    CatFileOptions,
    CheckoutOptions,
    CommitOptions,
    ConfigOptions,
    HashObjectOptions,
    LogOptions,
    MergeOptions,
)


def test_hash_object_collects_params_and_flags():
    opts = HashObjectOptions.parse(["file.txt", "--write", "--type", "commit", "other"])
    assert opts.params == ["file.txt", "other"]
    assert opts.write is True
    assert opts.type is ObjectType.COMMIT


def test_hash_object_defaults_to_blob_without_write():
    opts = HashObjectOptions.parse(["file.txt"])
    assert opts.type is ObjectType.BLOB
    assert opts.write is False


def test_hash_object_needs_a_param():
    with pytest.raises(MyGitError, match="You have to specify a hash to hash-object."):
        HashObjectOptions.parse(["--write"])


def test_hash_object_rejects_unknown_type():
    with pytest.raises(MyGitError, match="Unknown type"):
        HashObjectOptions.parse(["f", "--type", "bogus"])


def test_hash_object_type_without_value_is_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'hash-object': --type"):
        HashObjectOptions.parse(["f", "--type"])


def test_cat_file_flags():
    opts = CatFileOptions.parse(["-s", "-t", "abcdef", "-p", "-r"])
    assert opts.first_param == "abcdef"
    assert (opts.size, opts.type, opts.content, opts.raw) == (True, True, True, True)


def test_cat_file_last_param_wins():
    assert CatFileOptions.parse(["one", "two"]).first_param == "two"


def test_cat_file_requires_hash():
    with pytest.raises(MyGitError, match="You have to specify a hash to cat-file."):
        CatFileOptions.parse(["-t"])


def test_cat_file_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'cat-file': -x"):
        CatFileOptions.parse(["abc", "-x"])


def test_add_paths_and_force():
    opts = AddOptions.parse(["a.txt", "-f", "dir/"])
    assert opts.paths == ["a.txt", "dir/"]
    assert opts.force is True


def test_add_requires_paths():
    with pytest.raises(MyGitError, match="You have to specify path arguments to add."):
        AddOptions.parse(["-f"])


def test_add_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'add': --all"):
        AddOptions.parse(["a", "--all"])


def test_commit_message():
    assert CommitOptions.parse(["-m", "first commit"]).message == "first commit"


def test_commit_without_arguments_has_empty_message():
    assert CommitOptions.parse([]).message == ""


def test_commit_direct_message():
    assert CommitOptions("merge it").message == "merge it"


@pytest.mark.parametrize("args", [["-m"], ["message"], ["-x", "y"]])
def test_commit_rejects_other_arguments(args):
    with pytest.raises(MyGitError, match="Unknown option to command 'commit'"):
        CommitOptions.parse(args)


def test_log_ignores_arguments():
    assert LogOptions.parse(["--oneline", "x"]) == LogOptions()


def test_branch_without_arguments_displays():
    opts = BranchOptions.parse([])
    assert opts.display is True
    assert (opts.create, opts.delete) == ("", "")


def test_branch_create_and_delete():
    assert BranchOptions.parse(["feature"]).create == "feature"
    opts = BranchOptions.parse(["-d", "old"])
    assert opts.delete == "old"
    assert opts.display is False


def test_branch_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'branch': -d"):
        BranchOptions.parse(["-d"])


def test_checkout_target_and_display():
    assert CheckoutOptions.parse([]).display is True
    opts = CheckoutOptions.parse(["dev"])
    assert opts.target == "dev"
    assert opts.display is False


def test_checkout_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'checkout': -b"):
        CheckoutOptions.parse(["-b", "dev"])


def test_config_defaults_to_local():
    opts = ConfigOptions.parse([])
    assert (opts.local, opts.is_global, opts.add) == (True, False, None)


def test_config_add_global():
    opts = ConfigOptions.parse(["--global", "--add", "user.name", "Tester"])
    assert opts.local is False
    assert opts.is_global is True
    assert opts.add == ("user.name", "Tester")


def test_config_get_and_unset():
    opts = ConfigOptions.parse(["--get", "user.email", "--unset", "user.name", "--local"])
    assert opts.get == "user.email"
    assert opts.unset == "user.name"
    assert opts.local is True


def test_config_add_needs_two_values():
    with pytest.raises(MyGitError, match="Unknown option to command 'config': --add"):
        ConfigOptions.parse(["--add", "user.name"])


def test_merge_branch():
    assert MergeOptions.parse(["feature"]).branch == "feature"


def test_merge_unknown_option():
    with pytest.raises(MyGitError, match="Unknown option to command 'merge': --squash"):
        MergeOptions.parse(["--squash"])