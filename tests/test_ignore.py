from mygit.ignore import is_excluded, parse_ignore_patterns


def test_parse_splits_lines():
    assert parse_ignore_patterns("build\n*.log") == ["build", "*.log"]


def test_parse_ignores_single_trailing_newline():
    assert parse_ignore_patterns("build\n*.log\n") == parse_ignore_patterns("build\n*.log")


def test_parse_empty_contents():
    assert parse_ignore_patterns("") == []


def test_parse_keeps_inner_blank_line():
    assert parse_ignore_patterns("a\n\nb") == ["a", "", "b"]


def test_database_is_always_excluded():
    assert is_excluded("./.mygit/objects/ab/cdef", [], ".mygit")
    assert is_excluded("sub/.mygit", [])


def test_pattern_matches_anywhere_in_path():
    assert is_excluded("./project/build/out.o", ["build"])
    assert is_excluded("logs/today.log", ["*.log"])


def test_unmatched_path_is_kept():
    assert not is_excluded("src/main.c", ["build", "*.log"], ".mygit")


def test_custom_database_name():
    assert is_excluded("x/.other/HEAD", [], ".other")
    assert not is_excluded("x/.mygit/HEAD", [], ".other")