from __future__ import annotations

import pytest

from pathgrammar.syntax import (
    InvalidPathCharacterError,
    NullPathError,
    PathGrammar,
    check_invalid_path_chars,
    get_root_length,
    is_path_fully_qualified,
    is_path_rooted,
    should_revise_directory_path_to_current,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("", 0),
        ("relative\\path", 0),
        ("file.txt", 0),
        ("\\", 1),
        ("\\foo\\bar", 1),
        ("/foo", 1),
        ("C:", 2),
        ("C:foo", 2),
        ("C:\\", 3),
        ("C:\\foo", 3),
        ("c:/foo", 3),
        ("\\\\", 2),
        ("\\\\server", 8),
        ("\\\\server\\", 9),
        ("\\\\server\\share", 14),
        ("\\\\server\\share\\", 14),
        ("\\\\server\\share\\x", 14),
        ("//server/share/dir/file", 14),
        ("\\\\server/share\\x", 14),
    ],
)
def test_get_root_length(path: str, expected: int) -> None:
    assert get_root_length(path) == expected


@pytest.mark.parametrize(
    "path",
    ["", "a", "C:", "C:\\x", "\\\\s", "\\\\s\\t\\u\\v", "//a/b/c", "\\a\\b", "x:y:z"],
)
def test_root_length_is_bounded_by_path_length(path: str) -> None:
    assert 0 <= get_root_length(path) <= len(path)


def test_volume_separator_only_counts_at_index_one() -> None:
    assert get_root_length("ab:c") == 0
    assert get_root_length(":") == 0


def test_grammar_without_volume_separator_treats_drive_as_relative() -> None:
    grammar = PathGrammar(directory_separator="/", alt_directory_separator="/", volume_separator=None)
    assert get_root_length("C:\\foo", grammar) == 0
    assert get_root_length("/usr/lib", grammar) == 1
    assert is_path_rooted("C:foo", grammar) is False


@pytest.mark.parametrize("path", ["C:\\a<b", "a|b", 'say"hi"', "tab\there", "nul\x00"])
def test_invalid_characters_are_rejected_before_analysis(path: str) -> None:
    with pytest.raises(InvalidPathCharacterError):
        get_root_length(path)


def test_null_path_is_rejected() -> None:
    with pytest.raises(NullPathError):
        check_invalid_path_chars(None)


@pytest.mark.parametrize(
    ("path", "expected"),
    [("C:", True), ("c:", True), ("C:\\", False), ("C:a", False), ("\\\\", False), ("C", False)],
)
def test_should_revise_directory_path_to_current(path: str, expected: bool) -> None:
    assert should_revise_directory_path_to_current(path) is expected


def test_bare_drive_is_rooted_but_not_fully_qualified() -> None:
    assert get_root_length("C:") == 2
    assert is_path_rooted("C:") is True
    assert is_path_fully_qualified("C:") is False


@pytest.mark.parametrize(
    ("path", "rooted", "qualified"),
    [
        ("C:\\x", True, True),
        ("C:x", True, False),
        ("\\x", True, False),
        ("\\\\server\\share", True, True),
        ("x\\y", False, False),
        ("", False, False),
    ],
)
def test_rooted_and_fully_qualified(path: str, rooted: bool, qualified: bool) -> None:
    assert is_path_rooted(path) is rooted
    assert is_path_fully_qualified(path) is qualified
