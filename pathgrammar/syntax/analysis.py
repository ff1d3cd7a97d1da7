"""Windows path syntax: root length, directory/file split, search patterns, trimming.

Every function here is pure index arithmetic over the input string. The only
module state is the immutable character tables below.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pathgrammar.syntax.types import WINDOWS_GRAMMAR, PathGrammar, PathSplit

logger = logging.getLogger(__name__)

# Narrower than str.strip(): only what NTFS/FAT treat as trailing blanks.
TRIM_END_CHARS = "\t\n\v\f\r \x85\xa0"
TRIM_START_CHARS = " "


class PathSyntaxError(ValueError):
    pass


class InvalidPathCharacterError(PathSyntaxError):
    pass


class InvalidSearchPatternError(PathSyntaxError):
    pass


class NullPathError(PathSyntaxError):
    pass


class PathResolver(Protocol):
    def resolve(self, path: str) -> str: ...


def check_invalid_path_chars(path: str | None, grammar: PathGrammar = WINDOWS_GRAMMAR) -> None:
    if path is None:
        raise NullPathError("Path cannot be null")
    for index, ch in enumerate(path):
        if ch in grammar.invalid_path_chars:
            logger.debug("Rejected path with invalid character %r at index %d", ch, index)
            raise InvalidPathCharacterError(f"Illegal character {ch!r} in path at index {index}")


def get_root_length(path: str, grammar: PathGrammar = WINDOWS_GRAMMAR) -> int:
    """Return how many leading characters of ``path`` form its root.

    ``\\\\server\\share\\x`` -> 14 (up to, not including, the separator after the share),
    ``C:\\foo`` -> 3, ``C:foo`` -> 2, ``\\foo`` -> 1, ``foo`` -> 0.
    """
    check_invalid_path_chars(path, grammar)

    is_separator = grammar.is_directory_separator
    length = len(path)
    index = 0

    if length >= 1 and is_separator(path[0]):
        index = 1
        if length >= 2 and is_separator(path[1]):
            # UNC: consume the server and share components.
            index = 2
            components = 2
            while index < length:
                if is_separator(path[index]):
                    components -= 1
                    if components == 0:
                        break
                index += 1
    elif grammar.volume_separator is not None and length >= 2 and path[1] == grammar.volume_separator:
        index = 2
        if length >= 3 and is_separator(path[2]):
            index += 1
    return index


def should_revise_directory_path_to_current(path: str) -> bool:
    # A bare "<drive>:" means the current directory on that drive, not its root.
    return len(path) == 2 and path[1] == ":"


def is_path_rooted(path: str, grammar: PathGrammar = WINDOWS_GRAMMAR) -> bool:
    check_invalid_path_chars(path, grammar)
    length = len(path)
    if length >= 1 and grammar.is_directory_separator(path[0]):
        return True
    return grammar.volume_separator is not None and length >= 2 and path[1] == grammar.volume_separator


def is_path_fully_qualified(path: str, grammar: PathGrammar = WINDOWS_GRAMMAR) -> bool:
    check_invalid_path_chars(path, grammar)
    if len(path) >= 2 and grammar.is_directory_separator(path[0]):
        return grammar.is_directory_separator(path[1])
    return (
        grammar.volume_separator is not None
        and len(path) >= 3
        and path[1] == grammar.volume_separator
        and grammar.is_directory_separator(path[2])
    )


def ends_in_directory_separator(path: str, grammar: PathGrammar = WINDOWS_GRAMMAR) -> bool:
    return len(path) > 0 and grammar.is_directory_separator(path[-1])


def split_directory_file(path: str | None, grammar: PathGrammar = WINDOWS_GRAMMAR) -> PathSplit:
    """Split a validated full path into its directory and final segment.

    No renormalization happens. ``file`` is ``None`` when no separator follows the root.
    """
    if path is None:
        return PathSplit(directory=None, file=None)

    length = len(path)
    root_length = get_root_length(path, grammar)

    if length > root_length and ends_in_directory_separator(path, grammar):
        length -= 1

    for pivot in range(length - 1, root_length - 1, -1):
        if grammar.is_directory_separator(path[pivot]):
            return PathSplit(directory=path[:pivot], file=path[pivot + 1 : length])

    return PathSplit(directory=path[:length], file=None)


def get_directory_name(path: str | None, grammar: PathGrammar = WINDOWS_GRAMMAR) -> str | None:
    split = split_directory_file(path, grammar)
    return None if split.file is None else split.directory


def check_search_pattern(pattern: str | None, grammar: PathGrammar = WINDOWS_GRAMMAR) -> None:
    """Reject patterns that use ".." to climb out of the searched directory.

    Valid: ``a..b``, ``abc..d``. Invalid: ``..``, ``ab..``, ``..\\x``, ``abc..d\\abc..``.
    """
    if pattern is None:
        raise NullPathError("Search pattern cannot be null")

    index = pattern.find("..")
    while index != -1:
        end = index + 2
        if end == len(pattern) or grammar.is_directory_separator(pattern[end]):
            logger.debug("Rejected search pattern %r at index %d", pattern, index)
            raise InvalidSearchPatternError(
                "Search pattern cannot contain '..' to move up directories "
                "and can be contained only internally in file/directory names"
            )
        index = pattern.find("..", end)


def trim_path(path: str | None) -> str:
    if path is None:
        raise NullPathError("Path cannot be null")
    return path.lstrip(TRIM_START_CHARS).rstrip(TRIM_END_CHARS)


def get_full_path(path: str | None, resolver: PathResolver, grammar: PathGrammar = WINDOWS_GRAMMAR) -> str:
    trimmed = trim_path(path)
    # Relative inputs go to the resolver untouched, blanks included.
    candidate = trimmed if is_path_rooted(trimmed, grammar) else path
    return resolver.resolve(candidate)
