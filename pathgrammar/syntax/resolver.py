from __future__ import annotations

import ntpath

from pathgrammar.syntax.analysis import (
    TRIM_END_CHARS,
    PathSyntaxError,
    check_invalid_path_chars,
    get_root_length,
    is_path_fully_qualified,
    should_revise_directory_path_to_current,
)
from pathgrammar.syntax.types import WINDOWS_GRAMMAR, PathGrammar

NTPATH_SEPARATORS = frozenset({"\\", "/"})


class NtPathResolver:
    """Resolve Windows paths against a fixed current directory using ``ntpath``.

    Stands in for GetFullPathName so resolution is reproducible on any host.
    """

    def __init__(self, current_directory: str, grammar: PathGrammar = WINDOWS_GRAMMAR):
        if {grammar.directory_separator, grammar.alt_directory_separator} != NTPATH_SEPARATORS:
            raise PathSyntaxError("ntpath resolution requires the '\\' and '/' directory separators")
        if not is_path_fully_qualified(current_directory, grammar):
            raise PathSyntaxError("current_directory must be a fully qualified path")
        self._grammar = grammar
        self._current_directory = ntpath.normpath(current_directory)
        self._current_drive = ntpath.splitdrive(self._current_directory)[0]

    @property
    def current_directory(self) -> str:
        return self._current_directory

    def _drive_base(self, drive: str) -> str:
        if drive.upper() == self._current_drive.upper():
            return self._current_directory
        return drive + self._grammar.directory_separator

    def resolve(self, path: str) -> str:
        check_invalid_path_chars(path, self._grammar)
        if not path.strip(TRIM_END_CHARS):
            raise PathSyntaxError("The path is empty or blank and is not of a legal form")

        if should_revise_directory_path_to_current(path):
            return ntpath.normpath(self._drive_base(path))

        root_length = get_root_length(path, self._grammar)
        if root_length == 0:
            combined = ntpath.join(self._current_directory, path)
        elif root_length == 1:
            combined = self._current_drive + path
        elif root_length == 2 and path[1] == self._grammar.volume_separator:
            combined = ntpath.join(self._drive_base(path[:2]), path[2:])
        else:
            combined = path
        return ntpath.normpath(combined)
