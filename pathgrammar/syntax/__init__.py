from pathgrammar.syntax.analysis import (
    TRIM_END_CHARS,
    TRIM_START_CHARS,
    InvalidPathCharacterError,
    InvalidSearchPatternError,
    NullPathError,
    PathResolver,
    PathSyntaxError,
    check_invalid_path_chars,
    check_search_pattern,
    ends_in_directory_separator,
    get_directory_name,
    get_full_path,
    get_root_length,
    is_path_fully_qualified,
    is_path_rooted,
    should_revise_directory_path_to_current,
    split_directory_file,
    trim_path,
)
from pathgrammar.syntax.resolver import NTPATH_SEPARATORS, NtPathResolver
from pathgrammar.syntax.types import WINDOWS_GRAMMAR, WINDOWS_INVALID_PATH_CHARS, PathGrammar, PathSplit

__all__ = [
    "PathGrammar",
    "PathSplit",
    "WINDOWS_GRAMMAR",
    "WINDOWS_INVALID_PATH_CHARS",
    "TRIM_END_CHARS",
    "TRIM_START_CHARS",
    "PathSyntaxError",
    "InvalidPathCharacterError",
    "InvalidSearchPatternError",
    "NullPathError",
    "PathResolver",
    "NtPathResolver",
    "NTPATH_SEPARATORS",
    "check_invalid_path_chars",
    "get_root_length",
    "should_revise_directory_path_to_current",
    "is_path_rooted",
    "is_path_fully_qualified",
    "ends_in_directory_separator",
    "split_directory_file",
    "get_directory_name",
    "check_search_pattern",
    "trim_path",
    "get_full_path",
]
