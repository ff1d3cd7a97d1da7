from __future__ import annotations

from dataclasses import dataclass, field

WINDOWS_INVALID_PATH_CHARS = frozenset({'"', "<", ">", "|", *(chr(code) for code in range(32))})


@dataclass(frozen=True, slots=True)
class PathGrammar:
    directory_separator: str = "\\"
    alt_directory_separator: str = "/"
    volume_separator: str | None = ":"
    invalid_path_chars: frozenset[str] = field(default=WINDOWS_INVALID_PATH_CHARS)

    def is_directory_separator(self, ch: str) -> bool:
        return ch == self.directory_separator or ch == self.alt_directory_separator


WINDOWS_GRAMMAR = PathGrammar()


@dataclass(frozen=True, slots=True)
class PathSplit:
    directory: str | None
    file: str | None
