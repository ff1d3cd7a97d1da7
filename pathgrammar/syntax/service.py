from __future__ import annotations

from dataclasses import dataclass

from pathgrammar.core.config import Settings
from pathgrammar.syntax.analysis import (
    check_search_pattern,
    get_directory_name,
    get_full_path,
    get_root_length,
    is_path_fully_qualified,
    is_path_rooted,
    should_revise_directory_path_to_current,
    split_directory_file,
    trim_path,
)
from pathgrammar.syntax.resolver import NtPathResolver
from pathgrammar.syntax.types import PathSplit


@dataclass(slots=True)
class RootAnalysis:
    path: str
    root_length: int
    root: str
    is_rooted: bool
    is_fully_qualified: bool
    should_revise_to_current: bool


@dataclass(slots=True)
class FullPathResult:
    path: str
    trimmed: str
    full_path: str


class PathSyntaxService:
    def __init__(self, settings: Settings):
        self._settings = settings
        self._grammar = settings.grammar
        self._resolver = NtPathResolver(settings.current_directory, self._grammar)

    def analyze(self, path: str) -> RootAnalysis:
        root_length = get_root_length(path, self._grammar)
        return RootAnalysis(
            path=path,
            root_length=root_length,
            root=path[:root_length],
            is_rooted=is_path_rooted(path, self._grammar),
            is_fully_qualified=is_path_fully_qualified(path, self._grammar),
            should_revise_to_current=should_revise_directory_path_to_current(path),
        )

    def split(self, path: str) -> tuple[PathSplit, str | None]:
        return split_directory_file(path, self._grammar), get_directory_name(path, self._grammar)

    def validate_search_pattern(self, pattern: str) -> None:
        check_search_pattern(pattern, self._grammar)

    def full_path(self, path: str) -> FullPathResult:
        return FullPathResult(
            path=path,
            trimmed=trim_path(path),
            full_path=get_full_path(path, self._resolver, self._grammar),
        )


def root_analysis_to_dict(analysis: RootAnalysis) -> dict[str, object]:
    return {
        "path": analysis.path,
        "root_length": analysis.root_length,
        "root": analysis.root,
        "is_rooted": analysis.is_rooted,
        "is_fully_qualified": analysis.is_fully_qualified,
        "should_revise_to_current": analysis.should_revise_to_current,
    }
