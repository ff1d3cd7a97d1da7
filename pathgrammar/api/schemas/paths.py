from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PathRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(max_length=32767)


class SearchPatternRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pattern: str = Field(max_length=32767)


class RootAnalysisResponse(BaseModel):
    path: str
    root_length: int
    root: str
    is_rooted: bool
    is_fully_qualified: bool
    should_revise_to_current: bool


class SplitResponse(BaseModel):
    path: str
    directory: str | None
    file: str | None
    directory_name: str | None


class SearchPatternResponse(BaseModel):
    pattern: str
    valid: bool


class FullPathResponse(BaseModel):
    path: str
    trimmed: str
    full_path: str
