from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathgrammar.syntax import NTPATH_SEPARATORS, PathGrammar, PathSyntaxError, is_path_fully_qualified


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PATHGRAMMAR_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    app_name: str = "pathgrammar"
    environment: str = "production"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    directory_separator: str = "\\"
    alt_directory_separator: str = "/"
    volume_separator: str | None = ":"
    current_directory: str = "C:\\"

    @field_validator("directory_separator", "alt_directory_separator", "volume_separator")
    @classmethod
    def _single_character(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("Separator settings must be exactly one character")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.upper().strip()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {value!r}")
        return normalized

    @model_validator(mode="after")
    def _validate_grammar(self) -> "Settings":
        separators = [self.directory_separator, self.alt_directory_separator]
        if self.volume_separator is not None:
            separators.append(self.volume_separator)
        if len(set(separators)) != len(separators):
            raise ValueError("directory, alternate and volume separators must all differ")
        if {self.directory_separator, self.alt_directory_separator} != NTPATH_SEPARATORS:
            raise ValueError("directory separators must be '\\' and '/' for ntpath resolution")

        try:
            qualified = is_path_fully_qualified(self.current_directory, self.grammar)
        except PathSyntaxError as exc:
            raise ValueError(f"current_directory is not a valid path: {exc}") from exc
        if not qualified:
            raise ValueError("current_directory must be a fully qualified path")
        return self

    @property
    def grammar(self) -> PathGrammar:
        return PathGrammar(
            directory_separator=self.directory_separator,
            alt_directory_separator=self.alt_directory_separator,
            volume_separator=self.volume_separator,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
