import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepoStreamSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REPOSTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "localhost"
    port: int = Field(default=5050, ge=0, le=65535)
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("REPOSTREAM_GITHUB_TOKEN", "GITHUB_TOKEN", "github_token"),
    )
    base_url: str = "https://api.github.com"
    user_agent: str = "GitHubRepoAnalyzer"
    http_timeout_sec: float | None = None
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level
