"""Application settings using Pydantic Settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gochef.core.config.loader import ConfigLoader

DEFAULT_CONFIG_FILE = Path("gochef.yaml")
ENV_FILE = Path(".env")


class PrepareSettings(BaseSettings):
    """Settings for recipe preparation."""

    model_config = SettingsConfigDict(
        env_prefix="GOCHEF_PREPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    source_suffix: str = Field(
        default=".go",
        description="Suffix of source files whose imports are collected",
    )
    hidden_prefix: str = Field(
        default=".",
        description="Entries whose name starts with this prefix are skipped",
    )
    constraint_prefix: str = Field(
        default="//go:build ",
        description="Comment prefix introducing a build constraint",
    )

    @field_validator("source_suffix", "hidden_prefix", "constraint_prefix")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Reject empty markers, which would match every entry."""
        if not v:
            raise ValueError("must not be empty")
        return v


class CookSettings(BaseSettings):
    """Settings for the cook phase."""

    model_config = SettingsConfigDict(
        env_prefix="GOCHEF_COOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    go_binary: str = Field(
        default="go",
        description="Go command used to build the synthesized program",
    )
    output_path: str = Field(
        default=os.devnull,
        description="Value passed to 'go build -o'; the binary is discarded by default",
    )
    main_file: str = Field(
        default="main.go",
        description="Name of the synthesized file holding the entry point",
    )
    file_pattern: str = Field(
        default="main{index}.go",
        description="Name pattern for the remaining synthesized files",
    )

    @field_validator("file_pattern")
    @classmethod
    def validate_file_pattern(cls, v: str) -> str:
        """Require the {index} placeholder so file names stay unique."""
        if "{index}" not in v:
            raise ValueError("file_pattern must contain '{index}'")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="GOCHEF_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GOCHEF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prepare: PrepareSettings = Field(default_factory=PrepareSettings)
    cook: CookSettings = Field(default_factory=CookSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path, env_file: Path | None = None) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.
            env_file: Dotenv file to read. Defaults to ./.env.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        env: dict[str, Any] = {} if env_file is None else {"_env_file": env_file}
        return cls(
            prepare=PrepareSettings(**env, **loader.get_section("prepare")),
            cook=CookSettings(**env, **loader.get_section("cook")),
            logging=LoggingSettings(**env, **loader.get_section("logging")),
            **env,
        )

    @classmethod
    def load(cls, path: Path | None = None, root: Path | None = None) -> "Settings":
        """Load settings from an explicit file or the module root.

        Priority: YAML file > environment variables > .env > defaults

        Args:
            path: Optional YAML file. Falls back to gochef.yaml in root when present.
            root: Directory holding gochef.yaml and .env. Defaults to the
                working directory.

        Returns:
            Settings instance.
        """
        root = Path(root) if root is not None else Path(".")
        env_file = root / ENV_FILE
        if path is None and (root / DEFAULT_CONFIG_FILE).exists():
            path = root / DEFAULT_CONFIG_FILE
        if path is not None:
            return cls.from_yaml(path, env_file=env_file)

        env = {"_env_file": env_file}
        return cls(
            prepare=PrepareSettings(**env),
            cook=CookSettings(**env),
            logging=LoggingSettings(**env),
            **env,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
