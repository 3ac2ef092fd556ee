"""Configuration settings for MCP Soul."""

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_memory_dir() -> Path:
    """Per-user default location of the memory directory."""
    return Path.home() / ".claude-memory"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Storage Configuration
    MEMORY_DIR: Path = Field(
        default_factory=default_memory_dir,
        validation_alias=AliasChoices("CLAUDE_MEMORY_DIR", "MEMORY_DIR"),
        description="Directory where memory files are stored",
    )
    MEMORY_FILE_EXTENSION: str = Field(
        default=".md", description="Extension of files reported by the listing"
    )

    # Logging Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[Path] = Field(
        default=None, description="Optional log file (logs always go to stderr)"
    )

    # MCP Protocol Configuration
    MCP_SERVER_NAME: str = Field(
        default="claude-memory", description="MCP server name"
    )
    MCP_SERVER_VERSION: str = Field(
        default="1.0.0", description="MCP server version"
    )
    MCP_TRANSPORT: Literal["stdio", "sse", "streamable-http"] = Field(
        default="stdio", description="Transport used to talk to the MCP client"
    )

    # HTTP transports only
    SERVER_HOST: str = Field(default="localhost", description="Server host")
    SERVER_PORT: int = Field(default=8000, description="Server port")

    @field_validator("MEMORY_DIR", mode="before")
    @classmethod
    def _absolute_memory_dir(cls, value: Any) -> Any:
        if value is None or value == "":
            return default_memory_dir()
        # Lexical only: symlinks in the configured path are left alone
        return Path(os.path.abspath(os.path.expanduser(str(value))))

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(memory_dir={self.MEMORY_DIR}, "
            f"transport={self.MCP_TRANSPORT}, debug={self.DEBUG})"
        )
