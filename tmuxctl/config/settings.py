"""Configuration management using Pydantic Settings.

Features:
- Environment variable loading (``TMUXCTL_`` prefix)
- Optional ``.env`` file
- Type validation
- Default values
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmuxctl.utils.constants import DEFAULT_TMUX_BINARY, ENV_PREFIX


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # tmux invocation
    tmux_binary: str = Field(
        DEFAULT_TMUX_BINARY, description="tmux executable name or path"
    )
    socket_name: Optional[str] = Field(
        None,
        description="tmux server socket name (passed as -L). Leave empty for the default server.",
    )

    # Monitoring
    log_level: str = Field("INFO", description="Logging level")

    # Development
    debug: bool = Field(False, description="Enable debug mode")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("tmux_binary")
    @classmethod
    def validate_tmux_binary(cls, v: Any) -> str:
        """Reject blank binary names."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("tmux_binary must not be empty")
        return v.strip()

    @field_validator("socket_name", mode="before")
    @classmethod
    def parse_socket_name(cls, v: Any) -> Optional[str]:
        """Treat a blank socket name as unset."""
        if v is None:
            return None
        if isinstance(v, str) and not v.strip():
            return None
        return v  # type: ignore[no-any-return]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()  # type: ignore[no-any-return]

    @property
    def global_args(self) -> List[str]:
        """Arguments placed between the binary and the tmux command."""
        if self.socket_name:
            return ["-L", self.socket_name]
        return []
