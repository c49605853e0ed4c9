"""Simple configuration loading."""

import structlog

from pydantic import ValidationError

from tmuxctl.exceptions import ConfigurationError, InvalidConfigError

from .settings import Settings


logger = structlog.get_logger()


def load_config() -> Settings:
    """Load configuration from environment variables.

    Returns:
        Configured Settings instance

    Raises:
        InvalidConfigError: If a setting fails validation
        ConfigurationError: If configuration cannot be loaded
    """
    logger.debug("Loading configuration from environment")

    try:
        # pydantic-settings reads TMUXCTL_* variables and .env automatically
        settings = Settings()
    except ValidationError as e:
        logger.error("Invalid configuration", error=str(e))
        raise InvalidConfigError(f"Configuration loading failed: {e}") from e
    except Exception as e:
        logger.error("Failed to load configuration", error=str(e))
        raise ConfigurationError(f"Configuration loading failed: {e}") from e

    logger.debug(
        "Configuration loaded successfully",
        tmux_binary=settings.tmux_binary,
        socket_name=settings.socket_name,
        debug=settings.debug,
    )

    return settings
