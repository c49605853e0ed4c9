"""Custom exceptions for tmuxctl."""


class TmuxCtlError(Exception):
    """Base exception for tmuxctl."""

    pass


class ConfigurationError(TmuxCtlError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    pass
