"""Command layer: tmux subprocess invocation and output parsing."""

from tmuxctl.tmux.backend import TmuxBackend, WindowInfo
from tmuxctl.tmux.client import CommandResult, TmuxClient, get_default_client
from tmuxctl.tmux.exceptions import (
    SessionCreateError,
    TmuxBinaryNotFoundError,
    TmuxCommandError,
    TmuxError,
    TmuxFormatError,
)

__all__ = [
    "CommandResult",
    "SessionCreateError",
    "TmuxBackend",
    "TmuxBinaryNotFoundError",
    "TmuxClient",
    "TmuxCommandError",
    "TmuxError",
    "TmuxFormatError",
    "WindowInfo",
    "get_default_client",
]
