"""tmuxctl.

A thin wrapper around the tmux command-line tool: create, list, rename and
kill sessions, manage windows and send keystrokes from Python code.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Development status indicators
__status__ = "Alpha"

from tmuxctl.session import (  # noqa: E402
    NewSessionOptions,
    Session,
    list_sessions,
    new_session,
    session_exists,
)
from tmuxctl.tmux import (  # noqa: E402
    TmuxClient,
    TmuxCommandError,
    TmuxError,
    TmuxFormatError,
    WindowInfo,
)

__all__ = [
    "NewSessionOptions",
    "Session",
    "TmuxClient",
    "TmuxCommandError",
    "TmuxError",
    "TmuxFormatError",
    "WindowInfo",
    "list_sessions",
    "new_session",
    "session_exists",
]
