"""Session abstraction over the tmux command layer."""

from tmuxctl.session.options import NewSessionOptions
from tmuxctl.session.session import (
    Session,
    list_sessions,
    new_session,
    pane_target,
    session_exists,
    validate_name,
)

__all__ = [
    "NewSessionOptions",
    "Session",
    "list_sessions",
    "new_session",
    "pane_target",
    "session_exists",
    "validate_name",
]
