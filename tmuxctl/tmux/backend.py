"""Backend interface for tmux access.

The session layer talks to tmux only through this interface. ``TmuxClient``
implements it with subprocesses; tests provide an in-memory version.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple


class WindowInfo(NamedTuple):
    """Window information named tuple.

    Attributes:
        index: Window index within its session.
        name: Window name.
    """

    index: int
    name: str


class TmuxBackend(ABC):
    """Operations needed to manage tmux sessions and windows."""

    @abstractmethod
    def new_session(self, name: str, *args: str) -> None:
        """Create a detached session, passing extra ``args`` to new-session."""

    @abstractmethod
    def rename_session(self, old_name: str, new_name: str) -> None:
        """Rename a session."""

    @abstractmethod
    def list_sessions(self) -> List[str]:
        """Return the names of all sessions."""

    @abstractmethod
    def kill_session(self, name: str) -> None:
        """Kill a session."""

    @abstractmethod
    def new_window(self, session_name: str, window_name: str) -> None:
        """Create a named window in a session."""

    @abstractmethod
    def list_windows(self, session_name: str) -> List[WindowInfo]:
        """Return the windows of a session."""

    @abstractmethod
    def send_keys(self, target_pane: str, *keys: str) -> None:
        """Send keys to a pane target such as ``session:window.0``."""
