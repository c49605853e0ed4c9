"""Session handles backed by a tmux backend."""

from typing import List, Optional

import structlog

from tmuxctl.tmux.backend import TmuxBackend, WindowInfo
from tmuxctl.tmux.client import get_default_client
from tmuxctl.tmux.exceptions import (
    SessionCreateError,
    TmuxBinaryNotFoundError,
    TmuxCommandError,
)
from tmuxctl.utils.constants import DEFAULT_PANE_INDEX

from .options import NewSessionOptions


logger = structlog.get_logger()


def validate_name(name: str, kind: str = "session") -> str:
    """Reject names that tmux output lines cannot carry.

    Raises:
        ValueError: If the name is empty or contains a newline
    """
    if not name:
        raise ValueError(f"{kind} name must not be empty")
    if "\n" in name:
        raise ValueError(f"{kind} name must not contain a newline: {name!r}")
    return name


def pane_target(session_name: str, window_name: str, pane: int = DEFAULT_PANE_INDEX) -> str:
    """Build a ``session:window.pane`` target specifier."""
    return f"{session_name}:{window_name}.{pane}"


class Session:
    """Handle for a tmux session, identified only by its name.

    The name is not reconciled with tmux: a session renamed or killed out of
    band leaves the handle stale.
    """

    def __init__(self, name: str, backend: Optional[TmuxBackend] = None):
        self.name = validate_name(name)
        self.backend = backend if backend is not None else get_default_client()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Session(name={self.name!r})"

    def exists(self) -> bool:
        """Check whether tmux currently has a session with this name."""
        return session_exists(self.name, backend=self.backend)

    def kill(self) -> None:
        """Kill the session. The handle must not be reused afterwards.

        Raises:
            TmuxCommandError: If tmux fails to kill the session
        """
        self.backend.kill_session(self.name)
        logger.info("Killed session", session=self.name)

    def rename(self, name: str) -> None:
        """Rename the session and update this handle.

        The stored name only changes if tmux accepts the rename.

        Raises:
            ValueError: If the new name is invalid
            TmuxCommandError: If tmux fails to rename the session
        """
        validate_name(name)
        try:
            self.backend.rename_session(self.name, name)
        except TmuxCommandError as e:
            logger.warning(
                "Failed to rename session", session=self.name, new_name=name, error=str(e)
            )
            raise

        logger.info("Renamed session", old_name=self.name, new_name=name)
        self.name = name

    def send_keys(self, window_name: str, *keys: str) -> None:
        """Send keys to pane 0 of a window in this session.

        Args:
            window_name: Window to target
            *keys: Key names or literal strings, e.g. ``"ls -la", "Enter"``

        Raises:
            ValueError: If the window name is invalid
            TmuxCommandError: If tmux fails to send the keys
        """
        validate_name(window_name, kind="window")
        self.backend.send_keys(pane_target(self.name, window_name), *keys)

    def list_windows(self) -> List[WindowInfo]:
        return self.backend.list_windows(self.name)

    def window_exists(self, name: str) -> bool:
        """Check whether this session has a window with the given name."""
        return any(window.name == name for window in self.list_windows())

    def ensure_window_exists(self, name: str) -> None:
        """Create a window with the given name unless one already exists.

        Check and create are separate tmux calls; a window created by someone
        else in between is not detected.

        Raises:
            ValueError: If the window name is invalid
            TmuxCommandError: If listing or creating the window fails
            TmuxFormatError: If the window listing cannot be parsed
        """
        validate_name(name, kind="window")
        if self.window_exists(name):
            return
        self.backend.new_window(self.name, name)
        logger.info("Created window", session=self.name, window=name)


def new_session(
    name: str,
    options: Optional[NewSessionOptions] = None,
    backend: Optional[TmuxBackend] = None,
) -> Session:
    """Create a detached tmux session and return its handle.

    Args:
        name: Session name
        options: Creation options, e.g. the initial window name
        backend: Backend to use; defaults to a configured ``TmuxClient``

    Returns:
        Handle for the new session

    Raises:
        ValueError: If the name is invalid
        SessionCreateError: If tmux fails; ``error.session`` holds the handle
        TmuxBinaryNotFoundError: If the tmux executable is missing
    """
    args = options.args() if options is not None else []
    session = Session(name, backend=backend)

    try:
        session.backend.new_session(name, *args)
    except TmuxBinaryNotFoundError:
        raise
    except TmuxCommandError as e:
        raise SessionCreateError(
            f"Failed to create session {name}: {e}", session=session, cause=e
        ) from e

    logger.info("Created session", session=name, args=args)
    return session


def session_exists(name: str, backend: Optional[TmuxBackend] = None) -> bool:
    """Check whether tmux has a session with the given name."""
    backend = backend if backend is not None else get_default_client()
    for session_name in backend.list_sessions():
        if session_name == name:
            return True
    return False


def list_sessions(backend: Optional[TmuxBackend] = None) -> List[Session]:
    """Get handles for all tmux sessions."""
    backend = backend if backend is not None else get_default_client()
    return [Session(name, backend=backend) for name in backend.list_sessions()]
