"""tmux client for session and window management."""

import re
import subprocess

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog

from tmuxctl.utils.constants import (
    DEFAULT_TMUX_BINARY,
    SESSION_NAME_FORMAT,
    WINDOW_LIST_FORMAT,
)

from .backend import TmuxBackend, WindowInfo
from .exceptions import TmuxBinaryNotFoundError, TmuxCommandError, TmuxFormatError


logger = structlog.get_logger()

LIST_WINDOWS_FORMAT_RE = re.compile(r"^(\d+) (.*)$", re.ASCII)


@dataclass
class CommandResult:
    """Output of a single tmux invocation."""

    argv: List[str]
    returncode: int
    lines: List[str] = field(default_factory=list)


def split_output(output: str) -> List[str]:
    """Split combined output into its non-empty lines."""
    return [row for row in output.split("\n") if row]


def parse_window_line(line: str) -> WindowInfo:
    """Parse one ``#{window_index} #{window_name}`` line.

    Raises:
        TmuxFormatError: If the line does not match or the name is empty
        ValueError: If the index cannot be converted to an integer
    """
    match = LIST_WINDOWS_FORMAT_RE.match(line)
    if match is None or match.group(2) == "":
        raise TmuxFormatError(line)
    return WindowInfo(index=int(match.group(1)), name=match.group(2))


class TmuxClient(TmuxBackend):
    """Client that runs tmux as a subprocess."""

    def __init__(
        self,
        binary: str = DEFAULT_TMUX_BINARY,
        global_args: Optional[Sequence[str]] = None,
    ):
        """Initialize tmux client.

        Args:
            binary: tmux executable name or path
            global_args: Arguments placed before the command, e.g. ``["-L", "test"]``
        """
        self.binary = binary
        self.global_args = list(global_args or [])

    @classmethod
    def from_settings(cls, settings) -> "TmuxClient":
        """Build a client from application settings."""
        return cls(binary=settings.tmux_binary, global_args=settings.global_args)

    def run_command(self, command_name: str, *args: str) -> CommandResult:
        """Execute tmux command and return its non-empty output lines.

        Args:
            command_name: tmux command, e.g. ``list-sessions``
            *args: Command arguments

        Returns:
            CommandResult with the combined stdout/stderr lines

        Raises:
            TmuxBinaryNotFoundError: If the tmux executable is missing
            TmuxCommandError: If tmux exits with a non-zero status
        """
        argv = [self.binary, *self.global_args, command_name, *args]

        try:
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except FileNotFoundError as e:
            logger.warning("tmux binary not found", binary=self.binary)
            raise TmuxBinaryNotFoundError(
                f"{self.binary} command not found. Is tmux installed?",
                command=command_name,
                argv=argv,
            ) from e

        lines = split_output(proc.stdout or "")

        logger.debug(
            "Ran tmux command",
            argv=argv,
            returncode=proc.returncode,
            lines=len(lines),
        )

        if proc.returncode != 0:
            error_msg = "\n".join(lines)
            logger.warning(
                "tmux command failed",
                command=command_name,
                returncode=proc.returncode,
                error=error_msg,
            )
            raise TmuxCommandError(
                f"tmux {command_name} failed (exit {proc.returncode}): {error_msg}",
                command=command_name,
                argv=argv,
                returncode=proc.returncode,
                output=lines,
            )

        return CommandResult(argv=argv, returncode=proc.returncode, lines=lines)

    def new_session(self, name: str, *args: str) -> None:
        """Create a detached session.

        Runs ``tmux new-session -s name -d [args...]``.
        """
        self.run_command("new-session", "-s", name, "-d", *args)

    def rename_session(self, old_name: str, new_name: str) -> None:
        self.run_command("rename-session", "-t", old_name, new_name)

    def list_sessions(self) -> List[str]:
        """Get the names of all sessions.

        Returns:
            Session names, or an empty list if tmux reports an error
            (usually because no server is running)

        Raises:
            TmuxBinaryNotFoundError: If the tmux executable is missing
        """
        try:
            result = self.run_command("list-sessions", "-F", SESSION_NAME_FORMAT)
        except TmuxBinaryNotFoundError:
            raise
        except TmuxCommandError as e:
            logger.debug("No sessions listed", error=str(e))
            return []

        return result.lines

    def kill_session(self, name: str) -> None:
        self.run_command("kill-session", "-t", name)

    def new_window(self, session_name: str, window_name: str) -> None:
        self.run_command("new-window", "-t", session_name, "-n", window_name)

    def list_windows(self, session_name: str) -> List[WindowInfo]:
        """Get the windows of a session.

        Raises:
            TmuxCommandError: If tmux fails
            TmuxFormatError: If any output line is malformed
        """
        result = self.run_command(
            "list-windows", "-t", session_name, "-F", WINDOW_LIST_FORMAT
        )
        return [parse_window_line(line) for line in result.lines]

    def send_keys(self, target_pane: str, *keys: str) -> None:
        """Send keys to a pane.

        Args:
            target_pane: Pane ID or ``session:window.pane`` target,
                for example ``mysession:mywindow.1``
            *keys: Key names (``Enter``, ``C-c``) or literal strings
        """
        self.run_command("send-keys", "-t", target_pane, *keys)


def get_default_client() -> TmuxClient:
    """Build a client from the environment configuration."""
    from tmuxctl.config import load_config

    return TmuxClient.from_settings(load_config())
