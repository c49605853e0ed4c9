"""tmux integration exceptions."""

from typing import Optional, Sequence

from tmuxctl.exceptions import TmuxCtlError


class TmuxError(TmuxCtlError):
    """Base tmux integration error."""


class TmuxCommandError(TmuxError):
    """Error executing tmux command.

    Attributes:
        command: tmux command name (e.g. ``new-session``)
        argv: Full argument vector, binary included
        returncode: Exit status, or None if the process never started
        output: Non-empty lines of combined stdout/stderr
    """

    def __init__(
        self,
        message: str,
        command: str = "",
        argv: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        output: Optional[Sequence[str]] = None,
    ):
        super().__init__(message)
        self.command = command
        self.argv = list(argv or [])
        self.returncode = returncode
        self.output = list(output or [])


class TmuxBinaryNotFoundError(TmuxCommandError):
    """tmux executable could not be found."""


class SessionCreateError(TmuxCommandError):
    """new-session failed; ``session`` still holds the requested handle."""

    def __init__(self, message: str, session, cause: TmuxCommandError):
        super().__init__(
            message,
            command=cause.command,
            argv=cause.argv,
            returncode=cause.returncode,
            output=cause.output,
        )
        self.session = session


class TmuxFormatError(TmuxError):
    """Unexpected format in tmux output."""

    def __init__(self, line: str):
        super().__init__(f"Unexpected format in list-windows result: {line}")
        self.line = line
