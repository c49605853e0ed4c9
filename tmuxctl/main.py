"""Command-line entry point for tmuxctl."""

import argparse
import logging
import sys

from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from tmuxctl import __version__
from tmuxctl.config import load_config
from tmuxctl.exceptions import ConfigurationError
from tmuxctl.session import (
    NewSessionOptions,
    Session,
    list_sessions,
    new_session,
    session_exists,
)
from tmuxctl.tmux import TmuxBackend, TmuxClient, TmuxError
from tmuxctl.utils.constants import (
    APP_DESCRIPTION,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
)


def setup_logging(
    debug: bool = False, log_file: Optional[str] = None, log_level: str = "WARNING"
) -> None:
    """Configure structured logging with console and optional file output."""
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Close and clear existing handlers
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []

    # Console handler; stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            filename=log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.processors.JSONRenderer()
                if not debug
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tmuxctl",
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"tmuxctl {__version__}"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Create a detached session")
    new_parser.add_argument("name")
    new_parser.add_argument("--window-name", help="Name of the initial window")

    subparsers.add_parser("ls", help="List session names")

    exists_parser = subparsers.add_parser(
        "exists", help="Exit 0 if the session exists, 1 otherwise"
    )
    exists_parser.add_argument("name")

    rename_parser = subparsers.add_parser("rename", help="Rename a session")
    rename_parser.add_argument("old_name")
    rename_parser.add_argument("new_name")

    kill_parser = subparsers.add_parser("kill", help="Kill a session")
    kill_parser.add_argument("name")

    windows_parser = subparsers.add_parser("windows", help="List windows of a session")
    windows_parser.add_argument("name")

    ensure_parser = subparsers.add_parser(
        "ensure-window", help="Create a window unless it already exists"
    )
    ensure_parser.add_argument("name")
    ensure_parser.add_argument("window")

    keys_parser = subparsers.add_parser(
        "send-keys", help="Send keys to pane 0 of a window"
    )
    keys_parser.add_argument("name")
    keys_parser.add_argument("window")
    keys_parser.add_argument("keys", nargs="+")

    return parser.parse_args(argv)


def dispatch(args: argparse.Namespace, backend: TmuxBackend) -> int:
    """Run the selected subcommand and return the exit code."""
    if args.command == "new":
        new_session(
            args.name, NewSessionOptions(window_name=args.window_name), backend=backend
        )
    elif args.command == "ls":
        for session in list_sessions(backend=backend):
            print(session.name)
    elif args.command == "exists":
        return 0 if session_exists(args.name, backend=backend) else 1
    elif args.command == "rename":
        Session(args.old_name, backend=backend).rename(args.new_name)
    elif args.command == "kill":
        Session(args.name, backend=backend).kill()
    elif args.command == "windows":
        for window in Session(args.name, backend=backend).list_windows():
            print(f"{window.index} {window.name}")
    elif args.command == "ensure-window":
        Session(args.name, backend=backend).ensure_window_exists(args.window)
    elif args.command == "send-keys":
        Session(args.name, backend=backend).send_keys(args.window, *args.keys)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)

    # Until the config is known, only errors are logged, to stderr, and no
    # logger is cached
    structlog.reset_defaults()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.ERROR),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        config = load_config()
    except ConfigurationError as e:
        structlog.get_logger().error("Configuration error", error=str(e))
        return 1

    setup_logging(
        debug=args.debug or config.debug,
        log_file=args.log_file,
        log_level=config.log_level,
    )
    logger = structlog.get_logger()
    logger.debug("Starting tmuxctl", version=__version__, command=args.command)

    backend = TmuxClient.from_settings(config)

    try:
        return dispatch(args, backend)
    except TmuxError as e:
        logger.error("tmux error", command=args.command, error=str(e))
        return 1
    except ValueError as e:
        logger.error("Invalid argument", command=args.command, error=str(e))
        return 1


def run() -> None:
    """Synchronous entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    run()
