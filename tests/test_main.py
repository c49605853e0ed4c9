"""Tests for the tmuxctl command-line entry point."""

import logging

from logging.handlers import RotatingFileHandler
from types import SimpleNamespace

import pytest
import structlog

from tmuxctl import main as cli
from tmuxctl.tmux.backend import WindowInfo


@pytest.fixture(autouse=True)
def _reset_logging():
    """Close handlers and restore structlog defaults after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []
    structlog.reset_defaults()


@pytest.fixture
def run_cli(monkeypatch, fake_backend):
    """Run main() against the in-memory backend."""
    monkeypatch.setattr(
        cli, "TmuxClient", SimpleNamespace(from_settings=lambda settings: fake_backend)
    )

    def _run(*argv: str) -> int:
        return cli.main(list(argv))

    return _run


def test_new_and_ls(run_cli, fake_backend, capsys):
    assert run_cli("new", "foo", "--window-name", "editor") == 0
    assert run_cli("new", "bar") == 0
    capsys.readouterr()

    assert run_cli("ls") == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["foo", "bar"]
    assert fake_backend.sessions["foo"] == [WindowInfo(0, "editor")]


def test_exists_exit_codes(run_cli):
    assert run_cli("exists", "foo") == 1
    run_cli("new", "foo")
    assert run_cli("exists", "foo") == 0


def test_rename_and_kill(run_cli, fake_backend):
    run_cli("new", "foo")

    assert run_cli("rename", "foo", "bar") == 0
    assert list(fake_backend.sessions) == ["bar"]

    assert run_cli("kill", "bar") == 0
    assert fake_backend.sessions == {}


def test_windows_output(run_cli, capsys):
    run_cli("new", "foo")
    run_cli("ensure-window", "foo", "logs")
    run_cli("ensure-window", "foo", "logs")
    capsys.readouterr()

    assert run_cli("windows", "foo") == 0

    assert capsys.readouterr().out.splitlines() == ["0 bash", "1 logs"]


def test_send_keys(run_cli, fake_backend):
    assert run_cli("send-keys", "foo", "main", "echo hi", "Enter") == 0

    assert fake_backend.sent_keys == [("foo:main.0", "echo hi", "Enter")]


def test_tmux_error_exits_one(run_cli):
    assert run_cli("kill", "ghost") == 1


def test_invalid_name_exits_one(run_cli):
    assert run_cli("new", "") == 1


def test_configuration_error_exits_one(run_cli, monkeypatch):
    monkeypatch.setenv("TMUXCTL_LOG_LEVEL", "LOUD")

    assert run_cli("ls") == 1


def test_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_setup_logging_closes_replaced_file_handler(tmp_path):
    cli.setup_logging(log_file=str(tmp_path / "first.log"))
    first = [
        h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
    ][0]

    cli.setup_logging(log_file=str(tmp_path / "second.log"))

    assert first.stream is None
    assert first not in logging.getLogger().handlers


def test_log_file_opened_once(run_cli, tmp_path):
    log_file = tmp_path / "tmuxctl.log"

    assert run_cli("--log-file", str(log_file), "ls") == 0

    file_handlers = [
        h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)


def test_debug_setting_selects_console_renderer(run_cli, monkeypatch):
    monkeypatch.setenv("TMUXCTL_DEBUG", "true")

    assert run_cli("ls") == 0

    renderer = structlog.get_config()["processors"][-1]
    assert isinstance(renderer, structlog.dev.ConsoleRenderer)
