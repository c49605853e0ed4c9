"""Tests for configuration loading."""

import pytest

from tmuxctl.config import Settings, load_config
from tmuxctl.exceptions import ConfigurationError, InvalidConfigError
from tmuxctl.tmux.client import get_default_client


def test_defaults():
    settings = load_config()

    assert settings.tmux_binary == "tmux"
    assert settings.socket_name is None
    assert settings.log_level == "INFO"
    assert settings.debug is False
    assert settings.global_args == []


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TMUXCTL_TMUX_BINARY", "/opt/tmux/bin/tmux")
    monkeypatch.setenv("TMUXCTL_SOCKET_NAME", "ci")
    monkeypatch.setenv("TMUXCTL_LOG_LEVEL", "debug")

    settings = load_config()

    assert settings.tmux_binary == "/opt/tmux/bin/tmux"
    assert settings.global_args == ["-L", "ci"]
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("TMUXCTL_SOCKET_NAME=from-file\n")

    assert load_config().socket_name == "from-file"


def test_blank_socket_name_is_unset(monkeypatch):
    monkeypatch.setenv("TMUXCTL_SOCKET_NAME", "  ")

    assert load_config().socket_name is None


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("TMUXCTL_LOG_LEVEL", "LOUD")

    with pytest.raises(InvalidConfigError, match="Configuration loading failed") as excinfo:
        load_config()

    assert isinstance(excinfo.value, ConfigurationError)


def test_blank_binary_rejected():
    with pytest.raises(ValueError):
        Settings(tmux_binary=" ")


def test_default_client_uses_environment(monkeypatch):
    monkeypatch.setenv("TMUXCTL_SOCKET_NAME", "work")

    client = get_default_client()

    assert client.binary == "tmux"
    assert client.global_args == ["-L", "work"]
