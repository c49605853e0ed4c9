"""Pytest fixtures for tmuxctl tests."""

import os
import shutil
import subprocess
import uuid

from collections.abc import Generator

import pytest

from tests.helpers.mocks import FakeTmuxBackend
from tmuxctl.tmux.client import TmuxClient


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path) -> None:
    """Keep TMUXCTL_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("TMUXCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_backend() -> FakeTmuxBackend:
    return FakeTmuxBackend()


@pytest.fixture
def tmux_client() -> Generator[TmuxClient, None, None]:
    """Client bound to a private tmux server that is killed afterwards."""
    if shutil.which("tmux") is None:
        pytest.skip("tmux is not installed")

    socket_name = f"tmuxctl-test-{uuid.uuid4().hex[:8]}"
    client = TmuxClient(global_args=["-L", socket_name])

    yield client

    subprocess.run(
        ["tmux", "-L", socket_name, "kill-server"],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
