"""Test helpers."""

from tests.helpers.mocks import FakeTmuxBackend

__all__ = ["FakeTmuxBackend"]
