"""Pytest configuration and shared fixtures for nettu-scheduler-client tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: clear NETTU_* variables before each test.

    Keeps credential resolution tests independent of the developer's shell.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("NETTU_"):
            monkeypatch.delenv(key, raising=False)

    yield
