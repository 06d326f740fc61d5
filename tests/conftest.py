"""Shared pytest fixtures for ataman tests."""

import logging

import pytest

from ataman.actions import create_default_registry
from ataman.config.constants import ATAMAN_RC_PATH_ENV
from ataman.host import HostContext, RecordingNotifier
from ataman.keybindings.store import ConfigStore


@pytest.fixture
def rc_path(tmp_path, monkeypatch):
    """Point ATAMAN_RC_PATH at a (not yet existing) file in tmp_path."""
    path = tmp_path / ".atamanrc.config"
    monkeypatch.setenv(ATAMAN_RC_PATH_ENV, str(path))
    return path


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def opened_files():
    """Files handed to the host's file opener."""
    return []


@pytest.fixture
def host(notifier, opened_files):
    return HostContext(
        notifier=notifier,
        actions=create_default_registry(),
        open_file=opened_files.append,
        window="test-window",
    )


@pytest.fixture
def store():
    """A fresh store so tests never touch the process-wide one."""
    return ConfigStore()


@pytest.fixture(autouse=True)
def _reset_ataman_logger():
    """Drop handlers the CLI attaches so they don't outlive the runner's streams."""
    yield
    logging.getLogger("ataman").handlers.clear()
