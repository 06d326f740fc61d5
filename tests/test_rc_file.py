"""Tests for rc file location and creation."""

from unittest.mock import patch

from ataman.config.constants import RC_TEMPLATE
from ataman.config.rc_file import find_or_create_rc_file, get_rc_path


def test_get_rc_path_defaults_to_home(tmp_path, monkeypatch):
    """Without an override the rc file lives in the home directory."""
    monkeypatch.delenv("ATAMAN_RC_PATH", raising=False)
    with patch("pathlib.Path.home", return_value=tmp_path):
        assert get_rc_path() == tmp_path / ".atamanrc.config"


def test_get_rc_path_respects_override(rc_path):
    assert get_rc_path() == rc_path


def test_get_rc_path_without_home(monkeypatch):
    monkeypatch.delenv("ATAMAN_RC_PATH", raising=False)
    with patch("pathlib.Path.home", side_effect=RuntimeError("no home")):
        assert get_rc_path() is None
        assert find_or_create_rc_file() is None


def test_creates_file_from_template(rc_path):
    assert find_or_create_rc_file() == rc_path
    assert rc_path.read_text() == RC_TEMPLATE


def test_existing_file_is_left_alone(rc_path):
    rc_path.write_text("appearance { title: Mine }\n")
    assert find_or_create_rc_file() == rc_path
    assert rc_path.read_text() == "appearance { title: Mine }\n"


def test_returns_none_when_file_cannot_be_created(tmp_path, monkeypatch):
    blocker = tmp_path / "file"
    blocker.write_text("")
    monkeypatch.setenv("ATAMAN_RC_PATH", str(blocker / "rc"))
    assert find_or_create_rc_file() is None
