"""Tests for host notifiers and logging setup."""

import logging
from io import StringIO

from rich.console import Console

from ataman.host import (
    ConsoleNotifier,
    LoggingNotifier,
    Notification,
    NotificationType,
    Notifier,
    RecordingNotifier,
)
from ataman.utils.logging import setup_logging


def test_notifiers_satisfy_protocol():
    assert isinstance(ConsoleNotifier(), Notifier)
    assert isinstance(LoggingNotifier(), Notifier)
    assert isinstance(RecordingNotifier(), Notifier)


def test_console_notifier_renders_panel():
    buffer = StringIO()
    notifier = ConsoleNotifier(Console(file=buffer, width=80, color_system=None))
    notifier.notify(Notification("Ataman", "Config is malformed", NotificationType.ERROR))
    output = buffer.getvalue()
    assert "Ataman" in output
    assert "Config is malformed" in output


def test_logging_notifier_uses_matching_level(caplog):
    with caplog.at_level(logging.WARNING, logger="ataman"):
        LoggingNotifier().notify(Notification("Ataman", "Oops", NotificationType.ERROR))
    assert caplog.records[-1].levelno == logging.ERROR
    assert "Ataman: Oops" in caplog.text


def test_recording_notifier_filters_errors():
    notifier = RecordingNotifier()
    notifier.notify(Notification("t", "info"))
    notifier.notify(Notification("t", "bad", NotificationType.ERROR))
    assert [n.message for n in notifier.errors] == ["bad"]


def test_setup_logging_writes_requested_file(tmp_path):
    log_file = tmp_path / "logs" / "ataman.log"
    setup_logging(verbose=True, log_file=log_file)
    logging.getLogger("ataman.test").debug("hello from the test")
    for handler in logging.getLogger("ataman").handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text()


def test_setup_logging_without_file_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.delenv("ATAMAN_LOG_FILE", raising=False)
    setup_logging(quiet=True)
    handlers = logging.getLogger("ataman").handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.ERROR
