"""
Host environment seen by the loader.

The loader needs very little from the application embedding it: a window
token for key chord synthesis, somewhere to send user-visible
notifications, a registry of invokable actions and a way to open a file.
``HostContext`` bundles these; ``create_cli_host`` builds the one the
command line uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Protocol, runtime_checkable

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from .actions import ActionRegistry

logger = logging.getLogger(__name__)


class NotificationType(Enum):
    """Severity of a user-visible notification."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    type: NotificationType = NotificationType.INFORMATION


@runtime_checkable
class Notifier(Protocol):
    """Sink for user-visible notifications."""

    def notify(self, notification: Notification) -> None:
        ...


class ConsoleNotifier:
    """Shows notifications as rich panels."""

    _COLORS = {
        NotificationType.INFORMATION: "blue",
        NotificationType.WARNING: "yellow",
        NotificationType.ERROR: "red",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, color_system="auto")

    def notify(self, notification: Notification) -> None:
        color = self._COLORS[notification.type]
        message = Text(notification.message, style=f"bold {color}")
        panel = Panel(
            message,
            title=f"[bold]{notification.title}[/bold]",
            title_align="left",
            border_style=color,
            padding=(0, 1),
        )
        self.console.print(panel)


class LoggingNotifier:
    """Sends notifications to the log instead of the screen."""

    _LEVELS = {
        NotificationType.INFORMATION: logging.INFO,
        NotificationType.WARNING: logging.WARNING,
        NotificationType.ERROR: logging.ERROR,
    }

    def notify(self, notification: Notification) -> None:
        logger.log(
            self._LEVELS[notification.type],
            f"{notification.title}: {notification.message}",
        )


class RecordingNotifier:
    """Keeps every notification; handy for embedding and tests."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def errors(self) -> List[Notification]:
        return [n for n in self.notifications if n.type is NotificationType.ERROR]


def launch_file(path: Path) -> None:
    """Open a file with the platform's default application."""
    logger.info(f"Opening {path}")
    typer.launch(str(path))


@dataclass
class HostContext:
    """Everything the loader and the built-in actions need from the host."""

    notifier: Notifier
    actions: ActionRegistry
    open_file: Callable[[Path], None] = launch_file
    window: Any = None

    def notify_error(self, title: str, message: str) -> None:
        self.notifier.notify(Notification(title, message, NotificationType.ERROR))


def create_cli_host(console: Optional[Console] = None) -> HostContext:
    """Host used by the ``ataman`` command line."""
    from .actions import create_default_registry

    return HostContext(
        notifier=ConsoleNotifier(console),
        actions=create_default_registry(),
    )
