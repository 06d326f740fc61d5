"""
Process-wide holder of the active Config.

Lifecycle: starts out as the default ``Config()`` (default title, no
bindings), is replaced only by a successful reload, and is read by any
number of consumers. Readers take ``store.current`` without locking and
always get a complete Config; ``replace`` is the only write path.
"""

import logging
import threading

from .models import Config

logger = logging.getLogger(__name__)


class ConfigStore:
    """Single-writer, many-reader cell holding the compiled Config."""

    def __init__(self, initial: Config | None = None):
        self._config = initial if initial is not None else Config()
        self._lock = threading.Lock()

    @property
    def current(self) -> Config:
        """The active Config."""
        return self._config

    def replace(self, config: Config) -> Config:
        """Install a fully built Config in one reference swap.

        Returns:
            The Config that was active before
        """
        with self._lock:
            previous = self._config
            self._config = config
        logger.debug(
            f"Config replaced: {len(config.bindings)} top-level bindings, "
            f"title={config.appearance.title!r}"
        )
        return previous

    def reset(self) -> None:
        """Go back to the default Config."""
        self.replace(Config())


_store = ConfigStore()


def get_config_store() -> ConfigStore:
    """Get the process-wide ConfigStore."""
    return _store
