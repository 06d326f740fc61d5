"""
Config loading and reload orchestration.

``reload`` either installs a completely new Config or leaves the store
exactly as it was: the new Config is built off to the side and swapped in
as the very last step. Failures are reported to the host as notifications
and never propagate to the caller.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Tuple

from ..config.constants import (
    APPEARANCE_TITLE_PATH,
    BINDINGS_KEYWORD,
    DEFAULT_TITLE,
    NOTIFICATION_TITLE,
)
from ..config.rc_file import find_or_create_rc_file
from ..config.tree import parse_config_text
from ..exceptions import MalformedConfigError, SourceUnavailableError
from ..host import HostContext
from .builder import build_bindings_tree
from .models import Appearance, Config
from .store import ConfigStore, get_config_store

logger = logging.getLogger(__name__)

SOURCE_UNAVAILABLE_MESSAGE = "Could not find or create rc file. Aborting..."
MALFORMED_CONFIG_MESSAGE = "Config is malformed. Aborting..."


def load_config(text: str, window: Any = None, basedir: Optional[str] = None) -> Config:
    """
    Compile rc file text into a Config.

    Args:
        text: HOCON source
        window: Host window token for key chord synthesis
        basedir: Directory relative includes resolve against

    Returns:
        The compiled Config

    Raises:
        MalformedConfigError: on a parse error or a structural violation
    """
    root = parse_config_text(text, basedir=basedir)

    title = DEFAULT_TITLE
    if root.has_path(APPEARANCE_TITLE_PATH):
        title = root.get_string(APPEARANCE_TITLE_PATH)

    bindings = ()
    if root.has_path(BINDINGS_KEYWORD):
        bindings = build_bindings_tree(root.get_mapping(BINDINGS_KEYWORD).items(), window)

    return Config(appearance=Appearance(title=title), bindings=bindings)


def read_rc_file() -> Tuple[Path, str]:
    """
    Find (or create) the rc file and read it.

    Returns:
        (rc file path, contents)

    Raises:
        SourceUnavailableError: if the file can't be found, created or read
    """
    rc_file = find_or_create_rc_file()
    if rc_file is None:
        raise SourceUnavailableError()
    try:
        return rc_file, rc_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"Could not read rc file: {e}", path=str(rc_file)) from e


def reload(host: HostContext, store: Optional[ConfigStore] = None) -> None:
    """
    Re-read the rc file and install the result.

    On any failure the host is notified and ``store`` keeps its previous
    Config.
    """
    store = store or get_config_store()

    try:
        rc_file, text = read_rc_file()
    except SourceUnavailableError as e:
        logger.error(f"Reload aborted: {e}")
        host.notify_error(NOTIFICATION_TITLE, SOURCE_UNAVAILABLE_MESSAGE)
        return

    try:
        config = load_config(text, host.window, basedir=str(rc_file.parent))
    except MalformedConfigError as e:
        logger.error(f"Reload aborted, keeping previous config: {e}")
        host.notify_error(NOTIFICATION_TITLE, f"{MALFORMED_CONFIG_MESSAGE}\n{e}")
        return

    store.replace(config)
    logger.info(f"Loaded {len(config.bindings)} top-level bindings")


def startup(host: HostContext, store: Optional[ConfigStore] = None) -> None:
    """Initial load when the host application starts."""
    logger.debug("Loading config at startup")
    reload(host, store)
