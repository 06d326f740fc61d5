"""
Rc file location and creation.

The rc file lives at ~/.atamanrc.config unless ATAMAN_RC_PATH points
somewhere else. When it is missing it is created from RC_TEMPLATE.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import ATAMAN_RC_FILENAME, ATAMAN_RC_PATH_ENV, RC_TEMPLATE

logger = logging.getLogger(__name__)


def get_rc_path() -> Optional[Path]:
    """Get the path to the rc file, respecting ATAMAN_RC_PATH.

    Returns:
        Path to the rc file, or None if no home directory can be determined
    """
    override = os.environ.get(ATAMAN_RC_PATH_ENV)
    if override:
        return Path(override).expanduser()

    try:
        home = Path.home()
    except RuntimeError:
        logger.warning("Could not determine the home directory")
        return None
    return home / ATAMAN_RC_FILENAME


def find_or_create_rc_file() -> Optional[Path]:
    """
    Return the rc file, writing the template first if it doesn't exist.

    Returns:
        Path to an existing rc file, or None if it could not be created
    """
    rc_path = get_rc_path()
    if rc_path is None:
        return None

    if rc_path.exists():
        return rc_path

    try:
        rc_path.parent.mkdir(parents=True, exist_ok=True)
        rc_path.write_text(RC_TEMPLATE, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to create rc file at {rc_path}: {e}")
        return None

    logger.info(f"Created rc file at {rc_path}")
    return rc_path
