"""Logging setup for Ataman.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

and the CLI calls ``setup_logging`` once to attach handlers to the
``ataman`` logger. Nothing is written to disk unless a log file is asked
for, either explicitly or through ATAMAN_LOG_FILE.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import ATAMAN_LOG_FILE_ENV

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

logger = logging.getLogger("ataman")


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """
    Set up logging for ataman

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Only show errors on the console
        log_file: Optional log file path (defaults to $ATAMAN_LOG_FILE if set)
    """
    if verbose:
        console_level = logging.DEBUG
    elif quiet:
        console_level = logging.ERROR
    else:
        console_level = logging.WARNING

    detailed_formatter = logging.Formatter(
        '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s'
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(message)s')

    # Clear any existing handlers
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    if log_file is None and os.environ.get(ATAMAN_LOG_FILE_ENV):
        log_file = Path(os.environ[ATAMAN_LOG_FILE_ENV]).expanduser()
    if log_file is None:
        return

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        # If we can't create the log file, continue without it
        logger.warning(f"Could not create log file {log_file}: {e}")
        return
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)
