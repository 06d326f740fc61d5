"""Configuration utilities for ataman."""

from .constants import ATAMAN_RC_FILENAME, DEFAULT_TITLE, RC_TEMPLATE
from .rc_file import find_or_create_rc_file, get_rc_path
from .tree import ConfigNode, NodeKind, parse_config_text

__all__ = [
    "ATAMAN_RC_FILENAME",
    "DEFAULT_TITLE",
    "RC_TEMPLATE",
    "ConfigNode",
    "NodeKind",
    "find_or_create_rc_file",
    "get_rc_path",
    "parse_config_text",
]
