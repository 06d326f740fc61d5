"""
Ataman leader-key bindings.

The rc file is compiled into a tree of bindings and kept in a
process-wide store.

Usage:
    from ataman.keybindings import get_config_store, reload

    # At host startup
    reload(host)
    config = get_config_store().current
"""

from .builder import (
    DuplicateKeyReport,
    build_bindings_tree,
    find_binding,
    find_child,
    find_duplicate_keys,
    iter_bindings,
    sort_bindings,
)
from .keychord import KeyChord, Modifier, synthesize
from .loader import load_config, reload, startup
from .models import Appearance, Config, GroupBinding, LeaderBinding, SingleBinding
from .store import ConfigStore, get_config_store

__all__ = [
    "Appearance",
    "Config",
    "ConfigStore",
    "DuplicateKeyReport",
    "GroupBinding",
    "KeyChord",
    "LeaderBinding",
    "Modifier",
    "SingleBinding",
    "build_bindings_tree",
    "find_binding",
    "find_child",
    "find_duplicate_keys",
    "get_config_store",
    "iter_bindings",
    "load_config",
    "reload",
    "sort_bindings",
    "startup",
    "synthesize",
]
