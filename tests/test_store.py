"""Tests for the process-wide config store."""

from ataman.keybindings.models import Appearance, Config
from ataman.keybindings.store import ConfigStore, get_config_store


def test_starts_with_default_config():
    store = ConfigStore()
    assert store.current == Config()
    assert store.current.appearance.title == "Ataman"
    assert store.current.bindings == ()


def test_replace_swaps_whole_config():
    store = ConfigStore()
    new = Config(appearance=Appearance(title="New"))
    previous = store.replace(new)
    assert store.current is new
    assert previous == Config()


def test_reset():
    store = ConfigStore(Config(appearance=Appearance(title="Custom")))
    store.reset()
    assert store.current == Config()


def test_process_store_is_shared():
    assert get_config_store() is get_config_store()
