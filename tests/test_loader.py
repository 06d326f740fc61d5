"""Tests for config loading and reload."""

import pytest

from ataman.config.constants import DEFAULT_TITLE, RC_TEMPLATE
from ataman.exceptions import MalformedConfigError
from ataman.host import NotificationType
from ataman.keybindings.builder import find_binding
from ataman.keybindings.loader import load_config, reload, startup
from ataman.keybindings.models import Config, GroupBinding, SingleBinding


VALID_RC = """
appearance {
    title: "Leader"
}
bindings {
    b { description: "Build", actionId: "CompileDirty" }
    a {
        description: "Actions..."
        bindings {
            r { description: "Rename", actionId: "RenameElement" }
        }
    }
}
"""

MALFORMED_RC = """
bindings {
    a { actionId: "MissingDescription" }
}
"""


class TestLoadConfig:
    """Tests for load_config."""

    def test_default_template(self):
        config = load_config(RC_TEMPLATE)
        assert config.appearance.title == "Ataman"
        (group,) = config.bindings
        assert isinstance(group, GroupBinding)
        assert group.key == "q"
        (leaf,) = group.children
        assert isinstance(leaf, SingleBinding)
        assert leaf.key == "f"
        assert leaf.action_id == "OpenAtamanConfigAction"

    def test_title_defaults(self):
        config = load_config('bindings { a { description: "A", actionId: "A" } }')
        assert config.appearance.title == DEFAULT_TITLE

    def test_bindings_default_to_empty(self):
        config = load_config('appearance { title: "Only a title" }')
        assert config.bindings == ()
        assert config.appearance.title == "Only a title"

    def test_empty_text_gives_default_config(self):
        assert load_config("") == Config()

    def test_builds_ordered_tree(self):
        config = load_config(VALID_RC)
        assert [b.key for b in config.bindings] == ["a", "b"]
        assert find_binding(config.bindings, "ar").action_id == "RenameElement"

    def test_missing_description_is_malformed(self):
        with pytest.raises(MalformedConfigError):
            load_config(MALFORMED_RC)

    def test_title_must_be_a_string(self):
        with pytest.raises(MalformedConfigError):
            load_config("appearance { title { nested: true } }")

    def test_bindings_must_be_an_object(self):
        with pytest.raises(MalformedConfigError):
            load_config("bindings: 42")

    def test_description_must_be_a_string(self):
        with pytest.raises(MalformedConfigError):
            load_config("bindings { a { description: 42, actionId: A } }")

    def test_quoted_dotted_key(self):
        config = load_config('bindings { "g.x" { description: G, actionId: A } }')
        assert [b.key for b in config.bindings] == ["g"]

    def test_to_dict(self):
        data = load_config(VALID_RC).to_dict()
        assert data["appearance"] == {"title": "Leader"}
        assert data["bindings"][0]["bindings"][0] == {
            "key": "r",
            "keyChord": "r",
            "description": "Rename",
            "actionId": "RenameElement",
        }


class TestReload:
    """Tests for reload."""

    def test_creates_missing_rc_file_from_template(self, rc_path, host, store):
        reload(host, store)
        assert rc_path.read_text() == RC_TEMPLATE
        assert store.current == load_config(RC_TEMPLATE)

    def test_installs_new_config(self, rc_path, host, store, notifier):
        rc_path.write_text(VALID_RC)
        reload(host, store)
        assert store.current.appearance.title == "Leader"
        assert notifier.notifications == []

    def test_passes_window_to_key_chords(self, rc_path, host, store):
        rc_path.write_text(VALID_RC)
        reload(host, store)
        assert store.current.bindings[0].key_chord.source == "test-window"

    def test_is_idempotent(self, rc_path, host, store):
        rc_path.write_text(VALID_RC)
        reload(host, store)
        first = store.current
        reload(host, store)
        assert store.current == first
        assert store.current is not first

    @pytest.mark.parametrize(
        "text",
        [
            MALFORMED_RC,
            "bindings {",
            "bindings: 42",
            'bindings { a: "not an object" }',
            "appearance { title { nested: true } }",
            "bindings { a { description: 42, actionId: A } }",
            "bindings.a.description = D\nbindings.a.actionId = ${bindings.a}\n",
        ],
    )
    def test_malformed_config_keeps_previous(self, rc_path, host, store, notifier, text):
        rc_path.write_text(VALID_RC)
        reload(host, store)
        before = store.current

        rc_path.write_text(text)
        reload(host, store)

        assert store.current is before
        (notification,) = notifier.notifications
        assert notification.type is NotificationType.ERROR
        assert notification.title == "Ataman"
        assert notification.message.startswith("Config is malformed. Aborting...\n")

    def test_malformed_message_carries_parser_detail(self, rc_path, host, store, notifier):
        rc_path.write_text(MALFORMED_RC)
        reload(host, store)
        assert "description" in notifier.notifications[0].message

    def test_unavailable_source_keeps_previous(self, tmp_path, monkeypatch, host, store, notifier):
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")
        monkeypatch.setenv("ATAMAN_RC_PATH", str(blocker / ".atamanrc.config"))
        before = store.current

        reload(host, store)

        assert store.current is before
        (notification,) = notifier.notifications
        assert notification.type is NotificationType.ERROR
        assert notification.message == "Could not find or create rc file. Aborting..."

    def test_includes_resolve_next_to_rc_file(
        self, rc_path, host, store, notifier, tmp_path, monkeypatch
    ):
        (rc_path.parent / "extra.conf").write_text(
            'bindings { x { description: "Extra", actionId: "ExtraAction" } }'
        )
        rc_path.write_text('include "extra.conf"\nappearance { title: "Main" }\n')
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)

        reload(host, store)

        assert notifier.notifications == []
        assert store.current.appearance.title == "Main"
        assert find_binding(store.current.bindings, "x").action_id == "ExtraAction"

    def test_startup_loads(self, rc_path, host, store):
        rc_path.write_text(VALID_RC)
        startup(host, store)
        assert store.current.appearance.title == "Leader"
