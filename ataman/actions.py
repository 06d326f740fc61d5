"""
Host actions addressable by ``actionId``.

Bindings only name actions; the registry maps those names to callables
taking the HostContext. The default registry carries the two actions the
rc file template refers to.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List

if TYPE_CHECKING:
    from .host import HostContext

logger = logging.getLogger(__name__)

OPEN_CONFIG_ACTION_ID = "OpenAtamanConfigAction"
RELOAD_CONFIG_ACTION_ID = "ReloadAtamanConfigAction"


@dataclass
class ActionDefinition:
    """A single invokable action."""

    action_id: str
    function: Callable[["HostContext"], None]
    description: str = ""

    def __post_init__(self):
        if not callable(self.function):
            raise ValueError(f"Action {self.action_id} function must be callable")


@dataclass
class ActionRegistry:
    """Maps action ids to callables."""

    actions: Dict[str, ActionDefinition] = field(default_factory=dict)

    def register(
        self,
        action_id: str,
        function: Callable[["HostContext"], None],
        description: str = "",
    ) -> None:
        """Register an action; a second registration under the same id replaces the first."""
        if action_id in self.actions:
            logger.warning(f"Replacing action {action_id}")
        self.actions[action_id] = ActionDefinition(action_id, function, description)

    def __contains__(self, action_id: str) -> bool:
        return action_id in self.actions

    def ids(self) -> List[str]:
        return sorted(self.actions)

    def invoke(self, action_id: str, host: "HostContext") -> None:
        """Run an action.

        Raises:
            KeyError: if no action is registered under ``action_id``
        """
        definition = self.actions[action_id]
        logger.debug(f"Invoking {action_id}")
        definition.function(host)

    def missing(self, action_ids: Iterable[str]) -> List[str]:
        """Ids from ``action_ids`` that are not registered, in order, without repeats."""
        seen = set()
        result = []
        for action_id in action_ids:
            if action_id not in self.actions and action_id not in seen:
                result.append(action_id)
            seen.add(action_id)
        return result


def open_config(host: "HostContext") -> None:
    """Create the rc file if needed and hand it to the host to open."""
    from .config.constants import NOTIFICATION_TITLE
    from .config.rc_file import find_or_create_rc_file
    from .keybindings.loader import SOURCE_UNAVAILABLE_MESSAGE

    rc_file = find_or_create_rc_file()
    if rc_file is None:
        host.notify_error(NOTIFICATION_TITLE, SOURCE_UNAVAILABLE_MESSAGE)
        return
    host.open_file(rc_file)


def reload_config(host: "HostContext") -> None:
    """Reload the rc file into the process-wide store."""
    from .keybindings.loader import reload

    reload(host)


def create_default_registry() -> ActionRegistry:
    """Registry with the built-in actions."""
    registry = ActionRegistry()
    registry.register(OPEN_CONFIG_ACTION_ID, open_config, "Open ~/.atamanrc.config")
    registry.register(RELOAD_CONFIG_ACTION_ID, reload_config, "Reload ~/.atamanrc.config")
    return registry
