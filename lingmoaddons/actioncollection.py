"""A named container of actions, with lookup by name and change notifications."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, ClassVar, Hashable, Iterable, Iterator

from lingmoaddons.action import Action
from lingmoaddons.messagedialog import Config

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_GROUP = "Shortcuts"
UNNAMED_PREFIX = "unnamed-"

Authorizer = Callable[[str], bool]
ActionCallback = Callable[[Action], Any]


def _application_name() -> str:
    """The name of the running program, taken from its executable."""
    return Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else ""


def _authorize_all(name: str) -> bool:
    return True


class ActionCollection:
    """Manages a set of actions, each reachable under one unique name."""

    _all: ClassVar[list["ActionCollection"]] = []

    def __init__(
        self,
        component_name: str = "",
        config: Config | None = None,
        authorizer: Authorizer | None = None,
    ) -> None:
        self.object_name = component_name
        self.config = config if config is not None else Config()
        self.authorizer: Authorizer = authorizer if authorizer is not None else _authorize_all
        self.config_group = DEFAULT_CONFIG_GROUP
        self.config_is_global = False
        self._component_name = ""
        self._component_display_name = ""
        self._actions: list[Action] = []
        self._by_name: dict[str, Action] = {}
        self.inserted_callbacks: list[ActionCallback] = []
        self.changed_callbacks: list[Callable[[], Any]] = []
        self.action_triggered_callbacks: list[ActionCallback] = []
        self.action_hovered_callbacks: list[ActionCallback] = []
        ActionCollection._all.append(self)

    @staticmethod
    def all_collections() -> list["ActionCollection"]:
        """Every collection that has been created and not closed."""
        return list(ActionCollection._all)

    def close(self) -> None:
        """Drop the collection from the list of all collections."""
        ActionCollection._all = [c for c in ActionCollection._all if c is not self]

    def __enter__(self) -> "ActionCollection":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # Component names

    @property
    def component_name(self) -> str:
        return self._component_name

    @component_name.setter
    def component_name(self, value: str) -> None:
        self._component_name = value if value else _application_name()

    @property
    def component_display_name(self) -> str:
        """The display name, falling back to the program's name."""
        return self._component_display_name or _application_name()

    @component_display_name.setter
    def component_display_name(self, value: str) -> None:
        self._component_display_name = value

    # Container protocol

    @property
    def actions(self) -> list[Action]:
        """The actions, in the order they were added."""
        return list(self._actions)

    def named_actions(self) -> list[tuple[str, Action]]:
        """(name, action) pairs, ordered by name."""
        return sorted(self._by_name.items(), key=lambda pair: pair[0])

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(list(self._actions))

    def __contains__(self, action: object) -> bool:
        return any(a is action for a in self._actions)

    def _index_of(self, action: Action) -> int:
        return next((i for i, a in enumerate(self._actions) if a is action), -1)

    # Notifications

    def _emit_changed(self) -> None:
        for callback in list(self.changed_callbacks):
            callback()

    def _forward_triggered(self, action: Action) -> None:
        for callback in list(self.action_triggered_callbacks):
            callback(action)

    def _forward_hovered(self, action: Action) -> None:
        for callback in list(self.action_hovered_callbacks):
            callback(action)

    def _disconnect(self, action: Action) -> None:
        action.triggered_callbacks[:] = [
            cb for cb in action.triggered_callbacks if cb != self._forward_triggered
        ]
        action.hovered_callbacks[:] = [
            cb for cb in action.hovered_callbacks if cb != self._forward_hovered
        ]

    # Lookup

    def action(self, name: str) -> Action | None:
        """Return the action registered under a name, or None."""
        if not name:
            return None
        return self._by_name.get(name)

    def action_at(self, index: int) -> Action | None:
        """Return the action at a position, or None if there is none."""
        if 0 <= index < len(self._actions):
            return self._actions[index]
        return None

    def actions_without_group(self) -> list[Action]:
        return [a for a in self._actions if a.action_group is None]

    def action_groups(self) -> list[Hashable]:
        """The distinct groups the actions belong to."""
        groups = (a.action_group for a in self._actions if a.action_group is not None)
        return list(dict.fromkeys(groups))

    # Changes

    def clear(self) -> None:
        """Remove every action."""
        for action in self._actions:
            self._disconnect(action)
        self._by_name.clear()
        self._actions.clear()

    def add_action(self, name: str, action: Action | None) -> Action | None:
        """Register an action under a name, replacing whatever used that name."""
        if action is None:
            return None

        index_name = name
        if not index_name:
            index_name = action.object_name
        else:
            if action.object_name and action.object_name != index_name:
                _log.debug(
                    "Registering action %s under new name %s", action.object_name, index_name
                )
            action.object_name = index_name

        if not index_name:
            index_name = f"{UNNAMED_PREFIX}{id(action):#x}"
            action.object_name = index_name

        if self._by_name.get(index_name) is action:
            return action

        if not self.authorizer(index_name):
            action.enabled = False
            action.visible = False
            action.signals_blocked = True

        old = self._by_name.get(index_name)
        if old is not None:
            self.take_action(old)

        old_index = self._index_of(action)
        if old_index != -1:
            old_name = next((k for k, v in self._by_name.items() if v is action), None)
            if old_name is not None:
                del self._by_name[old_name]
            del self._actions[old_index]
            self._disconnect(action)

        self._by_name[index_name] = action
        self._actions.append(action)
        action.triggered_callbacks.append(self._forward_triggered)
        action.hovered_callbacks.append(self._forward_hovered)

        for callback in list(self.inserted_callbacks):
            callback(action)
        self._emit_changed()
        return action

    def new_action(self, name: str, slot: Callable[[], Any] | None = None) -> Action:
        """Create an action, run slot when it is triggered, and register it."""
        action = Action()
        if slot is not None:
            action.triggered_callbacks.append(lambda _action: slot())
        self.add_action(name, action)
        return action

    def add_actions(self, actions: Iterable[Action]) -> None:
        """Register actions under their own object names."""
        for action in actions:
            self.add_action(action.object_name, action)

    def _unlist(self, action: Action) -> Action | None:
        index = self._index_of(action)
        if index == -1:
            return None
        self._by_name.pop(action.object_name, None)
        del self._actions[index]
        return action

    def take_action(self, action: Action) -> Action | None:
        """Remove an action and return it, or None if it was not here."""
        if self._unlist(action) is None:
            return None
        self._disconnect(action)
        self._emit_changed()
        return action

    def remove_action(self, action: Action) -> None:
        """Remove an action from the collection."""
        self.take_action(action)