"""A list of the configurable actions of some collections, for a shortcuts editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterable

from lingmoaddons.action import Action, default_shortcuts, is_shortcuts_configurable
from lingmoaddons.actioncollection import ActionCollection
from lingmoaddons.collectionsettings import write_settings

LIST_SEPARATOR = ", "


class ShortcutRole(IntEnum):
    DISPLAY = 0
    ICON_NAME = 257
    SHORTCUT = 258
    SHORTCUT_DISPLAY = 259
    DEFAULT_SHORTCUT = 260
    ALTERNATE_SHORTCUTS = 261
    COLLECTION_NAME = 262


_ROLE_NAMES = {
    ShortcutRole.DISPLAY: "actionName",
    ShortcutRole.ICON_NAME: "iconName",
    ShortcutRole.DEFAULT_SHORTCUT: "defaultShortcut",
    ShortcutRole.SHORTCUT: "shortcut",
    ShortcutRole.SHORTCUT_DISPLAY: "shortcutDisplay",
    ShortcutRole.ALTERNATE_SHORTCUTS: "alternateShortcuts",
    ShortcutRole.COLLECTION_NAME: "collectionName",
}


def alternate_shortcuts(action: Action | None) -> list[str]:
    """Every shortcut of an action but the primary one."""
    if action is None or len(action.shortcuts) <= 1:
        return []
    return list(action.shortcuts[1:])


@dataclass
class _Item:
    collection: ActionCollection
    action: Action


class ShortcutsModel:
    """One row per action whose shortcuts the user may configure."""

    def __init__(self) -> None:
        self._items: list[_Item] = []
        self._collections: list[ActionCollection] = []
        self.data_changed_callbacks: list[Callable[[int], Any]] = []

    def refresh(self, collections: Iterable[ActionCollection]) -> None:
        """Rebuild the rows from the actions of the given collections."""
        self._collections = list(collections)
        self._items = [
            _Item(collection, action)
            for collection in self._collections
            for action in collection.actions
            if is_shortcuts_configurable(action)
        ]

    def row_count(self) -> int:
        return len(self._items)

    def _item(self, row: int) -> _Item:
        if not 0 <= row < len(self._items):
            raise IndexError(f"row out of range: {row}")
        return self._items[row]

    def _changed(self, row: int) -> None:
        for callback in list(self.data_changed_callbacks):
            callback(row)

    def data(self, row: int, role: int = ShortcutRole.DISPLAY) -> Any:
        """Return a role's value for a row; raises IndexError for a bad row."""
        item = self._item(row)
        action = item.action
        if role == ShortcutRole.DISPLAY:
            return action.text
        if role == ShortcutRole.ICON_NAME:
            return action.icon_name
        if role in (ShortcutRole.SHORTCUT, ShortcutRole.DEFAULT_SHORTCUT):
            return action.shortcut
        if role == ShortcutRole.SHORTCUT_DISPLAY:
            return LIST_SEPARATOR.join(action.shortcuts)
        if role == ShortcutRole.ALTERNATE_SHORTCUTS:
            return alternate_shortcuts(action) or None
        if role == ShortcutRole.COLLECTION_NAME:
            return item.collection.component_display_name
        return None

    def role_names(self) -> dict[int, str]:
        return dict(_ROLE_NAMES)

    def update_shortcut(self, row: int, shortcut_index: int, key_sequence: str) -> list[str]:
        """Set, append or (with an empty sequence) remove one shortcut of a row.

        Returns the row's alternate shortcuts afterwards.
        """
        item = self._item(row)
        shortcuts = list(item.action.shortcuts)
        if not 0 <= shortcut_index <= len(shortcuts):
            raise IndexError(f"shortcut index out of range: {shortcut_index}")
        if not key_sequence:
            if shortcut_index != len(shortcuts):
                del shortcuts[shortcut_index]
        elif shortcut_index == len(shortcuts):
            shortcuts.append(key_sequence)
        else:
            shortcuts[shortcut_index] = key_sequence
        item.action.shortcuts = shortcuts
        self._changed(row)
        return alternate_shortcuts(item.action)

    def reset(self, row: int) -> list[str]:
        """Restore the default shortcuts of a row; returns its alternates."""
        action = self._item(row).action
        defaults = default_shortcuts(action)
        if action.shortcuts != defaults:
            action.shortcuts = defaults
        self._changed(row)
        return alternate_shortcuts(action)

    def reset_all(self) -> None:
        for row in range(self.row_count()):
            self.reset(row)

    def save(self) -> None:
        """Store the shortcuts of every collection in its configuration."""
        for collection in self._collections:
            write_settings(collection)