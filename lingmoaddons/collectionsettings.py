"""Loading and saving the configured shortcuts of an action collection."""

from __future__ import annotations

import logging

from lingmoaddons.action import (
    Action,
    default_shortcuts,
    is_shortcuts_configurable,
    shortcuts_from_string,
    shortcuts_to_string,
)
from lingmoaddons.actioncollection import UNNAMED_PREFIX, ActionCollection
from lingmoaddons.messagedialog import ConfigGroup

_log = logging.getLogger(__name__)

NO_SHORTCUT = "none"


def _group_for(collection: ActionCollection, group: ConfigGroup | None) -> ConfigGroup:
    return group if group is not None else collection.config.group(collection.config_group)


def read_settings(collection: ActionCollection, group: ConfigGroup | None = None) -> None:
    """Apply stored shortcuts to the collection's configurable actions.

    Actions without a stored entry get their default shortcuts back. Nothing
    changes when the group holds no entries at all.
    """
    config = _group_for(collection, group)
    if not config.exists():
        return
    for name, action in collection.named_actions():
        if not is_shortcuts_configurable(action):
            continue
        entry = config.read_entry(name, "")
        if entry:
            action.shortcuts = shortcuts_from_string(entry)
        else:
            action.shortcuts = default_shortcuts(action)


def write_settings(
    collection: ActionCollection,
    group: ConfigGroup | None = None,
    write_all: bool = False,
    one_action: Action | None = None,
) -> None:
    """Store the shortcuts that differ from their defaults, or all with write_all.

    Entries equal to the default are removed. one_action is accepted for
    callers that changed a single action; every named action is still written.
    """
    config = _group_for(collection, group)
    for name, action in collection.named_actions():
        if name.startswith(UNNAMED_PREFIX):
            _log.critical("Skipped saving shortcut for action without name %r", action.text)
            continue
        if not is_shortcuts_configurable(action):
            continue
        has_entry = bool(config.read_entry(name, ""))
        same_as_default = action.shortcuts == default_shortcuts(action)
        if write_all or not same_as_default:
            text = shortcuts_to_string(action.shortcuts) or NO_SHORTCUT
            _log.debug("writing %s = %s", name, text)
            config.write_entry(name, text, collection.config_is_global)
        elif has_entry:
            _log.debug("removing %s because it equals the default", name)
            config.delete_entry(name)
    config.sync()