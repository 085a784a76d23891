"""The command bar model: enabled actions, ranked by how recently they were used."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable

from lingmoaddons.action import Action

MAX_LAST_USED = 6


class CommandBarRole(IntEnum):
    DISPLAY = 0
    DECORATION = 1
    TEXT_ALIGNMENT = 7
    ACTION = 256
    SCORE = 257
    DISPLAY_NAME = 258
    SHORTCUT = 259


_ROLE_NAMES = {
    0: "display",
    1: "decoration",
    2: "edit",
    3: "toolTip",
    4: "statusTip",
    5: "whatsThis",
    CommandBarRole.ACTION: "qaction",
    CommandBarRole.SCORE: "score",
    CommandBarRole.SHORTCUT: "shortcut",
    CommandBarRole.DISPLAY_NAME: "displayName",
}


@dataclass
class CommandBarItem:
    """One row: the group an action came from, the action and its score."""

    group_name: str
    action: Action
    score: int = 0


@dataclass
class ActionGroup:
    """Actions that belong together, such as those of one menu."""

    name: str
    actions: list[Action] = field(default_factory=list)


def _remove_accelerator_marker(text: str) -> str:
    out = []
    chars = iter(text)
    for char in chars:
        if char == "&":
            nxt = next(chars, "")
            out.append(nxt)
        else:
            out.append(char)
    return "".join(out)


class CommandBarModel:
    """A two-column table of actions: "group: text" and the shortcut."""

    def __init__(self) -> None:
        self._rows: list[CommandBarItem] = []
        self._last_triggered: list[str] = []

    @property
    def last_used_actions(self) -> list[str]:
        """Texts of recently triggered actions, most recent first."""
        return list(self._last_triggered)

    @last_used_actions.setter
    def last_used_actions(self, names: Iterable[str]) -> None:
        self._last_triggered = list(names)[:MAX_LAST_USED]

    def refresh(self, action_groups: Iterable[ActionGroup]) -> None:
        """Rebuild the rows from groups; set last used actions before calling."""
        rows: list[CommandBarItem] = []
        seen: set[int] = set()
        for group in action_groups:
            for action in group.actions:
                if not action.enabled or id(action) in seen:
                    continue
                seen.add(id(action))
                rows.append(CommandBarItem(group.name, action, -1))

        # The most recently used action ends up with the highest score.
        for score, name in enumerate(reversed(self._last_triggered)):
            item = next((row for row in rows if row.action.text == name), None)
            if item is not None:
                item.score = score
        self._rows = rows

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return 2

    def data(self, row: int, column: int = 0, role: int = CommandBarRole.DISPLAY) -> Any:
        """Return a role's value for a cell, or None."""
        if not 0 <= row < len(self._rows) or not 0 <= column < self.column_count():
            return None
        entry = self._rows[row]
        action = entry.action
        if role in (CommandBarRole.DISPLAY, CommandBarRole.DISPLAY_NAME):
            if column == 0:
                group = _remove_accelerator_marker(entry.group_name)
                text = _remove_accelerator_marker(action.text)
                return f"{group}: {text}"
            return action.shortcut
        if role == CommandBarRole.SHORTCUT:
            return action.shortcut
        if role == CommandBarRole.DECORATION:
            return action.icon_name if column == 0 else None
        if role == CommandBarRole.TEXT_ALIGNMENT:
            return "left" if column == 0 else "right"
        if role == CommandBarRole.ACTION:
            return action
        if role == CommandBarRole.SCORE:
            return entry.score
        return None

    def item(self, row: int) -> CommandBarItem:
        return self._rows[row]

    def set_score(self, row: int, score: int) -> bool:
        """Set the match score of a row; False if the row does not exist."""
        if not 0 <= row < len(self._rows):
            return False
        self._rows[row].score = int(score)
        return True

    def action_triggered(self, name: str) -> None:
        """Record that the action with this text was triggered."""
        if len(self._last_triggered) == MAX_LAST_USED:
            self._last_triggered.pop()
        self._last_triggered.insert(0, name)

    def role_names(self) -> dict[int, str]:
        return dict(_ROLE_NAMES)