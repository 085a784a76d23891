"""User-invokable actions with shortcuts, and helpers for their default shortcuts."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable

Callback = Callable[["Action"], Any]

_SEPARATOR = "; "
_NO_SHORTCUT = "none"


class Action:
    """A named command with text, an icon, shortcuts and trigger callbacks."""

    def __init__(self, text: str = "", icon_name: str = "", object_name: str = "") -> None:
        self.text = text
        self.icon_name = icon_name
        self.object_name = object_name
        self.enabled = True
        self.visible = True
        self.signals_blocked = False
        self.shortcuts: list[str] = []
        self.action_group: Hashable | None = None
        self.triggered_callbacks: list[Callback] = []
        self.hovered_callbacks: list[Callback] = []
        self._default_shortcuts: list[str] | None = None
        self._shortcuts_configurable: bool | None = None

    def __repr__(self) -> str:
        return f"Action(text={self.text!r}, object_name={self.object_name!r})"

    @property
    def shortcut(self) -> str:
        """The primary shortcut, or an empty string."""
        return self.shortcuts[0] if self.shortcuts else ""

    @shortcut.setter
    def shortcut(self, value: str) -> None:
        self.shortcuts = [value] if value else []

    def _emit(self, callbacks: list[Callback]) -> None:
        if self.signals_blocked:
            return
        for callback in list(callbacks):
            callback(self)

    def trigger(self) -> None:
        """Run the triggered callbacks, if the action is enabled."""
        if not self.enabled:
            return
        self._emit(self.triggered_callbacks)

    def hover(self) -> None:
        """Run the hovered callbacks."""
        self._emit(self.hovered_callbacks)


def default_shortcuts(action: Action) -> list[str]:
    """Return the default shortcuts recorded for an action."""
    return list(action._default_shortcuts or [])


def default_shortcut(action: Action) -> str:
    """Return the primary default shortcut of an action, or an empty string."""
    shortcuts = default_shortcuts(action)
    return shortcuts[0] if shortcuts else ""


def set_default_shortcuts(action: Action, shortcuts: Iterable[str]) -> None:
    """Record the default shortcuts of an action and make them current."""
    values = list(shortcuts)
    action.shortcuts = list(values)
    action._default_shortcuts = list(values)


def set_default_shortcut(action: Action, shortcut: str) -> None:
    set_default_shortcuts(action, [shortcut])


def is_shortcuts_configurable(action: Action) -> bool:
    """Tell whether the user may change the action's shortcuts; true unless set."""
    configurable = action._shortcuts_configurable
    return True if configurable is None else configurable


def set_shortcuts_configurable(action: Action, configurable: bool) -> None:
    action._shortcuts_configurable = bool(configurable)


def shortcuts_from_string(text: str) -> list[str]:
    """Parse a stored shortcut list such as "Ctrl+A; Ctrl+B"."""
    if text.strip().lower() == _NO_SHORTCUT:
        return []
    return [part.strip() for part in text.split(";") if part.strip()]


def shortcuts_to_string(shortcuts: Iterable[str]) -> str:
    """Format shortcuts for storage, separated by "; "."""
    return _SEPARATOR.join(s for s in shortcuts if s)