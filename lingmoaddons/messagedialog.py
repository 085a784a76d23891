"""Remembering "don't show again" answers of message dialogs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

_NEGATIVES = frozenset({"false", "no", "off", "0"})
_DEFAULT_GROUP = "<default>"
NOTIFICATION_GROUP = "Notification Messages"


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n")


def _unescape(value: str) -> str:
    out = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            nxt = next(chars, "")
            out.append("\n" if nxt == "n" else nxt)
        else:
            out.append(char)
    return "".join(out)


class Config:
    """A grouped key/value configuration, optionally backed by an INI-style file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._groups: dict[str, dict[str, str]] = {}
        self.global_keys: set[tuple[str, str]] = set()
        if self.path is not None and self.path.exists():
            self._load(self.path.read_text(encoding="utf-8"))

    def _load(self, text: str) -> None:
        current = _DEFAULT_GROUP
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line.startswith(("#", ";")):
                continue
            if line.startswith("[") and line.endswith("]"):
                current = line[1:-1]
                self._groups.setdefault(current, {})
                continue
            key, sep, value = line.partition("=")
            if sep:
                self._groups.setdefault(current, {})[key.strip()] = _unescape(value.strip())

    def group(self, name: str) -> ConfigGroup:
        """Return a view on the named group."""
        return ConfigGroup(self, name)

    def entries(self, group: str) -> dict[str, str]:
        return self._groups.setdefault(group, {})

    def sync(self) -> None:
        """Write the configuration to its file, if it has one."""
        if self.path is None:
            return
        sections = []
        for name, values in self._groups.items():
            if not values:
                continue
            lines = [f"[{name}]"] + [f"{key}={_escape(value)}" for key, value in values.items()]
            sections.append("\n".join(lines) + "\n")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(sections), encoding="utf-8")


class ConfigGroup:
    """A named group of entries within a Config."""

    def __init__(self, config: Config, name: str) -> None:
        self.config = config
        self.name = name

    def read_entry(self, key: str, default: Any = None) -> Any:
        """Read an entry, converting it to the type of the default."""
        value = self.config.entries(self.name).get(key)
        if value is None:
            return default
        if isinstance(default, bool):
            return value.strip().lower() not in _NEGATIVES
        if isinstance(default, (int, float)):
            try:
                return type(default)(value)
            except ValueError:
                return default
        return value

    def write_entry(self, key: str, value: Any, is_global: bool = False) -> None:
        """Store an entry; booleans are written as true/false."""
        text = ("true" if value else "false") if isinstance(value, bool) else str(value)
        self.config.entries(self.name)[key] = text
        if is_global:
            self.config.global_keys.add((self.name, key))
        else:
            self.config.global_keys.discard((self.name, key))

    def delete_entry(self, key: str) -> None:
        self.config.entries(self.name).pop(key, None)
        self.config.global_keys.discard((self.name, key))

    def exists(self) -> bool:
        return bool(self.config.entries(self.name))

    def sync(self) -> None:
        self.config.sync()


class MessageDialogHelper:
    """Reads and stores the user's "don't ask again" choices."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()

    def _group(self) -> ConfigGroup:
        return self.config.group(NOTIFICATION_GROUP)

    def should_be_shown_two_actions(self, dont_show_again_name: str) -> dict[str, bool]:
        """Return whether to show a two-action dialog and any remembered answer."""
        answer = self._group().read_entry(dont_show_again_name, "").lower()
        if answer in ("yes", "true"):
            return {"result": True, "show": False}
        if answer in ("no", "false"):
            return {"result": False, "show": False}
        return {"show": True}

    def should_be_shown_continue(self, dont_show_again_name: str) -> bool:
        return self._group().read_entry(dont_show_again_name, True)

    def _save(self, name: str, value: bool) -> None:
        if not name:
            raise ValueError("dont-show-again name must not be empty")
        group = self._group()
        group.write_entry(name, value, is_global=name.startswith(":"))
        group.sync()

    def save_dont_show_again_two_actions(self, dont_show_again_name: str, result: bool) -> None:
        self._save(dont_show_again_name, bool(result))

    def save_dont_show_again_continue(self, dont_show_again_name: str) -> None:
        self._save(dont_show_again_name, False)