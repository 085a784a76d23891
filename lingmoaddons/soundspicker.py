"""A list of ringtone or notification sounds found in the data directories."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_THEME = "lingmo-mobile"


class SoundRole(IntEnum):
    NAME = 256
    URL = 257


_ROLE_NAMES = {SoundRole.NAME: "ringtoneName", SoundRole.URL: "sourceUrl"}


def _default_data_dirs() -> list[str]:
    home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    system = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    return [home, *(d for d in system.split(os.pathsep) if d)]


def _files_under(root: Path) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        for name in sorted(filenames):
            if not name.startswith("."):
                yield os.path.join(dirpath, name)


def _sound_name(path: str) -> str:
    name = path
    suffix = name.rfind(".")
    if suffix > 0:
        name = name[:suffix]
    slash = max(name.rfind("/"), name.rfind(os.sep))
    return name[slash + 1 :]


class SoundsPickerModel:
    """Sound files of a theme, with the default sounds moved to the front."""

    def __init__(self, data_dirs: Iterable[str | Path] | None = None) -> None:
        dirs = _default_data_dirs() if data_dirs is None else data_dirs
        self.data_dirs = [Path(d) for d in dirs]
        self._default_audio: list[str] = []
        self._sounds: list[str] = []
        self._notification = False
        self._theme = DEFAULT_THEME
        self._load_files()

    def _load_files(self) -> None:
        self._sounds.clear()
        for directory in self.data_dirs:
            base = directory / "sounds" / self._theme / "stereo"
            if not base.is_dir():
                continue
            if not self._notification and (base / "ringtone").is_dir():
                base = base / "ringtone"
            elif self._notification and (base / "notification").is_dir():
                base = base / "notification"
            self._sounds.extend(_files_under(base))

    def _rearrange(self) -> None:
        front = 0
        for row in range(len(self._sounds)):
            if _sound_name(self._sounds[row]) in self._default_audio:
                self._sounds[row], self._sounds[front] = self._sounds[front], self._sounds[row]
                front += 1

    @property
    def notification(self) -> bool:
        return self._notification

    @notification.setter
    def notification(self, value: bool) -> None:
        if value == self._notification:
            return
        self._notification = value
        if not self.data_dirs:
            return
        # The reload check looks directly under the theme, not under "sounds".
        probe = self.data_dirs[0] / self._theme / "stereo"
        wanted = "notification" if value else "ringtone"
        if (probe / wanted).is_dir():
            self._load_files()
            self._rearrange()

    @property
    def default_audio(self) -> list[str]:
        return list(self._default_audio)

    @default_audio.setter
    def default_audio(self, names: Iterable[str]) -> None:
        self._default_audio = list(names)
        self._rearrange()

    @property
    def theme(self) -> str:
        return self._theme

    @theme.setter
    def theme(self, value: str) -> None:
        if value == self._theme:
            return
        self._theme = value
        self._load_files()
        self._rearrange()

    def initial_source_url(self, index: int) -> str:
        """Return the path of the sound at an index, or an empty string."""
        if 0 <= index < len(self._sounds):
            return self._sounds[index]
        return ""

    def data(self, row: int, role: int = SoundRole.URL) -> str | None:
        """Return the sound's name or path for a row, or None if out of range."""
        if not 0 <= row < len(self._sounds):
            return None
        if role == SoundRole.NAME:
            return _sound_name(self._sounds[row])
        return self._sounds[row]

    def row_count(self) -> int:
        return len(self._sounds)

    def role_names(self) -> dict[int, str]:
        return dict(_ROLE_NAMES)