"""An example album model with image and video items for media viewers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

_log = logging.getLogger(__name__)


class ItemType(IntEnum):
    """The media type of an album item."""

    IMAGE = 0
    VIDEO = 1


@dataclass(frozen=True)
class AlbumItem:
    """One item of an album: its source, size, placeholder, type and caption."""

    source: str = ""
    source_width: float = 0.0
    source_height: float = 0.0
    temp_source: str = ""
    type: ItemType = ItemType.IMAGE
    caption: str = ""


class AlbumRole(IntEnum):
    SOURCE = 0
    SOURCE_WIDTH = 1
    SOURCE_HEIGHT = 2
    TEMP_SOURCE = 3
    TYPE = 4
    CAPTION = 5


_ROLE_NAMES = {
    AlbumRole.SOURCE: "source",
    AlbumRole.SOURCE_WIDTH: "sourceWidth",
    AlbumRole.SOURCE_HEIGHT: "sourceHeight",
    AlbumRole.TEMP_SOURCE: "tempSource",
    AlbumRole.TYPE: "type",
    AlbumRole.CAPTION: "caption",
}

_FIELD_BY_ROLE = {
    AlbumRole.SOURCE: "source",
    AlbumRole.SOURCE_WIDTH: "source_width",
    AlbumRole.SOURCE_HEIGHT: "source_height",
    AlbumRole.TEMP_SOURCE: "temp_source",
    AlbumRole.TYPE: "type",
    AlbumRole.CAPTION: "caption",
}


class ExampleAlbumModel:
    """Three dummy items built from a test image and a test video."""

    def __init__(self) -> None:
        self._test_image = ""
        self._test_video = ""
        self._items: list[AlbumItem] = []

    @property
    def test_image(self) -> str:
        return self._test_image

    @test_image.setter
    def test_image(self, value: str) -> None:
        if value == self._test_image:
            return
        self._test_image = value
        self._reset()

    @property
    def test_video(self) -> str:
        return self._test_video

    @test_video.setter
    def test_video(self, value: str) -> None:
        if value == self._test_video:
            return
        self._test_video = value
        self._reset()

    def _reset(self) -> None:
        image, video = self._test_image, self._test_video
        self._items = [
            AlbumItem(image, 200, 100, image, ItemType.IMAGE, "A test image"),
            AlbumItem(video, 300, 150, image, ItemType.VIDEO, "A test video"),
            AlbumItem(image, 400, 200, image, ItemType.IMAGE, ""),
        ]

    def data(self, row: int, role: int = AlbumRole.SOURCE) -> Any:
        """Return a field of the item at a row, or None for a bad row or role."""
        if row < 0:
            return None
        if row >= len(self._items):
            _log.debug("ExampleAlbumModel: row %d is past the last item", row)
            return None
        field = _FIELD_BY_ROLE.get(role)
        if field is None:
            return None
        return getattr(self._items[row], field)

    def row_count(self) -> int:
        return len(self._items)

    def role_names(self) -> dict[int, str]:
        return dict(_ROLE_NAMES)