"""Image files decoded to 8-bit RGB or RGBA pixel data."""

from __future__ import annotations

import os
from enum import Enum
from typing import Union

from PIL import Image as PILImage


class ImageInternalFormat(Enum):
    RGB8 = "RGB8"
    RGBA8 = "RGBA8"


class ImageDataFormat(Enum):
    RGB = "RGB"
    RGBA = "RGBA"


_FORMATS = {
    "RGB": (ImageInternalFormat.RGB8, ImageDataFormat.RGB),
    "RGBA": (ImageInternalFormat.RGBA8, ImageDataFormat.RGBA),
}


def _expand_palette(img: PILImage.Image) -> PILImage.Image:
    if img.mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    if img.mode == "PA":
        return img.convert("RGBA")
    return img


class Image:
    """Pixel data of an image file, rows from top to bottom."""

    def __init__(self, file_path: Union[str, os.PathLike]) -> None:
        with PILImage.open(file_path) as opened:
            opened.load()
            img = _expand_palette(opened)
            self._channels = len(img.getbands())
            try:
                self._internal_format, self._data_format = _FORMATS[img.mode]
            except KeyError:
                raise ValueError(f"Unknown image format: {img.mode}") from None
            self._width, self._height = img.size
            self._data = img.tobytes()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def internal_format(self) -> ImageInternalFormat:
        return self._internal_format

    @property
    def data_format(self) -> ImageDataFormat:
        return self._data_format