"""Pillow helpers for reading the natural size of media files."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

_ORIENTATION_TAG = 0x0112
# EXIF orientations 5-8 rotate by a quarter turn, swapping width and height.
_TRANSPOSED_ORIENTATIONS = {5, 6, 7, 8}


def natural_size(path: str | Path) -> tuple[int, int]:
    """Return the ``(width, height)`` an image displays at once EXIF rotation is applied.

    Only the header is read; pixel data is never decoded.
    """
    try:
        with Image.open(path) as image:
            width, height = image.size
            orientation = image.getexif().get(_ORIENTATION_TAG, 1)
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"Cannot read image dimensions from {path}: {exc}") from exc

    if width <= 0 or height <= 0:
        raise ValueError(f"Image {path} reports empty dimensions {width}x{height}")
    if orientation in _TRANSPOSED_ORIENTATIONS:
        return height, width
    return width, height
