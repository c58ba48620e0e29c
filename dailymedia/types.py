"""Core data models returned by the daily media selectors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal

MediaType = Literal["image", "video"]


class KenBurnsClass(str, Enum):
    """Pan/zoom animation applied to the day's image."""

    PAN_LEFT = "pan-left"
    PAN_RIGHT = "pan-right"
    PAN_UP = "pan-up"
    PAN_DOWN = "pan-down"
    ZOOM_IN = "zoom-in"
    ZOOM_OUT = "zoom-out"

    @property
    def css_class(self) -> str:
        """Stylesheet class name used by the page renderer."""
        return f"kenburns-{self.value}"


@dataclass(slots=True, frozen=True)
class MediaSelection:
    """The media item shown on a single calendar day."""

    date: date
    day_of_year: int
    media_type: MediaType
    index: int
    src: str
    favicon_src: str

    @property
    def is_video(self) -> bool:
        return self.media_type == "video"


@dataclass(slots=True, frozen=True)
class AnimationChoice:
    """Ken Burns animation picked for a loaded image in a given viewport."""

    image_size: tuple[int, int]
    viewport_size: tuple[int, int]
    ratio: float
    flip: bool
    animation: KenBurnsClass
