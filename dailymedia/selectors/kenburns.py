"""Ken Burns animation choice from image and viewport geometry."""

from __future__ import annotations

from datetime import date, datetime

from ..config import MediaConfig
from ..seeded import lcg_next
from ..types import AnimationChoice, KenBurnsClass
from ..utils.calendar import as_date
from ..utils.run_logger import RunLogger
from .base import BaseSelector

# Crop ratios strictly beyond these bounds pan; the bounds themselves zoom.
WIDE_THRESHOLD = 1.15
TALL_THRESHOLD = 0.85


def daily_direction_flip(on: date | datetime) -> bool:
    """Return the day's mirror flag for pan and zoom direction."""
    current = as_date(on)
    seed = current.year * 10000 + current.month * 100 + current.day
    return lcg_next(seed * 3) % 2 == 0


def crop_ratio(image_width: float, image_height: float, viewport_width: float, viewport_height: float) -> float:
    """Image aspect ratio divided by viewport aspect ratio."""
    for label, value in (
        ("image_width", image_width),
        ("image_height", image_height),
        ("viewport_width", viewport_width),
        ("viewport_height", viewport_height),
    ):
        if value <= 0:
            raise ValueError(f"{label} must be positive, got {value}")
    image_aspect = image_width / image_height
    viewport_aspect = viewport_width / viewport_height
    return image_aspect / viewport_aspect


def classify_ratio(ratio: float, flip: bool) -> KenBurnsClass:
    if ratio > WIDE_THRESHOLD:
        # Wider than the viewport: the overflow is horizontal.
        return KenBurnsClass.PAN_LEFT if flip else KenBurnsClass.PAN_RIGHT
    if ratio < TALL_THRESHOLD:
        return KenBurnsClass.PAN_UP if flip else KenBurnsClass.PAN_DOWN
    return KenBurnsClass.ZOOM_IN if flip else KenBurnsClass.ZOOM_OUT


def classify(
    image_width: float,
    image_height: float,
    viewport_width: float,
    viewport_height: float,
    flip: bool,
) -> KenBurnsClass:
    """Pick the pan/zoom animation that best covers the viewport with the image."""
    return classify_ratio(crop_ratio(image_width, image_height, viewport_width, viewport_height), flip)


class KenBurnsSelector(BaseSelector):
    """Chooses the animation once an image has loaded with known dimensions."""

    def __init__(self, run_id: str, logger: RunLogger, config: MediaConfig) -> None:
        super().__init__(name="KenBurnsSelector", run_id=run_id, config=config, logger=logger)

    def select(
        self,
        on: date | datetime,
        image_size: tuple[int, int],
        viewport_size: tuple[int, int],
    ) -> AnimationChoice:
        """Return the animation for an image of ``image_size`` shown in ``viewport_size``."""
        self.log_input({"date": as_date(on), "image_size": image_size, "viewport_size": viewport_size})
        ratio = crop_ratio(*image_size, *viewport_size)
        flip = daily_direction_flip(on)
        choice = AnimationChoice(
            image_size=tuple(image_size),
            viewport_size=tuple(viewport_size),
            ratio=ratio,
            flip=flip,
            animation=classify_ratio(ratio, flip),
        )
        self.log_output(choice)
        return choice
