"""Non-repeating daily image selection."""

from __future__ import annotations

from datetime import date, datetime

from ..config import MediaConfig
from ..seeded import build_permutation
from ..utils.calendar import as_date, day_of_year
from ..utils.run_logger import RunLogger
from .base import BaseSelector


def daily_image_index(total_images: int, on: date | datetime) -> int:
    """Return the image shown on ``on``.

    The year's permutation is indexed by day-of-year, so no image repeats within a
    year as long as the pool holds more images than the year has days. Smaller
    pools wrap around and repeat the same order.
    """
    if total_images <= 0:
        raise ValueError(f"total_images must be positive, got {total_images}")
    current = as_date(on)
    permutation = build_permutation(total_images, current.year)
    return permutation[day_of_year(current) % total_images]


class DailyImageSelector(BaseSelector):
    """Picks the day's image from the configured pool."""

    def __init__(self, run_id: str, logger: RunLogger, config: MediaConfig) -> None:
        super().__init__(name="DailyImageSelector", run_id=run_id, config=config, logger=logger)

    def select(self, on: date | datetime) -> int:
        """Return the image index for ``on``."""
        self.log_input({"date": as_date(on), "total_images": self.config.total_images})
        index = daily_image_index(self.config.total_images, on)
        self.log_output({"index": index})
        return index
