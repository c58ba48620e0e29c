"""Video day schedule and per-day video choice."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import List

from ..config import (
    DEFAULT_TOTAL_VIDEOS,
    DEFAULT_VIDEO_INTERVAL,
    DEFAULT_VIDEO_START_DAY,
    MediaConfig,
)
from ..seeded import lcg_next
from ..utils.calendar import as_date, day_of_year, days_in_year
from ..utils.run_logger import RunLogger
from .base import BaseSelector


def video_days(
    year: int,
    start_day: int = DEFAULT_VIDEO_START_DAY,
    interval: float = DEFAULT_VIDEO_INTERVAL,
) -> List[int]:
    """Return the ascending days-of-year on which a video replaces the image.

    The running day is accumulated as a float and rounded half up, so a 365-day
    year with the defaults yields 30 entries starting on day 13.
    """
    if start_day < 1:
        raise ValueError(f"start_day must be at least 1, got {start_day}")
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    days: List[int] = []
    limit = days_in_year(year)
    current: float = start_day
    while current <= limit:
        days.append(math.floor(current + 0.5))
        current += interval
    return days


def is_video_day(
    day: int,
    year: int,
    start_day: int = DEFAULT_VIDEO_START_DAY,
    interval: float = DEFAULT_VIDEO_INTERVAL,
) -> bool:
    """Return True when ``day`` (day-of-year) is on the video schedule of ``year``."""
    return day in video_days(year, start_day, interval)


def video_index(on: date | datetime, total_videos: int = DEFAULT_TOTAL_VIDEOS) -> int:
    """Return which video plays on ``on``; repeats across video days are allowed."""
    if total_videos <= 0:
        raise ValueError(f"total_videos must be positive, got {total_videos}")
    current = as_date(on)
    seed = current.year * 1000 + day_of_year(current)
    return lcg_next(seed) % total_videos


class VideoSelector(BaseSelector):
    """Answers whether a date is a video day and which video to play."""

    def __init__(self, run_id: str, logger: RunLogger, config: MediaConfig) -> None:
        super().__init__(name="VideoSelector", run_id=run_id, config=config, logger=logger)

    def schedule(self, year: int) -> List[int]:
        return video_days(year, self.config.video_start_day, self.config.video_interval)

    def is_video_day(self, on: date | datetime) -> bool:
        current = as_date(on)
        return is_video_day(
            day_of_year(current),
            current.year,
            self.config.video_start_day,
            self.config.video_interval,
        )

    def select(self, on: date | datetime) -> int | None:
        """Return the video index for ``on``, or None on image days."""
        current = as_date(on)
        self.log_input({"date": current, "total_videos": self.config.total_videos})
        index = video_index(current, self.config.total_videos) if self.is_video_day(current) else None
        self.log_output({"video_day": index is not None, "index": index})
        return index
