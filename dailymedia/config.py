"""Configuration containers for daily media selection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

DEFAULT_TOTAL_IMAGES = 377
DEFAULT_TOTAL_VIDEOS = 30
DEFAULT_VIDEO_START_DAY = 13  # Jan 13
DEFAULT_VIDEO_INTERVAL = 12.1  # days between videos


@dataclass(slots=True)
class MediaConfig:
    """Pool sizes, schedule constants and media locations used by every selector."""

    env_prefix: ClassVar[str] = "DAILYMEDIA_"

    total_images: int = DEFAULT_TOTAL_IMAGES
    total_videos: int = DEFAULT_TOTAL_VIDEOS
    video_start_day: int = DEFAULT_VIDEO_START_DAY
    video_interval: float = DEFAULT_VIDEO_INTERVAL
    image_base: str = "/images"
    video_base: str = "/videos"
    image_ext: str = "jpg"
    video_ext: str = "mp4"
    runs_dir: str | None = None
    trace: bool = False

    def __post_init__(self) -> None:
        if self.total_images <= 0:
            raise ValueError(f"total_images must be positive, got {self.total_images}")
        if self.total_videos <= 0:
            raise ValueError(f"total_videos must be positive, got {self.total_videos}")
        if not 1 <= self.video_start_day <= 366:
            raise ValueError(f"video_start_day must lie in [1, 366], got {self.video_start_day}")
        if self.video_interval <= 0:
            raise ValueError(f"video_interval must be positive, got {self.video_interval}")

    @classmethod
    def from_env(cls) -> "MediaConfig":
        """Create a config object populated from environment variables."""
        prefix = cls.env_prefix
        return cls(
            total_images=int(os.getenv(f"{prefix}TOTAL_IMAGES", str(DEFAULT_TOTAL_IMAGES))),
            total_videos=int(os.getenv(f"{prefix}TOTAL_VIDEOS", str(DEFAULT_TOTAL_VIDEOS))),
            video_start_day=int(os.getenv(f"{prefix}VIDEO_START_DAY", str(DEFAULT_VIDEO_START_DAY))),
            video_interval=float(os.getenv(f"{prefix}VIDEO_INTERVAL", str(DEFAULT_VIDEO_INTERVAL))),
            image_base=os.getenv(f"{prefix}IMAGE_BASE", "/images"),
            video_base=os.getenv(f"{prefix}VIDEO_BASE", "/videos"),
            image_ext=os.getenv(f"{prefix}IMAGE_EXT", "jpg"),
            video_ext=os.getenv(f"{prefix}VIDEO_EXT", "mp4"),
            runs_dir=os.getenv(f"{prefix}RUNS_DIR") or None,
            trace=os.getenv(f"{prefix}TRACE", "false").lower() == "true",
        )
