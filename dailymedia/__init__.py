"""Daily media package.

Deterministic, stateless choice of the photo or video shown on a calendar day,
plus the Ken Burns animation that suits the photo in the viewer's viewport.
"""

from .config import MediaConfig  # noqa: F401
from .planner import DailyMediaPlanner  # noqa: F401
from .seeded import build_permutation, lcg_next  # noqa: F401
from .selectors.image import daily_image_index  # noqa: F401
from .selectors.kenburns import classify, daily_direction_flip  # noqa: F401
from .selectors.video import is_video_day, video_days, video_index  # noqa: F401
from .types import AnimationChoice, KenBurnsClass, MediaSelection  # noqa: F401

__all__ = [
    "AnimationChoice",
    "DailyMediaPlanner",
    "KenBurnsClass",
    "MediaConfig",
    "MediaSelection",
    "build_permutation",
    "classify",
    "daily_direction_flip",
    "daily_image_index",
    "is_video_day",
    "lcg_next",
    "video_days",
    "video_index",
]
