"""Planner facade tying the daily selectors together."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List

from .config import MediaConfig
from .selectors.base import Selector
from .selectors.image import DailyImageSelector
from .selectors.kenburns import KenBurnsSelector
from .selectors.video import VideoSelector
from .types import AnimationChoice, MediaSelection
from .utils.calendar import as_date, date_range, day_of_year, days_in_year, is_leap_year
from .utils.files import dumps, media_src
from .utils.run_logger import RunLogger


@dataclass(slots=True)
class SelectorSet:
    """Selectors sharing one run id."""

    image: DailyImageSelector
    video: VideoSelector
    kenburns: KenBurnsSelector


class DailyMediaPlanner:
    """High-level facade answering what to show on a given day and how to animate it.

    Every answer is a pure function of the calendar date passed in (plus image and
    viewport geometry for animations); the planner never reads the clock for
    selection purposes.
    """

    _run_counter = itertools.count(1)

    def __init__(self, config: MediaConfig | None = None) -> None:
        self.config = config or MediaConfig.from_env()
        self.logger = RunLogger(base_dir=self.config.runs_dir)

    def plan(self, on: date | datetime) -> MediaSelection:
        """Return the image or video selected for ``on``."""
        selectors = self._build_selectors(self._new_run_id())
        return self._plan_day(selectors, as_date(on))

    def calendar(self, start: date | datetime, days: int) -> List[MediaSelection]:
        """Plan ``days`` consecutive days beginning at ``start``."""
        run_id = self._new_run_id()
        # One log directory per day under the shared run.
        return [
            self._plan_day(self._build_selectors(f"{run_id}/{current.isoformat()}"), current)
            for current in date_range(start, days)
        ]

    def animate(
        self,
        on: date | datetime,
        image_size: tuple[int, int],
        viewport_size: tuple[int, int],
    ) -> AnimationChoice:
        """Choose the Ken Burns animation for the day's loaded image."""
        selectors = self._build_selectors(self._new_run_id())
        return self._invoke_step(
            selectors.kenburns,
            as_date(on),
            tuple(image_size),
            tuple(viewport_size),
        )

    def schedule(self, year: int) -> Dict[str, Any]:
        """Summarise the video schedule of ``year``."""
        selectors = self._build_selectors(self._new_run_id())
        days = selectors.video.schedule(year)
        return {
            "year": year,
            "leap_year": is_leap_year(year),
            "days_in_year": days_in_year(year),
            "video_days": days,
            "video_count": len(days),
            "image_count": days_in_year(year) - len(days),
        }

    def _plan_day(self, selectors: SelectorSet, current: date) -> MediaSelection:
        video_index = self._invoke_step(selectors.video, current)
        if video_index is not None:
            return MediaSelection(
                date=current,
                day_of_year=day_of_year(current),
                media_type="video",
                index=video_index,
                src=media_src(self.config.video_base, video_index, self.config.video_ext),
                # Video days fall back to the first image for the favicon.
                favicon_src=media_src(self.config.image_base, 0, self.config.image_ext),
            )

        image_index = self._invoke_step(selectors.image, current)
        src = media_src(self.config.image_base, image_index, self.config.image_ext)
        return MediaSelection(
            date=current,
            day_of_year=day_of_year(current),
            media_type="image",
            index=image_index,
            src=src,
            favicon_src=src,
        )

    def _build_selectors(self, run_id: str) -> SelectorSet:
        """Construct selector instances wired with the current config and logger."""
        return SelectorSet(
            image=DailyImageSelector(run_id=run_id, logger=self.logger, config=self.config),
            video=VideoSelector(run_id=run_id, logger=self.logger, config=self.config),
            kenburns=KenBurnsSelector(run_id=run_id, logger=self.logger, config=self.config),
        )

    def _invoke_step(self, selector: Selector, *args: Any) -> Any:
        """Run a selector while optionally emitting IO traces."""
        if not self.config.trace:
            return selector.select(*args)

        self._print_step_io(selector.name, "input", list(args))
        started = time.perf_counter()
        result = selector.select(*args)
        elapsed = time.perf_counter() - started
        self._print_step_io(selector.name, "output", result, elapsed)
        return result

    @staticmethod
    def _print_step_io(step: str, direction: str, payload: Any, elapsed: float | None = None) -> None:
        """Pretty-print the input/output payload for each step."""
        prefix = ">>" if direction == "input" else "<<"
        timing = f" [{elapsed * 1000:.3f}ms]" if elapsed is not None and direction == "output" else ""
        print(f"[{step}] {prefix} {direction}{timing}:\n{dumps(payload)}\n")

    @staticmethod
    def _new_run_id() -> str:
        """Return a simple unique run identifier."""
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
        return f"{stamp}-{next(DailyMediaPlanner._run_counter):04d}"
