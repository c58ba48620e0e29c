"""Tests for the video schedule, the video day gate and the video choice."""

from __future__ import annotations

import unittest
from datetime import date, timedelta

from dailymedia.config import DEFAULT_TOTAL_VIDEOS, DEFAULT_VIDEO_START_DAY
from dailymedia.selectors.video import is_video_day, video_days, video_index
from dailymedia.utils.calendar import date_range


class VideoDaysTest(unittest.TestCase):
    """Covers the schedule generator."""

    def test_starts_on_start_day(self) -> None:
        self.assertEqual(video_days(2026)[0], DEFAULT_VIDEO_START_DAY)
        self.assertEqual(video_days(2026)[0], 13)

    def test_gaps_follow_interval(self) -> None:
        days = video_days(2026)
        for previous, current in zip(days, days[1:]):
            self.assertGreaterEqual(current - previous, 11)
            self.assertLessEqual(current - previous, 13)

    def test_one_video_per_pool_entry_in_common_year(self) -> None:
        self.assertEqual(len(video_days(2026)), DEFAULT_TOTAL_VIDEOS)

    def test_leap_year_not_shorter(self) -> None:
        self.assertGreaterEqual(len(video_days(2028)), len(video_days(2026)))

    def test_entries_are_valid_days(self) -> None:
        for year in (1900, 2000, 2026, 2028):
            days = video_days(year)
            self.assertEqual(days, sorted(set(days)))
            for day in days:
                self.assertGreaterEqual(day, 1)
                self.assertLessEqual(day, 366)

    def test_custom_start_and_interval(self) -> None:
        days = video_days(2026, start_day=1, interval=7)
        self.assertEqual(days[:3], [1, 8, 15])
        self.assertEqual(len(days), 53)

    def test_is_deterministic(self) -> None:
        self.assertEqual(video_days(2027), video_days(2027))

    def test_rejects_start_before_first_day(self) -> None:
        for start_day in (0, -3):
            with self.assertRaises(ValueError):
                video_days(2026, start_day=start_day)
        with self.assertRaises(ValueError):
            is_video_day(0, 2026, start_day=0)

    def test_rejects_non_positive_interval(self) -> None:
        with self.assertRaises(ValueError):
            video_days(2026, interval=0)


class IsVideoDayTest(unittest.TestCase):
    """Covers the membership gate."""

    def test_scheduled_days(self) -> None:
        days = video_days(2026)
        self.assertTrue(is_video_day(days[0], 2026))
        self.assertTrue(is_video_day(days[-1], 2026))

    def test_unscheduled_days(self) -> None:
        self.assertFalse(is_video_day(1, 2026))
        self.assertFalse(is_video_day(14, 2026))

    def test_custom_schedule(self) -> None:
        self.assertTrue(is_video_day(8, 2026, start_day=1, interval=7))
        self.assertFalse(is_video_day(13, 2026, start_day=1, interval=7))


class VideoIndexTest(unittest.TestCase):
    """Covers the per-day video choice."""

    def test_within_range(self) -> None:
        for on in date_range(date(2026, 1, 1), 365):
            index = video_index(on)
            self.assertGreaterEqual(index, 0)
            self.assertLess(index, DEFAULT_TOTAL_VIDEOS)

    def test_is_deterministic(self) -> None:
        on = date(2026, 4, 10)
        self.assertEqual(video_index(on), video_index(on))

    def test_varies_across_dates(self) -> None:
        indices = {video_index(on) for on in date_range(date(2026, 1, 1), 30)}
        self.assertGreater(len(indices), 1)

    def test_custom_pool(self) -> None:
        for on in date_range(date(2026, 1, 1), 40):
            self.assertLess(video_index(on, total_videos=3), 3)

    def test_rejects_empty_pool(self) -> None:
        with self.assertRaises(ValueError):
            video_index(date(2026, 1, 13), total_videos=0)

    def test_derived_seeds_never_hit_zero(self) -> None:
        start = date(1, 1, 1)
        for step in range(0, 3_652_000, 997):
            video_index(start + timedelta(days=step))


if __name__ == "__main__":
    unittest.main()
