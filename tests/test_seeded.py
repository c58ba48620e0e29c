"""Tests for the Park-Miller generator and the yearly permutation."""

from __future__ import annotations

import unittest

from dailymedia.seeded import MODULUS, MULTIPLIER, build_permutation, lcg_next


class LcgNextTest(unittest.TestCase):
    """Covers single steps of the seeded generator."""

    def test_known_values(self) -> None:
        self.assertEqual(lcg_next(1), MULTIPLIER)
        self.assertEqual(lcg_next(2), 2 * MULTIPLIER)
        self.assertEqual(lcg_next(MODULUS - 1), MODULUS - MULTIPLIER)

    def test_is_deterministic(self) -> None:
        self.assertEqual(lcg_next(12345), lcg_next(12345))
        self.assertEqual(lcg_next(lcg_next(987)), lcg_next(lcg_next(987)))

    def test_neighbouring_seeds_differ(self) -> None:
        self.assertNotEqual(lcg_next(1), lcg_next(2))

    def test_stays_within_modulus(self) -> None:
        for seed in (1, 100, 999999, 2026, MODULUS - 1):
            result = lcg_next(seed)
            self.assertGreater(result, 0)
            self.assertLess(result, MODULUS)

    def test_rejects_zero_fixed_point(self) -> None:
        for seed in (0, -5, MODULUS, 2 * MODULUS):
            with self.assertRaises(ValueError):
                lcg_next(seed)


class BuildPermutationTest(unittest.TestCase):
    """Covers the Fisher-Yates shuffle seeded by year."""

    def test_small_known_permutations(self) -> None:
        self.assertEqual(build_permutation(1, 2026), (0,))
        self.assertEqual(build_permutation(2, 2026), (1, 0))
        self.assertEqual(build_permutation(3, 2026), (2, 0, 1))

    def test_is_a_bijection(self) -> None:
        for n in (1, 2, 10, 50, 377, 1000):
            for year in (1970, 2026, 2027, 2400):
                permutation = build_permutation(n, year)
                self.assertEqual(sorted(permutation), list(range(n)))

    def test_is_deterministic(self) -> None:
        first = build_permutation(50, 2026)
        build_permutation.cache_clear()
        self.assertEqual(build_permutation(50, 2026), first)

    def test_differs_between_years(self) -> None:
        self.assertNotEqual(build_permutation(50, 2026), build_permutation(50, 2027))

    def test_rejects_empty_pool(self) -> None:
        for n in (0, -1):
            with self.assertRaises(ValueError):
                build_permutation(n, 2026)


if __name__ == "__main__":
    unittest.main()
