import unittest

from blockfall_scoring import Stats, POINTS, level_for_lines, drop_interval_ms


class ScoringTests(unittest.TestCase):
    def test_clear_deltas_scale_with_level(self):
        for level in range(1, 6):
            for cleared, points in ((1, 100), (2, 300), (3, 500), (4, 800)):
                stats = Stats(level=level, lines=(level - 1) * 10)
                self.assertEqual(stats.apply_clear(cleared), points * level)
                self.assertEqual(stats.score, points * level)

    def test_zero_lines(self):
        stats = Stats(score=250, level=2, lines=12, drop_interval=920)
        self.assertEqual(stats.apply_clear(0), 0)
        self.assertEqual(stats, Stats(score=250, level=2, lines=12, drop_interval=920))

    def test_bad_count(self):
        with self.assertRaises(ValueError):
            Stats().apply_clear(5)
        with self.assertRaises(ValueError):
            Stats().apply_clear(-1)

    def test_level_up(self):
        stats = Stats(lines=9)
        stats.apply_clear(1)
        self.assertEqual((stats.score, stats.lines, stats.level), (100, 10, 2))
        self.assertEqual(stats.drop_interval, 920)

    def test_level_formula(self):
        for lines in range(200):
            self.assertEqual(level_for_lines(lines), lines // 10 + 1)

    def test_interval_formula(self):
        for level in range(1, 30):
            self.assertEqual(drop_interval_ms(level), max(100, 1000 - (level - 1) * 80))
        self.assertEqual(drop_interval_ms(1), 1000)
        self.assertEqual(drop_interval_ms(12), 120)
        self.assertEqual(drop_interval_ms(13), 100)

    def test_points_table(self):
        self.assertEqual(POINTS, [0, 100, 300, 500, 800])
