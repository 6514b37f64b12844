import unittest

from dimensional_cache.errors import InvalidConfigurationError
from dimensional_cache.strategy.axis import AxisConfig, Order, Priority
from dimensional_cache.strategy.crosshair import CrosshairGenerator
from dimensional_cache.strategy.ranker import ProximityRanker, RankedCandidate


def offsets(axes):
    ranker = ProximityRanker(axes)
    steps = CrosshairGenerator().generate([a.length for a in axes])
    return [c.offset for c in ranker.rank(steps)]


class RealizeTests(unittest.TestCase):
    def test_centered_alternates(self):
        axis = AxisConfig(7)
        got = [ProximityRanker.realize(axis, j)[0] for j in range(7)]
        self.assertEqual(got, [0, 1, -1, 2, -2, 3, -3])
        dists = [ProximityRanker.realize(axis, j)[1] for j in range(7)]
        self.assertEqual(dists, [0, 1, 1, 2, 2, 3, 3])

    def test_centered_negative_side_first(self):
        axis = AxisConfig(5, prefer_positive=False)
        got = [ProximityRanker.realize(axis, j)[0] for j in range(5)]
        self.assertEqual(got, [0, -1, 1, -2, 2])

    def test_ascending_descending(self):
        up = AxisConfig(4, order=Order.ASCENDING)
        down = AxisConfig(4, order=Order.DESCENDING)
        self.assertEqual([ProximityRanker.realize(up, j)[0] for j in range(4)], [0, 1, 2, 3])
        self.assertEqual([ProximityRanker.realize(down, j)[0] for j in range(4)], [0, -1, -2, -3])


class RankTests(unittest.TestCase):
    def test_rank_zero_is_origin(self):
        for axes in (
            [AxisConfig(1)],
            [AxisConfig(5, order="descending")],
            [AxisConfig(3, priority="low"), AxisConfig(4, order="ascending", priority="high")],
        ):
            ranked = ProximityRanker(axes).rank(
                CrosshairGenerator().generate([a.length for a in axes])
            )
            self.assertEqual(ranked[0], RankedCandidate(offset=(0,) * len(axes), rank=0))
            self.assertEqual([c.rank for c in ranked], list(range(len(ranked))))

    def test_single_centered_axis(self):
        self.assertEqual(
            offsets([AxisConfig(7)]),
            [(0,), (1,), (-1,), (2,), (-2,), (3,), (-3,)],
        )

    def test_equal_priority_last_axis_first(self):
        got = offsets([AxisConfig(7, name="Z", range=2), AxisConfig(8, name="T", range=2)])
        self.assertEqual(
            got,
            [(0, 0), (0, 1), (1, 0), (0, -1), (-1, 0), (0, 2), (2, 0), (0, -2), (-2, 0)],
        )
        self.assertEqual(ProximityRanker([AxisConfig(7), AxisConfig(8)]).visit_order, (1, 0))

    def test_higher_priority_first_within_tier(self):
        got = offsets([AxisConfig(3, priority=Priority.HIGH), AxisConfig(3)])
        self.assertEqual(got, [(0, 0), (1, 0), (0, 1), (-1, 0), (0, -1)])

    def test_numeric_weights(self):
        got = offsets([AxisConfig(2, priority=1.5), AxisConfig(2, priority=2), AxisConfig(2, priority=-1)])
        self.assertEqual(got, [(0, 0, 0), (0, 1, 0), (1, 0, 0), (0, 0, 1)])

    def test_distance_beats_priority(self):
        got = offsets([AxisConfig(5, order="ascending", priority="max"), AxisConfig(3, order="ascending", priority="min")])
        self.assertEqual(got, [(0, 0), (1, 0), (0, 1), (2, 0), (0, 2), (3, 0), (4, 0)])

    def test_mixed_orders(self):
        got = offsets([AxisConfig(4, order="ascending"), AxisConfig(5)])
        self.assertEqual(
            got,
            [(0, 0), (0, 1), (1, 0), (0, -1), (0, 2), (2, 0), (0, -2), (3, 0)],
        )

    def test_range_drops_far_candidates(self):
        got = offsets([AxisConfig(9, range=1), AxisConfig(4, order="descending", range=0)])
        self.assertEqual(got, [(0, 0), (1, 0), (-1, 0)])

    def test_singleton_axis_ignored(self):
        for order in Order:
            for priority in Priority:
                got = offsets([AxisConfig(3), AxisConfig(1, order=order, priority=priority)])
                self.assertEqual(got, [(0, 0), (1, 0), (-1, 0)])

    def test_requires_zero_vector(self):
        ranker = ProximityRanker([AxisConfig(3)])
        with self.assertRaises(InvalidConfigurationError):
            ranker.rank([(1,), (2,)])

    def test_rejects_malformed_steps(self):
        ranker = ProximityRanker([AxisConfig(3), AxisConfig(2)])
        with self.assertRaises(InvalidConfigurationError):
            ranker.rank([(0, 0), (1,)])
        with self.assertRaises(InvalidConfigurationError):
            ranker.rank([(0, 0), (3, 0)])

    def test_no_axes(self):
        with self.assertRaises(InvalidConfigurationError):
            ProximityRanker([])


if __name__ == "__main__":
    unittest.main()
