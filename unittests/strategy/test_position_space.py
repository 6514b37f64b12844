import unittest

from dimensional_cache.errors import (
    InvalidConfigurationError,
    InvalidPositionError,
    OutOfRangeError,
)
from dimensional_cache.strategy.space import PositionSpace


class PositionSpaceTests(unittest.TestCase):
    def setUp(self):
        self.space = PositionSpace([7, 1, 8])

    def test_invalid_lengths(self):
        for bad in ([], [3, 0], [-1], [2.0], [True]):
            with self.assertRaises(InvalidConfigurationError):
                PositionSpace(bad)

    def test_is_valid(self):
        self.assertTrue(self.space.is_valid((0, 0, 0)))
        self.assertTrue(self.space.is_valid([6, 0, 7]))
        self.assertFalse(self.space.is_valid((7, 0, 0)))
        self.assertFalse(self.space.is_valid((0, 1, 0)))
        self.assertFalse(self.space.is_valid((-1, 0, 0)))
        self.assertFalse(self.space.is_valid((0, 0)))
        self.assertFalse(self.space.is_valid((0.0, 0, 0)))
        self.assertFalse(self.space.is_valid(None))

    def test_validate(self):
        self.assertEqual(self.space.validate([1, 0, 2]), (1, 0, 2))
        with self.assertRaises(InvalidPositionError):
            self.space.validate((1, 0, 8))

    def test_clamp_or_reject(self):
        self.assertEqual(self.space.clamp_or_reject((3, 0, 3), (0, 0, -3)), (3, 0, 0))
        with self.assertRaises(OutOfRangeError) as ctx:
            self.space.clamp_or_reject((3, 0, 3), (4, 0, 0))
        self.assertEqual(ctx.exception.axis, 0)
        self.assertEqual(ctx.exception.offset, (4, 0, 0))
        with self.assertRaises(OutOfRangeError):
            self.space.clamp_or_reject((3, 0, 3), (0, 0, -4))

    def test_clamp_or_reject_arity(self):
        with self.assertRaises(InvalidPositionError):
            self.space.clamp_or_reject((3, 0), (0, 0))

    def test_resolve(self):
        self.assertEqual(self.space.resolve((0, 0, 0), (1, 0, 1)), (1, 0, 1))
        self.assertIsNone(self.space.resolve((0, 0, 0), (-1, 0, 0)))

    def test_size_and_raster(self):
        space = PositionSpace([2, 3])
        self.assertEqual(space.size, 6)
        self.assertEqual(space.rasterize((1, 2)), 5)
        self.assertEqual(space.rasterize((1, 0)), 1)
        self.assertEqual(space.position_of(5), (1, 2))
        self.assertEqual(
            [space.position_of(i) for i in range(space.size)],
            [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)],
        )
        with self.assertRaises(InvalidPositionError):
            space.position_of(6)
        with self.assertRaises(InvalidPositionError):
            space.rasterize((2, 0))


if __name__ == "__main__":
    unittest.main()
