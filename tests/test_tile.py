import itertools
import unittest

from qwirkle import Color, Shape, Tile


def all_tiles():
    return [Tile(color, shape) for color in Color for shape in Shape]


class TestTile(unittest.TestCase):
    def test_given_same_color_different_shape_when_checking_then_compatible(self):
        self.assertTrue(Tile(Color.RED, Shape.CIRCLE).compatible_with(Tile(Color.RED, Shape.SQUARE)))

    def test_given_same_shape_different_color_when_checking_then_compatible(self):
        self.assertTrue(Tile(Color.RED, Shape.CIRCLE).compatible_with(Tile(Color.BLUE, Shape.CIRCLE)))

    def test_given_nothing_in_common_when_checking_then_incompatible(self):
        self.assertFalse(Tile(Color.RED, Shape.CIRCLE).compatible_with(Tile(Color.BLUE, Shape.X)))

    def test_given_missing_tile_when_checking_then_incompatible(self):
        self.assertFalse(Tile(Color.GREEN, Shape.CLOVER).compatible_with(None))

    def test_given_every_tile_when_checking_against_itself_then_never_compatible(self):
        for t in all_tiles():
            self.assertFalse(t.compatible_with(t), str(t))
            self.assertFalse(t.compatible_with(Tile(t.color, t.shape)), str(t))

    def test_given_every_pair_when_checking_both_ways_then_symmetric(self):
        for a, b in itertools.product(all_tiles(), repeat=2):
            self.assertEqual(a.compatible_with(b), b.compatible_with(a), f"{a} vs {b}")

    def test_given_equal_fields_when_comparing_then_equal_and_same_hash(self):
        a = Tile(Color.PURPLE, Shape.DIAMOND)
        b = Tile(Color.PURPLE, Shape.DIAMOND)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, Tile(Color.PURPLE, Shape.SQUARE))

    def test_given_tile_when_mutating_then_rejected(self):
        t = Tile(Color.YELLOW, Shape.STARBURST)
        with self.assertRaises(AttributeError):
            t.color = Color.RED  # type: ignore[misc]

    def test_given_tiles_when_ordering_then_type_error(self):
        with self.assertRaises(TypeError):
            _ = Tile(Color.RED, Shape.CIRCLE) < Tile(Color.BLUE, Shape.CIRCLE)  # type: ignore[operator]

    def test_given_names_when_building_then_case_insensitive(self):
        self.assertEqual(Tile.from_names('Orange', 'CLOVER'), Tile(Color.ORANGE, Shape.CLOVER))
        self.assertEqual(Tile.from_names(' red ', 'x'), Tile(Color.RED, Shape.X))
        with self.assertRaises(ValueError):
            Tile.from_names('pink', 'circle')
        with self.assertRaises(ValueError):
            Tile.from_names('red', 'hexagon')

    def test_given_tile_when_str_then_color_slash_shape(self):
        self.assertEqual(str(Tile(Color.RED, Shape.CIRCLE)), 'Red/Circle')
        self.assertEqual(str(Tile(Color.BLUE, Shape.STARBURST)), 'Blue/Starburst')


if __name__ == '__main__':
    unittest.main(verbosity=2)
