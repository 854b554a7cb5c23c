import unittest

from qwirkle import (
    Color,
    Shape,
    Tile,
    Grid,
    InvalidDimension,
    InvalidPlacement,
    InvalidGroup,
)


class TestQwirkleBasics(unittest.TestCase):
    def test_center_tile_scenario(self):
        grid = Grid(3, 3)
        grid.place(Tile(Color.RED, Shape.CIRCLE), 1, 1)
        self.assertFalse(grid.is_valid_placement(Tile(Color.RED, Shape.CIRCLE), 1, 0))
        self.assertTrue(grid.is_valid_placement(Tile(Color.RED, Shape.SQUARE), 1, 0))
        self.assertTrue(grid.is_valid_placement(Tile(Color.BLUE, Shape.STARBURST), 0, 0))
        self.assertEqual(list(grid.occupied()), [((1, 1), Tile(Color.RED, Shape.CIRCLE))])

    def test_zero_rows_rejected(self):
        with self.assertRaises(InvalidDimension):
            Grid(0, 4)

    def test_row_group_on_empty_cell_rejected(self):
        with self.assertRaises(InvalidGroup):
            Grid(3, 3).get_row_group(1, 1)

    def test_place_peek_remove_cycle(self):
        grid = Grid(2, 2)
        tile = Tile(Color.YELLOW, Shape.DIAMOND)
        grid.place(tile, 0, 1)
        self.assertEqual(grid.peek(0, 1), tile)
        with self.assertRaises(InvalidPlacement):
            grid.place(Tile(Color.YELLOW, Shape.X), 0, 1)
        self.assertEqual(grid.remove(0, 1), tile)
        self.assertIsNone(grid.remove(0, 1))

    def test_line_built_tile_by_tile(self):
        grid = Grid(1, 6)
        shapes = list(Shape)
        for c, shape in enumerate(shapes):
            tile = Tile(Color.GREEN, shape)
            self.assertTrue(grid.is_valid_placement(tile, 0, c), str(tile))
            grid.place(tile, 0, c)
        self.assertEqual(len(grid.get_row_group(0, 3)), 6)


if __name__ == '__main__':
    unittest.main(verbosity=2)
