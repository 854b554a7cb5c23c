from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import debug_enabled
from .errors import InvalidDimension, InvalidGroup, InvalidPlacement
from .tile import Tile

Coord = Tuple[int, int]
# (row, column, tile) standing in for the real cell content during a check
Pending = Tuple[int, int, Tile]


def _trace(message: str) -> None:
    if debug_enabled():
        print(f"[grid] {message}")


def _has_duplicates(tiles: Sequence[Tile]) -> bool:
    return len(set(tiles)) != len(tiles)


class Grid:
    """A fixed-size board holding at most one tile per cell.

    Cells are stored row-major in a flat list, indexed by
    ``row * column_count + column``. ``off_board`` is the only bounds check;
    every accessor goes through it.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f'Grid dimensions must be positive, got {rows}x{cols}')
        self._rows = rows
        self._cols = cols
        self._cells: List[Optional[Tile]] = [None] * (rows * cols)

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._cols

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, tiles={sum(1 for _ in self.occupied())})"

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self._cols + c

    def off_board(self, r: int, c: int) -> bool:
        """True when (r, c) lies outside the grid."""
        return r < 0 or r >= self._rows or c < 0 or c >= self._cols

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the grid, row by row."""
        for r in range(self._rows):
            for c in range(self._cols):
                yield (r, c)

    def occupied(self) -> Iterator[Tuple[Coord, Tile]]:
        """Yields ((r, c), tile) for every non-empty cell, row by row."""
        for coord in self.coords():
            tile = self._cells[self.index(*coord)]
            if tile is not None:
                yield coord, tile

    def snapshot(self) -> Tuple[Optional[Tile], ...]:
        """Immutable row-major copy of every cell."""
        return tuple(self._cells)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._cells)

    def resized(self, rows: int, cols: int) -> 'Grid':
        """Returns a new, empty grid of the given size. Tiles are not carried over."""
        return Grid(rows, cols)

    def clear(self) -> None:
        self._cells = [None] * (self._rows * self._cols)

    def _checked_index(self, r: int, c: int) -> int:
        if self.off_board(r, c):
            raise IndexError(f'({r}, {c}) is outside a {self._rows}x{self._cols} grid')
        return self.index(r, c)

    def place(self, tile: Tile, r: int, c: int) -> None:
        """Places the tile at (r, c) without checking compatibility with its neighbors."""
        if not isinstance(tile, Tile):
            raise TypeError(f'Expected a Tile, got {type(tile).__name__}')
        if self.off_board(r, c):
            raise InvalidPlacement('Cannot place tile outside the board dimensions.')
        idx = self.index(r, c)
        if self._cells[idx] is not None:
            raise InvalidPlacement('Cannot place tile at the same position of another tile.')
        self._cells[idx] = tile

    def peek(self, r: int, c: int) -> Optional[Tile]:
        """Returns the tile at (r, c), or None if the cell is empty."""
        return self._cells[self._checked_index(r, c)]

    def remove(self, r: int, c: int) -> Optional[Tile]:
        """Removes and returns the tile at (r, c); None if the cell was already empty."""
        idx = self._checked_index(r, c)
        tile = self._cells[idx]
        self._cells[idx] = None
        return tile

    def _cell(self, r: int, c: int, pending: Optional[Pending]) -> Optional[Tile]:
        if pending is not None and pending[0] == r and pending[1] == c:
            return pending[2]
        return self._cells[self.index(r, c)]

    def _line(self, r: int, c: int, dr: int, dc: int, pending: Optional[Pending] = None) -> List[Tile]:
        """Center tile, then tiles walking (-dr, -dc) up to a gap or edge, then (+dr, +dc)."""
        center = self._cell(r, c, pending)
        assert center is not None
        tiles = [center]
        for sign in (-1, 1):
            rr, cc = r + sign * dr, c + sign * dc
            while not self.off_board(rr, cc):
                tile = self._cell(rr, cc, pending)
                if tile is None:
                    break
                tiles.append(tile)
                rr += sign * dr
                cc += sign * dc
        return tiles

    def get_row_group(self, r: int, c: int) -> List[Tile]:
        """Tiles in the horizontal run through (r, c): the tile itself, then leftward, then rightward."""
        if self.off_board(r, c) or self._cells[self.index(r, c)] is None:
            raise InvalidGroup('Cannot get tiles in row group from this row/column.')
        return self._line(r, c, 0, 1)

    def get_column_group(self, r: int, c: int) -> List[Tile]:
        """Tiles in the vertical run through (r, c): the tile itself, then upward, then downward."""
        if self.off_board(r, c) or self._cells[self.index(r, c)] is None:
            raise InvalidGroup('Cannot get tiles in column group from this row/column.')
        return self._line(r, c, 1, 0)

    def _engages(self, tile: Tile, r: int, c: int) -> bool:
        # an identical neighbor is not compatible but always makes a duplicate run
        if self.off_board(r, c):
            return False
        neighbor = self._cells[self.index(r, c)]
        return tile.compatible_with(neighbor) or neighbor == tile

    def is_valid_placement(self, tile: Tile, r: int, c: int) -> bool:
        """
        Checks whether the tile could be placed at (r, c). The grid is never modified.

        A line is only checked when the tile has a compatible or identical neighbor
        along it; the run through (r, c), with the tile in place, must then hold no
        duplicate tiles. A tile whose neighbors all differ from it in both color and
        shape (or that has no neighbors) is accepted.
        """
        if self.off_board(r, c) or self._cells[self.index(r, c)] is not None:
            return False

        potential_horizontal = self._engages(tile, r, c - 1) or self._engages(tile, r, c + 1)
        potential_vertical = self._engages(tile, r - 1, c) or self._engages(tile, r + 1, c)

        pending: Pending = (r, c, tile)
        if potential_horizontal and _has_duplicates(self._line(r, c, 0, 1, pending)):
            _trace(f"{tile} at ({r}, {c}) rejected: duplicate in row")
            return False
        if potential_vertical and _has_duplicates(self._line(r, c, 1, 0, pending)):
            _trace(f"{tile} at ({r}, {c}) rejected: duplicate in column")
            return False

        _trace(f"{tile} at ({r}, {c}) accepted (horizontal={potential_horizontal}, vertical={potential_vertical})")
        return True
