from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from .grid import Grid
from .tile import Color, Shape, Tile


class Ansi(Enum):
    """ANSI attribute codes used for tile backgrounds."""
    BG_DARK_RED = "\033[41m"
    BG_BRIGHT_RED = "\033[101m"
    BG_DARK_YELLOW = "\033[43m"
    BG_DARK_GREEN = "\033[42m"
    BG_BRIGHT_BLUE = "\033[104m"
    BG_DARK_MAGENTA = "\033[45m"
    FG_YELLOW = "\033[93m"
    RESET = "\033[0m"


COLOR_STYLES: Dict[Color, str] = {
    Color.RED: Ansi.BG_DARK_RED.value,
    Color.ORANGE: Ansi.BG_BRIGHT_RED.value + Ansi.FG_YELLOW.value,
    Color.YELLOW: Ansi.BG_DARK_YELLOW.value,
    Color.GREEN: Ansi.BG_DARK_GREEN.value,
    Color.BLUE: Ansi.BG_BRIGHT_BLUE.value,
    Color.PURPLE: Ansi.BG_DARK_MAGENTA.value,
}

SHAPE_GLYPHS: Dict[Shape, str] = {
    Shape.CIRCLE: "●",
    Shape.SQUARE: "▪",
    Shape.DIAMOND: "♦",
    Shape.STARBURST: "*",
    Shape.CLOVER: "♣",
    Shape.X: "X",
}


def render_tile(tile: Optional[Tile], color: bool = True) -> str:
    """One character for the tile's shape, wrapped in its color when enabled. Empty cells are a space."""
    if tile is None:
        return " "
    glyph = SHAPE_GLYPHS[tile.shape]
    if not color:
        return glyph
    return f"{COLOR_STYLES[tile.color]}{glyph}{Ansi.RESET.value}"


def render_grid(grid: Grid, color: bool = True) -> str:
    """Generates the framed, human-readable view of the grid."""
    border = "+" + "-" * grid.column_count + "+"
    lines: List[str] = [
        f"Board Size: {grid.row_count} rows and {grid.column_count} columns.",
        border,
    ]
    for r in range(grid.row_count):
        cells = "".join(render_tile(grid.peek(r, c), color) for c in range(grid.column_count))
        lines.append(f"|{cells}|")
    lines.append(border)
    return "\n".join(lines)


def render_group(tiles: List[Tile]) -> str:
    return ", ".join(str(t) for t in tiles)
