from __future__ import annotations

# Facade module that re-exports the Qwirkle core API.
# Single-responsibility modules live under qwirkle_core/*.

from qwirkle_core.tile import Color, Shape, Tile
from qwirkle_core.grid import Coord, Grid
from qwirkle_core.errors import (
    QwirkleError,
    InvalidDimension,
    InvalidPlacement,
    InvalidGroup,
)
from qwirkle_core.config import (
    DEFAULT_ROWS,
    DEFAULT_COLS,
    debug_enabled,
    color_enabled,
    default_dimensions,
)
from qwirkle_core.render import (
    COLOR_STYLES,
    SHAPE_GLYPHS,
    render_tile,
    render_grid,
    render_group,
)
from qwirkle_core.cli import HELP_TEXT, Session, execute, run, warn


def main() -> None:
    # CLI driver delegated to qwirkle_core.cli
    from qwirkle_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
