from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .config import color_enabled, default_dimensions
from .errors import InvalidDimension, InvalidGroup, InvalidPlacement
from .grid import Grid
from .render import render_grid, render_group
from .tile import Tile

HELP_TEXT = """Commands:
  resize <rows> <cols>                 replace the board with an empty one of that size
  board                                print the board
  place <color> <shape> <row> <col>    place a tile if the placement is legal
  check <color> <shape> <row> <col>    report whether a placement is legal
  remove <row> <col>                   take the tile off a cell
  peek <row> <col>                     show the tile on a cell
  row <row> <col>                      show the row group through a cell
  column <row> <col>                   show the column group through a cell
  clear                                remove every tile
  help                                 show this list
  exit | quit                          leave the console
Colors: red orange yellow green blue purple
Shapes: circle square diamond starburst clover x"""

Confirm = Callable[[str], bool]


@dataclass
class Session:
    """The console's mutable state: the current grid and display settings."""
    grid: Grid
    color: bool = True


def warn(message: str, read: Optional[Callable[[str], str]] = None) -> bool:
    """Asks a y/n question; anything other than y/yes counts as no."""
    read = read or input
    print(f"Warning: {message} Continue? (y/n)")
    line = ''
    while not line:
        try:
            line = read('').strip().lower()
        except EOFError:
            return False
    return line in ('y', 'yes')


def _parse_coord(args: Sequence[str]) -> Tuple[int, int]:
    if len(args) != 2:
        raise ValueError('expected <row> <col>')
    return int(args[0]), int(args[1])


def _parse_tile_at(args: Sequence[str]) -> Tuple[Tile, int, int]:
    if len(args) != 4:
        raise ValueError('expected <color> <shape> <row> <col>')
    tile = Tile.from_names(args[0], args[1])
    r, c = _parse_coord(args[2:])
    return tile, r, c


def _resize(session: Session, args: List[str]) -> None:
    try:
        if len(args) != 2:
            raise ValueError
        session.grid = session.grid.resized(int(args[0]), int(args[1]))
    except (ValueError, InvalidDimension):
        print('Invalid arguments. Usage: resize <rowCount> <columnCount>')


def _place(session: Session, args: List[str], confirm: Confirm) -> None:
    tile, r, c = _parse_tile_at(args)
    grid = session.grid
    # off-board and occupied cells fall through so place() reports the reason
    free = not grid.off_board(r, c) and grid.peek(r, c) is None
    if free and not grid.is_valid_placement(tile, r, c):
        if not confirm(f'{tile} at ({r}, {c}) breaks a line.'):
            print('Placement cancelled.')
            return
    try:
        grid.place(tile, r, c)
    except InvalidPlacement as e:
        print(f'error: {e}')
        return
    print(f'Placed {tile} at ({r}, {c}).')


def _check(session: Session, args: List[str]) -> None:
    tile, r, c = _parse_tile_at(args)
    verdict = 'valid' if session.grid.is_valid_placement(tile, r, c) else 'invalid'
    print(f'{tile} at ({r}, {c}) is {verdict}.')


def _cell_command(session: Session, name: str, args: List[str]) -> None:
    r, c = _parse_coord(args)
    grid = session.grid
    try:
        if name == 'remove':
            tile = grid.remove(r, c)
        elif name == 'peek':
            tile = grid.peek(r, c)
        elif name == 'row':
            print(render_group(grid.get_row_group(r, c)))
            return
        else:
            print(render_group(grid.get_column_group(r, c)))
            return
    except (IndexError, InvalidGroup) as e:
        print(f'error: {e}')
        return
    print(str(tile) if tile is not None else 'empty')


def execute(session: Session, line: str, confirm: Optional[Confirm] = None) -> bool:
    """Runs one console command. Returns False when the console should exit."""
    parts = line.split()
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]
    ask: Confirm = confirm if confirm is not None else warn

    if cmd in ('exit', 'quit'):
        return False
    try:
        if cmd == 'resize':
            _resize(session, args)
        elif cmd == 'board':
            print(render_grid(session.grid, session.color))
        elif cmd == 'help':
            print(HELP_TEXT)
        elif cmd == 'place':
            _place(session, args, ask)
        elif cmd == 'check':
            _check(session, args)
        elif cmd in ('remove', 'peek', 'row', 'column'):
            _cell_command(session, cmd, args)
        elif cmd == 'clear':
            if session.grid.is_empty() or ask('This removes every tile.'):
                session.grid.clear()
        else:
            print("Invalid command. Enter 'help' for list of commands.")
    except ValueError as e:
        print(f'Could not parse: {e}. Enter \'help\' for list of commands.')
    return True


def run(session: Session, read: Optional[Callable[[str], str]] = None) -> None:
    read = read or input
    print('Welcome to the Qwirkle console.')
    print("Enter a command or enter 'help' for a list of commands.")
    while True:
        try:
            line = read('> ')
        except EOFError:
            break
        if not execute(session, line, confirm=lambda msg: warn(msg, read)):
            break


def main(argv: Optional[Sequence[str]] = None) -> None:
    rows, cols = default_dimensions()
    parser = argparse.ArgumentParser(description='Qwirkle tile grid console')
    parser.add_argument('--rows', type=int, default=rows, help='Number of grid rows (env QWIRKLE_ROWS)')
    parser.add_argument('--cols', type=int, default=cols, help='Number of grid columns (env QWIRKLE_COLS)')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors (env QWIRKLE_NO_COLOR)')
    args = parser.parse_args(argv)

    try:
        grid = Grid(args.rows, args.cols)
    except InvalidDimension as e:
        parser.error(str(e))
    run(Session(grid=grid, color=color_enabled() and not args.no_color))
