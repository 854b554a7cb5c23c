"""
Qwirkle core Python package.

This package contains the tile/grid data structures and the placement
validation logic, kept free of console I/O so they are easy to test.
Modules:
- tile.py: Tile, Color, Shape
- grid.py: Grid
- errors.py: InvalidDimension, InvalidPlacement, InvalidGroup
- render.py, cli.py: console rendering and the interactive command loop
"""
