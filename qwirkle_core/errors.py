from __future__ import annotations


class QwirkleError(ValueError):
    """Base class for errors raised by the grid engine."""


class InvalidDimension(QwirkleError):
    """A grid was created with a non-positive row or column count."""


class InvalidPlacement(QwirkleError):
    """A tile was placed off the board or on an occupied cell."""


class InvalidGroup(QwirkleError):
    """A row/column group was requested at an off-board or empty cell."""
