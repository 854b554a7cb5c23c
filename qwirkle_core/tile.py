from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    RED = 'red'
    ORANGE = 'orange'
    YELLOW = 'yellow'
    GREEN = 'green'
    BLUE = 'blue'
    PURPLE = 'purple'


class Shape(Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    DIAMOND = 'diamond'
    STARBURST = 'starburst'
    CLOVER = 'clover'
    X = 'x'


@dataclass(frozen=True)
class Tile:
    """A single Qwirkle tile: one color and one shape."""
    color: Color
    shape: Shape

    @classmethod
    def from_names(cls, color: str, shape: str) -> 'Tile':
        """Builds a tile from case-insensitive names, e.g. ('Red', 'circle')."""
        try:
            return cls(Color(color.strip().lower()), Shape(shape.strip().lower()))
        except ValueError:
            raise ValueError(f'Unknown tile: {color} {shape}') from None

    def compatible_with(self, other: Optional['Tile']) -> bool:
        """True when exactly one of color/shape matches. An absent tile is never compatible."""
        if other is None:
            return False
        same_color = self.color == other.color
        same_shape = self.shape == other.shape
        return same_color != same_shape

    def __str__(self) -> str:
        return f"{self.color.value.capitalize()}/{self.shape.value.capitalize()}"
