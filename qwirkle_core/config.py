from __future__ import annotations

import os
from typing import Tuple

DEFAULT_ROWS = 5
DEFAULT_COLS = 5

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').strip().lower() in _TRUTHY


def _env_dimension(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def debug_enabled() -> bool:
    """Set QWIRKLE_DEBUG=1 to print placement-check traces."""
    return _env_flag('QWIRKLE_DEBUG')


def color_enabled() -> bool:
    """ANSI colors are on unless QWIRKLE_NO_COLOR is set to any non-empty value."""
    return not os.getenv('QWIRKLE_NO_COLOR')


def default_dimensions() -> Tuple[int, int]:
    """Grid size for the console: QWIRKLE_ROWS x QWIRKLE_COLS, falling back to 5x5."""
    return _env_dimension('QWIRKLE_ROWS', DEFAULT_ROWS), _env_dimension('QWIRKLE_COLS', DEFAULT_COLS)
