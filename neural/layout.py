"""
spikegrid module: neural/layout.py

Index <-> grid helpers and the default screen placement of neurons.
"""

from __future__ import annotations
from typing import Callable, Tuple

import config

# (index, grid_w, grid_h) -> (x, y)
LayoutFn = Callable[[int, int, int], Tuple[float, float]]


def flatten_index(row: int, col: int, num_cols: int) -> int:
    return row * num_cols + col


def expand_index(index: int, num_cols: int) -> Tuple[int, int]:
    return index // num_cols, index % num_cols


def grid_layout(index: int, grid_w: int, grid_h: int) -> Tuple[float, float]:
    """Row-major cell of ``index`` mapped onto the LAYOUT_W x LAYOUT_H rectangle."""
    row, col = expand_index(index, grid_w)
    x = col * (config.LAYOUT_W / grid_w) + config.LAYOUT_MARGIN
    y = row * (config.LAYOUT_H / grid_h) + config.LAYOUT_MARGIN
    return (x, y)
