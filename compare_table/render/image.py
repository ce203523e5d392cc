"""Paint a mapped matrix as a PNG grid of solid cells.

Each cell becomes a cell_size × cell_size block of its colour, separated by
`gap` pixels of gap_colour. No text is drawn.

Example:
    compare-table image data.json baseline.json -o grid.png --cell-size 32
"""

import os

import numpy as np
from PIL import Image

from compare_table.core.errors import ConfigError
from compare_table.core.hsl import Colour
from compare_table.core.types import MappedMatrix


def render_image(
    mapped: MappedMatrix,
    cell_size: int = 24,
    gap: int = 1,
    gap_colour: Colour = (255, 255, 255),
) -> Image.Image:
    """Build an RGB image of the colour matrix."""
    if cell_size < 1:
        raise ConfigError(f'cell size must be at least 1, got {cell_size}')
    if gap < 0:
        raise ConfigError(f'gap must not be negative, got {gap}')

    rows, cols = mapped.rows, mapped.cols
    pitch = cell_size + gap
    h = max(rows * pitch - gap, 1)
    w = max(cols * pitch - gap, 1)

    canvas = np.empty((h, w, 3), dtype=np.uint8)
    canvas[:, :] = gap_colour

    if rows and cols:
        grid = np.array(mapped.colours, dtype=np.uint8)  # (rows, cols, 3)
        # Spread each cell over a pitch × pitch block, then drop the trailing gap
        blocks = np.repeat(np.repeat(grid, pitch, axis=0), pitch, axis=1)
        in_row = (np.arange(h) % pitch) < cell_size
        in_col = (np.arange(w) % pitch) < cell_size
        cells = in_row[:, None] & in_col[None, :]
        canvas[cells] = blocks[:h, :w][cells]

    return Image.fromarray(canvas)


def save_image(mapped: MappedMatrix, path: str, cell_size: int = 24, gap: int = 1) -> str:
    """Render and write a PNG. Returns the path written."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_image(mapped, cell_size=cell_size, gap=gap).save(path)
    return path
