"""Shade by how far the value sits from a baseline centre.

Each baseline cell is a pair [center, spread], spread > 0. The hue and
saturation come from the high colour when the value is above the centre
and from the low colour otherwise. Lightness falls off with the
normalised distance:

    delta = value - center
    l = 1 - |delta| / spread      clamped to [0.25, 1.0]

So a value on the centre renders white and the shade deepens until the
floor at l = 0.25, reached three quarters of a spread away. The floor
keeps cells off black so dark text stays readable.

Hue carries direction, lightness carries magnitude.

Baseline file:
    [[[10, 5], [10, 5]],
     [null,    [0, 2.5]]]

Example:
    compare-table map data.json baseline.json --mode linear --dynamic-text
"""

import math

from compare_table.core.hsl import Colour, hsl_to_rgb, rgb_to_hsl
from compare_table.core.types import BaselineCell, ColourMode, Number, Palette, Strategy, is_real

MIN_LIGHTNESS = 0.25
MAX_LIGHTNESS = 1.0


def _is_range(cell: object) -> bool:
    if not isinstance(cell, (tuple, list)) or len(cell) != 2:
        return False
    center, spread = cell
    return is_real(center) and is_real(spread) and spread > 0


strategy = Strategy(
    mode=ColourMode.LINEAR,
    help='Lightness scaled by (value - center) / spread, hue by direction.',
    check=_is_range,
)


def _ratio(delta: Number, spread: Number) -> float:
    """delta / spread, saturating to ±inf for ints too big for a float."""
    try:
        return delta / spread
    except OverflowError:
        return math.inf if delta > 0 else -math.inf


def _clamp(l: float) -> float:  # noqa: E741
    return max(MIN_LIGHTNESS, min(MAX_LIGHTNESS, l))


@strategy.cell
def map_cell(value: Number, baseline_cell: BaselineCell, palette: Palette) -> Colour:
    if baseline_cell is None:
        return palette.null

    center, spread = baseline_cell
    delta = value - center
    if delta > 0:
        h, s, _ = rgb_to_hsl(*palette.high)
        l = 1 - _ratio(delta, spread)  # noqa: E741
    else:
        h, s, _ = rgb_to_hsl(*palette.low)
        l = 1 + _ratio(delta, spread)  # noqa: E741

    return hsl_to_rgb(h, s, _clamp(l))
