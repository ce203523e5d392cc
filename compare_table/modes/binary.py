"""Above or at-or-below a single baseline point.

Each baseline cell is a single number. A cell whose value is strictly
greater than its baseline gets the high colour; equal or smaller gets the
low colour. A null baseline cell gets the null colour and is not compared.

Only three colours ever come out of this mode, so it suits tables where
direction matters and magnitude does not.

Baseline file:
    [[3, 3, null],
     [3, 3, 4.5]]

Example:
    compare-table map data.json baseline.json --mode binary --high '#c77' --low '#7a7'
"""

from compare_table.core.hsl import Colour
from compare_table.core.types import BaselineCell, ColourMode, Number, Palette, Strategy, is_real

strategy = Strategy(
    mode=ColourMode.BINARY,
    help='High colour when value > baseline, low colour otherwise.',
    check=is_real,
)


@strategy.cell
def map_cell(value: Number, baseline_cell: BaselineCell, palette: Palette) -> Colour:
    if baseline_cell is None:
        return palette.null
    return palette.high if value > baseline_cell else palette.low
