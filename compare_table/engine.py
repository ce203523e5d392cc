"""Map a data matrix against a baseline matrix into a matrix of colours.

One call is one mapping pass:

  1. validate shapes (RowCountMismatch / RaggedDataRow / RaggedBaselineRow)
     and that every data cell is a number (BadDataCell)
  2. resolve the palette's mode to a strategy (UnsupportedMode)
  3. check every baseline cell fits that mode (BadBaselineCell)
  4. colour every cell with the strategy
  5. optionally pick a dark/light text tone per cell

Steps 1-3 run before any cell is coloured, so a bad input never yields a
partial result. Cells are independent of each other. Inputs are read,
never written.
"""

from compare_table import registry
from compare_table.core.hsl import Colour, lightness
from compare_table.core.types import DEFAULT_PALETTE, MappedMatrix, Matrix, Palette, TextTone
from compare_table.core.validate import check_baseline_cells, check_data_cells, validate


def text_tone(colour: Colour) -> TextTone:
    """Dark text on light backgrounds, light text on dark ones."""
    return TextTone.DARK if lightness(colour) > 0.5 else TextTone.LIGHT


def map_matrix(data: Matrix, baseline: Matrix, palette: Palette = DEFAULT_PALETTE) -> MappedMatrix:
    """Colour every cell of `data` against the matching cell of `baseline`."""
    validate(data, baseline).raise_for_reason()
    check_data_cells(data)
    strategy = registry.resolve(palette.mode)
    check_baseline_cells(baseline, strategy)

    colours = [
        [strategy.map_cell(value, baseline[i][j], palette) for j, value in enumerate(row)]
        for i, row in enumerate(data)
    ]

    text = None
    if palette.dynamic_text:
        text = [[text_tone(c) for c in row] for row in colours]

    nulls = [[cell is None for cell in row] for row in baseline]
    return MappedMatrix(colours=colours, text=text, mode=strategy.mode, nulls=nulls)


def map_colours(data: Matrix, baseline: Matrix, palette: Palette = DEFAULT_PALETTE) -> list[list[Colour]]:
    """Colour matrix only; see map_matrix."""
    return map_matrix(data, baseline, palette).colours
