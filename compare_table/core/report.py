"""Report builder — text and JSON output for compare-table results."""

import json
from typing import Any

from compare_table.core.palette import rgb_to_hex
from compare_table.core.types import ColourMode, MappedMatrix, Matrix


def summarise(data: Matrix, baseline: Matrix, mode: ColourMode | str = ColourMode.BINARY) -> dict[str, int]:
    """Count cells above, at-or-below and without a baseline.

    For [center, spread] baselines the centre is the comparison point.
    `interpolated` counts cells shaded by distance rather than picked from
    the palette, which is every non-null cell in linear mode and none in
    binary mode.
    """
    above = below = null = 0
    for row, base_row in zip(data, baseline):
        for value, cell in zip(row, base_row):
            if cell is None:
                null += 1
                continue
            point = cell[0] if isinstance(cell, (tuple, list)) else cell
            if value > point:
                above += 1
            else:
                below += 1
    interpolated = above + below if ColourMode(mode) is ColourMode.LINEAR else 0
    return {'total': above + below + null, 'above': above, 'below': below, 'null': null, 'interpolated': interpolated}


def format_text(mapped: MappedMatrix, data: Matrix, baseline: Matrix) -> str:
    """Format the colour matrix as an aligned text grid."""
    lines = [f'compare-table: {mapped.rows}×{mapped.cols} ({mapped.mode.value})', '']

    for i, row in enumerate(mapped.colours):
        cells = []
        for j, colour in enumerate(row):
            cell = f'{data[i][j]!s:>8} {rgb_to_hex(colour)}'
            if mapped.text is not None:
                cell += f' {mapped.text[i][j].value:<5}'
            cells.append(cell)
        lines.append('  '.join(cells))

    if mapped.rows:
        lines.append('')
    s = summarise(data, baseline, mapped.mode)
    t = s['total']
    lines.append(
        f'ABOVE {s["above"]}/{t}  BELOW {s["below"]}/{t}  NULL {s["null"]}/{t}  INTERPOLATED {s["interpolated"]}/{t}'
    )
    return '\n'.join(lines)


def format_json(mapped: MappedMatrix, data: Matrix, baseline: Matrix) -> str:
    """Format the colour matrix as JSON."""
    obj: dict[str, Any] = {
        'rows': mapped.rows,
        'cols': mapped.cols,
        'mode': mapped.mode.value,
        'colours': [[rgb_to_hex(c) for c in row] for row in mapped.colours],
        'text': None,
    }
    if mapped.text is not None:
        obj['text'] = [[t.value for t in row] for row in mapped.text]
    obj['summary'] = summarise(data, baseline, mapped.mode)
    return json.dumps(obj, indent=2)
