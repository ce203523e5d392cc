"""Shape checks for the data and baseline matrices.

validate() only inspects and classifies; it never raises and never
mutates. The engine turns a failed Validation into an exception.
check_baseline_cells() is the per-mode follow-up: once the mode is known,
every non-null baseline cell must have the shape that mode reads.
check_data_cells() requires every data cell to be a number.
"""

from compare_table.core.errors import BadBaselineCell, BadDataCell
from compare_table.core.types import Matrix, Strategy, Validation, is_real


def validate(data: Matrix, baseline: Matrix) -> Validation:
    """Check both matrices are rectangular and the same shape."""
    rows = len(data)
    if len(baseline) != rows:
        return Validation(
            ok=False,
            reason='RowCountMismatch',
            message=f'data has {rows} rows but baseline has {len(baseline)}',
        )
    if rows == 0:
        return Validation(ok=True)

    cols = len(data[0])
    for i in range(rows):
        if len(data[i]) != cols:
            return Validation(
                ok=False,
                reason='RaggedDataRow',
                row=i,
                message=f'data matrix is not rectangular (row {i})',
            )
        if len(baseline[i]) != cols:
            return Validation(
                ok=False,
                reason='RaggedBaselineRow',
                row=i,
                message=f'column length mismatch in baseline matrix (row {i})',
            )
    return Validation(ok=True)


def check_baseline_cells(baseline: Matrix, strategy: Strategy) -> None:
    """Raise BadBaselineCell on the first non-null cell the strategy cannot read."""
    for i, row in enumerate(baseline):
        for j, cell in enumerate(row):
            if cell is None or strategy.accepts(cell):
                continue
            raise BadBaselineCell(
                f'baseline cell ({i}, {j}) = {cell!r} is not valid for {strategy.name} mode',
                row=i,
                col=j,
            )


def check_data_cells(data: Matrix) -> None:
    """Raise BadDataCell on the first data cell that is not a real number."""
    for i, row in enumerate(data):
        for j, value in enumerate(row):
            if not is_real(value):
                raise BadDataCell(f'data cell ({i}, {j}) = {value!r} is not a number', row=i, col=j)
