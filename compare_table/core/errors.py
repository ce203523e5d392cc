"""Error taxonomy for compare-table.

Every error is a precondition failure raised before any per-cell work.
Nothing here is retried: each one means the caller handed over malformed
matrices or a bad palette.

    CompareTableError
    ├── MatrixShapeError      RowCountMismatch, RaggedDataRow, RaggedBaselineRow
    ├── BadDataCell           data cell is not a number
    ├── BadBaselineCell       baseline cell has the wrong shape for the mode
    ├── UnsupportedMode       mode is not one of ColourMode
    └── ConfigError           bad colour, option value or input file
"""

from __future__ import annotations


class CompareTableError(Exception):
    """Base class for everything compare-table raises on purpose."""


class MatrixShapeError(CompareTableError, ValueError):
    """Data and baseline matrices are not rectangular and congruent."""

    reason = 'MatrixShape'

    def __init__(self, message: str, row: int | None = None):
        super().__init__(message)
        self.row = row


class RowCountMismatch(MatrixShapeError):
    reason = 'RowCountMismatch'


class RaggedDataRow(MatrixShapeError):
    reason = 'RaggedDataRow'


class RaggedBaselineRow(MatrixShapeError):
    reason = 'RaggedBaselineRow'


class BadDataCell(CompareTableError, ValueError):
    """A data cell is not a real number (bools and None included)."""

    def __init__(self, message: str, row: int, col: int):
        super().__init__(message)
        self.row = row
        self.col = col


class BadBaselineCell(CompareTableError, ValueError):
    """A non-null baseline cell does not fit the active mode."""

    def __init__(self, message: str, row: int, col: int):
        super().__init__(message)
        self.row = row
        self.col = col


class UnsupportedMode(CompareTableError, ValueError):
    """The configured mode is not a known ColourMode."""

    def __init__(self, mode: object, available: list[str] | None = None):
        msg = f'Unsupported mode: {mode!r}'
        if available:
            msg += f'. Available: {", ".join(available)}'
        super().__init__(msg)
        self.mode = mode


class ConfigError(CompareTableError, ValueError):
    """A colour, option or input file could not be understood."""


SHAPE_ERRORS: dict[str, type[MatrixShapeError]] = {
    cls.reason: cls for cls in (RowCountMismatch, RaggedDataRow, RaggedBaselineRow)
}
