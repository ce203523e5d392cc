"""Shared types for compare-table: ColourMode, Palette, Strategy, Validation, MappedMatrix."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Union

from compare_table.core.errors import SHAPE_ERRORS, ConfigError
from compare_table.core.hsl import Colour
from compare_table.core.palette import check_colour, parse_colour

Number = Union[int, float]
BaselineCell = Union[None, Number, tuple[Number, Number]]
Matrix = Sequence[Sequence]


def is_real(x: object) -> bool:
    """A real number that is not a bool."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class ColourMode(str, enum.Enum):
    """Comparison policies. Adding one means adding a module under compare_table/modes/."""

    BINARY = 'binary'
    LINEAR = 'linear'


class TextTone(str, enum.Enum):
    """Legible text tone for a cell background."""

    DARK = 'dark'
    LIGHT = 'light'

    @property
    def rgb(self) -> Colour:
        return (0, 0, 0) if self is TextTone.DARK else (255, 255, 255)


@dataclass(frozen=True)
class Palette:
    """Colours and mode for one mapping pass.

    `mode` is kept as given (enum member or its string value) and only
    resolved by the engine, so an unknown mode is reported by the pass
    that tries to use it.
    """

    high: Colour = (204, 119, 85)  # #c75
    low: Colour = (119, 170, 221)  # #7ad
    null: Colour = (255, 255, 255)  # #fff
    mode: ColourMode | str = ColourMode.BINARY
    dynamic_text: bool = False

    def __post_init__(self) -> None:
        for name in ('high', 'low', 'null'):
            object.__setattr__(self, name, check_colour(getattr(self, name)))
        if not isinstance(self.dynamic_text, bool):
            raise ConfigError(f'dynamic_text must be a bool, got {self.dynamic_text!r}')

    @classmethod
    def from_options(
        cls,
        high: object = None,
        low: object = None,
        null: object = None,
        mode: ColourMode | str | None = None,
        dynamic_text: bool | None = None,
    ) -> Palette:
        """Build a palette from loose option values; None keeps the default."""
        base = DEFAULT_PALETTE
        return cls(
            high=parse_colour(high) if high is not None else base.high,
            low=parse_colour(low) if low is not None else base.low,
            null=parse_colour(null) if null is not None else base.null,
            mode=mode if mode is not None else base.mode,
            dynamic_text=dynamic_text if dynamic_text is not None else base.dynamic_text,
        )


DEFAULT_PALETTE = Palette()


class Strategy:
    """A self-registering colour mode.

    Usage in a mode module:

        strategy = Strategy(mode=ColourMode.BINARY, help='Above/below a single point')

        @strategy.cell
        def map_cell(value, baseline_cell, palette):
            ...
    """

    def __init__(self, mode: ColourMode, help: str = '', check: Callable[[object], bool] | None = None):
        self.mode = mode
        self.help = help
        self._check = check
        self._cell_fn: Callable[[Number, BaselineCell, Palette], Colour] | None = None

    @property
    def name(self) -> str:
        return self.mode.value

    def cell(self, fn: Callable) -> Callable:
        """Decorator to register the per-cell function."""
        self._cell_fn = fn
        return fn

    def accepts(self, baseline_cell: object) -> bool:
        """True if a non-null baseline cell has the shape this mode reads."""
        return self._check is None or self._check(baseline_cell)

    def map_cell(self, value: Number, baseline_cell: BaselineCell, palette: Palette) -> Colour:
        if self._cell_fn is None:
            raise RuntimeError(f'Strategy {self.name} has no cell function')
        return self._cell_fn(value, baseline_cell, palette)


@dataclass(frozen=True)
class Validation:
    """Outcome of a shape check. `reason` is one of the MatrixShapeError reasons."""

    ok: bool
    reason: str | None = None
    row: int | None = None
    message: str = ''

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_reason(self) -> None:
        """Raise the classified error for a failed validation; no-op when ok."""
        if self.ok:
            return
        raise SHAPE_ERRORS[self.reason](self.message, row=self.row)


@dataclass
class MappedMatrix:
    """Result of one mapping pass.

    `nulls[i][j]` is True where the baseline cell was null and the cell
    got the null colour without any comparison.
    """

    colours: list[list[Colour]] = field(default_factory=list)
    text: list[list[TextTone]] | None = None
    mode: ColourMode = ColourMode.BINARY
    nulls: list[list[bool]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.colours)

    @property
    def cols(self) -> int:
        return len(self.colours[0]) if self.colours else 0
