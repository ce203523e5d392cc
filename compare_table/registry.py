"""Colour mode table and resolution.

ColourMode is closed, so the table is built from the enum itself: each
member names a module under compare_table/modes/ that must define a
`strategy` for that same member. A member without a matching module is
left out of the table and resolves as unsupported.

Importing by name also works in frozen binaries, where the modules are
pulled in as hidden imports by modes/__init__.py.
"""

import importlib

from compare_table.core.errors import UnsupportedMode
from compare_table.core.types import ColourMode, Strategy

_registry: dict[ColourMode, Strategy] = {}


def _load(mode: ColourMode) -> Strategy | None:
    name = f'compare_table.modes.{mode.value}'
    try:
        module = importlib.import_module(name)
    except ModuleNotFoundError as exc:
        if exc.name != name:
            raise
        return None
    strat = getattr(module, 'strategy', None)
    if isinstance(strat, Strategy) and strat.mode is mode:
        return strat
    return None


def discover() -> dict[ColourMode, Strategy]:
    """Return the strategy table, loading each mode module on first use."""
    if not _registry:
        table = {mode: _load(mode) for mode in ColourMode}
        _registry.update({mode: strat for mode, strat in table.items() if strat is not None})
    return _registry


def resolve(mode: ColourMode | str) -> Strategy:
    """Get the strategy for a mode tag. Raises UnsupportedMode for anything else."""
    reg = discover()
    available = sorted(m.value for m in reg)
    try:
        key = ColourMode(mode)
    except ValueError:
        raise UnsupportedMode(mode, available) from None
    if key not in reg:
        raise UnsupportedMode(mode, available)
    return reg[key]


def all_strategies() -> dict[ColourMode, Strategy]:
    """Return all registered strategies."""
    return discover()


def module_for(mode: ColourMode | str) -> object:
    """The raw module behind a mode (its docstring is the mode's documentation)."""
    return importlib.import_module(f'compare_table.modes.{resolve(mode).name}')
