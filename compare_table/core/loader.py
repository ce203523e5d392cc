"""Read data and baseline matrices from JSON files.

Both files hold a 2-D array in row-major order. Data cells must be numbers.
Baseline cells may be null, a number, or a two-item [center, spread] list;
which of those is valid depends on the mode and is checked by the engine,
not here. Shape is not checked here either.
"""

import json
from pathlib import Path

from compare_table.core.errors import ConfigError
from compare_table.core.types import is_real


def _read_json(path: str | Path) -> object:
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f'file not found: {path}') from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f'{path}: invalid JSON ({exc.msg} at line {exc.lineno})') from exc


def _rows(obj: object, path: str | Path) -> list[list]:
    if not isinstance(obj, list) or not all(isinstance(row, list) for row in obj):
        raise ConfigError(f'{path}: expected a 2-D array (list of lists)')
    return obj


def load_data(path: str | Path) -> list[list[float]]:
    """Load a data matrix. Every cell must be a number."""
    rows = _rows(_read_json(path), path)
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if not is_real(cell):
                raise ConfigError(f'{path}: data cell ({i}, {j}) is not a number: {cell!r}')
    return rows


def load_baseline(path: str | Path) -> list[list]:
    """Load a baseline matrix. [center, spread] lists become tuples."""
    rows = _rows(_read_json(path), path)
    return [[tuple(cell) if isinstance(cell, list) else cell for cell in row] for row in rows]
