"""Palette configuration from CLI flags, environment and .env files.

Precedence (first wins):
  1. Explicit CLI flag.
  2. OS environment variable (COMPARE_TABLE_*).
  3. .env file at --env-file path, or the first .env found walking up
     from cwd, stopping at .git (file or dir).
  4. Built-in default palette.

The .env file is read into a plain dict. Nothing is written back into
os.environ, so two passes in one process never see each other's settings.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from compare_table.core.errors import ConfigError
from compare_table.core.types import Palette

ENV_PREFIX = 'COMPARE_TABLE_'

# Palette.from_options keyword -> env var suffix
ENV_KEYS = {
    'mode': 'MODE',
    'high': 'HIGH',
    'low': 'LOW',
    'null': 'NULL',
    'dynamic_text': 'DYNAMIC_TEXT',
}

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


def find_dotenv(start: Path) -> Path | None:
    """First .env in start or its ancestors. A directory holding .git ends the search."""
    origin = start.resolve()
    for directory in (origin, *origin.parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped, # lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_dotenv(env_file: str | None = None, start: Path | None = None) -> tuple[Path | None, dict[str, str]]:
    """Locate and read a .env file. Returns (path, values); (None, {}) if there is none."""
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            raise ConfigError(f'env file not found: {env_file}')
    else:
        path = find_dotenv(start or Path.cwd())
        if path is None:
            return None, {}
    return path, read_dotenv(path)


def parse_bool(value: str, name: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f'{name}: expected a boolean, got {value!r}')


def resolve_palette(
    flags: Mapping[str, object],
    environ: Mapping[str, str] | None = None,
    dotenv: Mapping[str, str] | None = None,
) -> Palette:
    """Merge flags over environment over .env into a Palette.

    `flags` uses Palette.from_options keywords; None values are unset.
    """
    environ = os.environ if environ is None else environ
    dotenv = dotenv or {}

    options: dict[str, object] = {}
    for key, suffix in ENV_KEYS.items():
        value = flags.get(key)
        if value is None:
            var = ENV_PREFIX + suffix
            raw = environ.get(var, dotenv.get(var))
            if raw is not None and key == 'dynamic_text':
                value = parse_bool(raw, var)
            else:
                value = raw
        options[key] = value

    return Palette.from_options(**options)
