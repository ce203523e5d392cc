"""Colour parsing: hex, rgb() strings and a small table of CSS colour names.

Every palette entry ends up as the same (r, g, b) triple of ints in
[0, 255], whatever mode is active.
"""

import re

from compare_table.core.errors import ConfigError
from compare_table.core.hsl import Colour

CSS_NAMES: dict[str, str] = {
    'black': '#000000',
    'white': '#ffffff',
    'silver': '#c0c0c0',
    'gray': '#808080',
    'grey': '#808080',
    'lightgray': '#d3d3d3',
    'gainsboro': '#dcdcdc',
    'whitesmoke': '#f5f5f5',
    'red': '#ff0000',
    'maroon': '#800000',
    'firebrick': '#b22222',
    'indianred': '#cd5c5c',
    'salmon': '#fa8072',
    'tomato': '#ff6347',
    'coral': '#ff7f50',
    'orange': '#ffa500',
    'gold': '#ffd700',
    'yellow': '#ffff00',
    'olive': '#808000',
    'green': '#008000',
    'seagreen': '#2e8b57',
    'lime': '#00ff00',
    'teal': '#008080',
    'cyan': '#00ffff',
    'steelblue': '#4682b4',
    'skyblue': '#87ceeb',
    'blue': '#0000ff',
    'navy': '#000080',
    'purple': '#800080',
    'magenta': '#ff00ff',
    'pink': '#ffc0cb',
}

_RGB_PATTERN = re.compile(r'^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$')
_HEX_PATTERN = re.compile(r'[0-9a-fA-F]{6}')


def hex_to_rgb(hex_str: str) -> Colour:
    """Parse '#rrggbb' or '#rgb' (hash optional) into an RGB triple."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if not _HEX_PATTERN.fullmatch(h):
        raise ConfigError(f'Invalid hex colour: {hex_str!r}')
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(colour: Colour) -> str:
    r, g, b = colour
    return f'#{r:02x}{g:02x}{b:02x}'


def rgb_css(colour: Colour) -> str:
    """CSS functional notation, e.g. 'rgb(204,119,119)'."""
    r, g, b = colour
    return f'rgb({r},{g},{b})'


def check_colour(colour: object) -> Colour:
    """Return colour as a tuple if it is three ints in [0, 255]."""
    if not isinstance(colour, (tuple, list)) or len(colour) != 3:
        raise ConfigError(f'Colour must be an (r, g, b) triple, got {colour!r}')
    for c in colour:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ConfigError(f'Colour channels must be ints in 0..255, got {colour!r}')
    return (colour[0], colour[1], colour[2])


def parse_colour(value: object) -> Colour:
    """Resolve a triple, '#hex', 'rgb(r,g,b)' or CSS colour name to RGB."""
    if isinstance(value, (tuple, list)):
        return check_colour(value)
    if not isinstance(value, str):
        raise ConfigError(f'Cannot read a colour from {value!r}')

    text = value.strip().lower().replace(' ', '')
    if text in CSS_NAMES:
        return hex_to_rgb(CSS_NAMES[text])
    m = _RGB_PATTERN.match(text)
    if m:
        return check_colour((int(m.group(1)), int(m.group(2)), int(m.group(3))))
    if text.startswith('#') or re.fullmatch(r'[0-9a-f]{3}|[0-9a-f]{6}', text):
        return hex_to_rgb(text)
    raise ConfigError(f'Unknown colour: {value!r}')
