"""Render a mapped matrix as an HTML table.

Produces the same markup the compare-table widget builds in the browser:

    <table class="table-compare-widget">
      <thead><tr><th col-number="0">...</th>...</tr></thead>
      <tbody>
        <tr row-number="0">
          <td row-number="0" col-number="0" style="background-color:rgb(r,g,b)">5</td>
          ...

Header and cell text is always HTML-escaped. When the mapping pass computed
text tones, each cell also gets a `color:` declaration.
With `null_text` set, cells whose baseline was null show that text in place
of the data value.

Example:
    compare-table html data.json baseline.json --headers Mon,Tue -o table.html
"""

from collections.abc import Sequence
from html import escape

from compare_table.core.errors import ConfigError
from compare_table.core.palette import rgb_css
from compare_table.core.types import MappedMatrix, Matrix

TABLE_CLASS = 'table-compare-widget'

PAGE_STYLE = """
    table.table-compare-widget {
      border-collapse: collapse;
      font-family: sans-serif;
      font-size: 0.8rem;
    }
    table.table-compare-widget td, table.table-compare-widget th {
      border: 1px solid rgb(190,190,190);
      padding: 4px 12px;
      text-align: right;
    }
    table.table-compare-widget th {
      background-color: rgb(235,235,235);
    }
"""


def _cell_style(mapped: MappedMatrix, i: int, j: int, style_attribute: str) -> str:
    style = f'{style_attribute}:{rgb_css(mapped.colours[i][j])}'
    if mapped.text is not None:
        style += f';color:{rgb_css(mapped.text[i][j].rgb)}'
    return style


def render_table(
    data: Matrix,
    mapped: MappedMatrix,
    headers: Sequence[str] | None = None,
    style_attribute: str = 'background-color',
    null_text: str | None = None,
) -> str:
    """Build the <table> markup for `data` coloured by `mapped`."""
    if len(data) != mapped.rows:
        raise ConfigError(f'data has {len(data)} rows but mapping has {mapped.rows}')
    if not style_attribute or any(ch in style_attribute for ch in ':;"<>'):
        raise ConfigError(f'Invalid style attribute: {style_attribute!r}')

    lines = [f'<table class="{TABLE_CLASS}">']

    if headers:
        lines.append('  <thead><tr>')
        for j, text in enumerate(headers):
            lines.append(f'    <th col-number="{j}">{escape(str(text))}</th>')
        lines.append('  </tr></thead>')

    lines.append('  <tbody>')
    for i, row in enumerate(data):
        lines.append(f'    <tr row-number="{i}">')
        for j, value in enumerate(row):
            style = _cell_style(mapped, i, j, style_attribute)
            if null_text is not None and mapped.nulls and mapped.nulls[i][j]:
                value = null_text
            lines.append(
                f'      <td row-number="{i}" col-number="{j}" style="{escape(style)}">{escape(str(value))}</td>'
            )
        lines.append('    </tr>')
    lines.append('  </tbody>')
    lines.append('</table>')
    return '\n'.join(lines)


def render_page(table_html: str, title: str = 'compare-table') -> str:
    """Wrap a rendered table in a standalone HTML document."""
    return '\n'.join(
        [
            '<!DOCTYPE html>',
            '<html>',
            '<head>',
            '  <meta charset="utf-8">',
            f'  <title>{escape(title)}</title>',
            f'  <style>{PAGE_STYLE}  </style>',
            '</head>',
            '<body>',
            table_html,
            '</body>',
            '</html>',
        ]
    )
