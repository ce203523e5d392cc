"""compare-table — Colour a matrix of values against a baseline matrix.

Usage: compare-table <command> <data.json> <baseline.json> [options]

Commands:
  map     print the colour matrix (text grid, or --json)
  html    write an HTML table with coloured cells
  image   write a PNG grid of coloured cells
  help    list colour modes, or print a mode's full docs

Colour modes are auto-discovered from compare_table/modes/.
Each mode module's docstring is its documentation.

Environment variables / .env loading:
  Palette flags fall back to COMPARE_TABLE_MODE, COMPARE_TABLE_HIGH,
  COMPARE_TABLE_LOW, COMPARE_TABLE_NULL and COMPARE_TABLE_DYNAMIC_TEXT.
  OS environment variables are used first. If a variable is not set,
  compare-table looks for a .env file starting from the current directory
  and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from compare_table import registry
from compare_table.core.config import load_dotenv, resolve_palette
from compare_table.core.errors import CompareTableError
from compare_table.core.loader import load_baseline, load_data
from compare_table.core.report import format_json, format_text
from compare_table.engine import map_matrix
from compare_table.render.html import render_page, render_table
from compare_table.render.image import save_image

PROG = 'compare-table'


def _add_palette_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('data', help='JSON file with the data matrix (2-D array of numbers)')
    p.add_argument('baseline', help='JSON file with the baseline matrix (same shape, null = no compare)')
    p.add_argument(
        '-m',
        '--mode',
        default=None,
        help=f'Colour mode: {", ".join(sorted(m.value for m in registry.all_strategies()))} (default: binary)',
    )
    p.add_argument('--high', default=None, metavar='COLOUR', help='Colour for cells above baseline (default: #c75)')
    p.add_argument('--low', default=None, metavar='COLOUR', help='Colour for cells at/below baseline (default: #7ad)')
    p.add_argument('--null', default=None, metavar='COLOUR', help='Colour for null baseline cells (default: #fff)')
    p.add_argument(
        '-t',
        '--dynamic-text',
        action='store_true',
        default=None,
        help='Also pick a dark or light text colour per cell',
    )


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  compare-table map data.json baseline.json\n'
        '  compare-table map data.json baseline.json --json\n'
        '  compare-table map data.json ranges.json --mode linear --dynamic-text\n'
        "  compare-table html data.json baseline.json --headers 'Mon,Tue,Wed' --page -o table.html\n"
        '  compare-table image data.json baseline.json -o grid.png --cell-size 32\n'
        '  compare-table help linear\n'
        '\n'
        'Colours: #rgb, #rrggbb, rgb(r,g,b) or a CSS name (e.g. steelblue)\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Colour a matrix of values against a baseline matrix.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('map', help='Print the colour matrix')
    _add_palette_args(p)
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    p = sub.add_parser('html', help='Write an HTML table with coloured cells')
    _add_palette_args(p)
    p.add_argument('-o', '--output', default=None, help='Output file (default: stdout)')
    p.add_argument('--headers', default=None, help='Comma-separated column headers')
    p.add_argument(
        '--style-attribute',
        default='background-color',
        help='CSS property the cell colour is written to (default: background-color)',
    )
    p.add_argument('--page', action='store_true', help='Wrap the table in a full HTML document')
    p.add_argument('--null-text', default=None, metavar='TEXT', help='Text shown in cells with a null baseline')

    p = sub.add_parser('image', help='Write a PNG grid of coloured cells')
    _add_palette_args(p)
    p.add_argument('-o', '--output', required=True, help='Output PNG path')
    p.add_argument('--cell-size', type=int, default=24, metavar='N', help='Cell edge in pixels (default: 24)')
    p.add_argument('--gap', type=int, default=1, metavar='N', help='Gap between cells in pixels (default: 1)')

    help_parser = sub.add_parser('help', help='Print full docs for a colour mode')
    help_parser.add_argument('mode_name', nargs='?', help='Mode name')

    return parser


def _print_help(mode_name: str | None) -> None:
    """Print full module docstring for a mode."""
    strategies = registry.all_strategies()

    if mode_name is None:
        print('Available modes:\n')
        for mode, strat in sorted(strategies.items(), key=lambda kv: kv[0].value):
            print(f'  {mode.value:<10} {strat.help}')
        print(f'\nRun: {PROG} help <mode> for full docs.')
        return

    mod = registry.module_for(mode_name)
    doc = (mod.__doc__ or '').strip()
    print(doc or f'(No module docs for {mode_name!r})')


def _write(text: str, output: str | None) -> None:
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text + '\n')
        print(f'{PROG}: wrote {output}', file=sys.stderr)
    else:
        print(text)


def _run(args: argparse.Namespace, dotenv: dict[str, str]) -> None:
    flags = {
        'mode': args.mode,
        'high': args.high,
        'low': args.low,
        'null': args.null,
        'dynamic_text': args.dynamic_text,
    }
    palette = resolve_palette(flags, dotenv=dotenv)
    data = load_data(args.data)
    baseline = load_baseline(args.baseline)

    mapped = map_matrix(data, baseline, palette)

    if args.command == 'map':
        if args.json:
            print(format_json(mapped, data, baseline))
        else:
            print(format_text(mapped, data, baseline))
    elif args.command == 'html':
        headers = [h.strip() for h in args.headers.split(',')] if args.headers else None
        table = render_table(
            data, mapped, headers=headers, style_attribute=args.style_attribute, null_text=args.null_text
        )
        _write(render_page(table) if args.page else table, args.output)
    elif args.command == 'image':
        path = save_image(mapped, args.output, cell_size=args.cell_size, gap=args.gap)
        print(f'{PROG}: wrote {path} ({mapped.rows}×{mapped.cols} cells)', file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'help':
            _print_help(args.mode_name)
            return 0

        env_path, dotenv = load_dotenv(env_file=args.env_file)
        if env_path:
            print(f'{PROG}: loaded {env_path}', file=sys.stderr)

        _run(args, dotenv)
    except CompareTableError as exc:
        print(f'{PROG}: {exc}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
