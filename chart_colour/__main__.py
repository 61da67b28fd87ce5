"""chart-colour — resolve spreadsheet chart colours against a document theme.

Usage: chart-colour <command> [chart.json] [options]

Commands are auto-discovered from chart_colour/commands/.
Each command module's docstring is its documentation.
Run `chart-colour help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, chart-colour looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from chart_colour import registry
from chart_colour.core.chart_parser import parse_chart_file
from chart_colour.core.env import load_env, theme_path_from_env
from chart_colour.core.report import format_json, format_text
from chart_colour.core.theme import OFFICE_THEME, ThemeTable, load_theme_file
from chart_colour.core.types import ChartSpec, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'chart_colour.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  chart-colour background chart.json\n'
        '  chart-colour series chart.json --json\n'
        '  chart-colour series chart.json --mode fill --theme corporate.json\n'
        '  chart-colour palette --count 18\n'
        '  chart-colour theme\n'
        '  chart-colour help series\n'
        '\n'
        'Configuration (set in .env or environment):\n'
        '  CHART_COLOUR_THEME=path/to/theme.json   default theme file\n'
    )
    parser = argparse.ArgumentParser(
        prog='chart-colour',
        description='Resolve spreadsheet chart colours against a document theme.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log resolution diagnostics to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        if cmd.needs_chart:
            p.add_argument('chart', help='Path to chart description JSON')
        p.add_argument('-t', '--theme', help='Path to theme JSON (overrides chart and env themes)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-m',
            '--mode',
            choices=['auto', 'line', 'fill'],
            default='auto',
            help='Series colour source: line fill, shape fill, or auto by chart type',
        )
        p.add_argument('-n', '--count', type=int, default=12, help='Number of series for palette (default: 12)')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_help(name, cmd.help)}')
        print('\nRun: chart-colour help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _select_theme(args: argparse.Namespace, chart: ChartSpec | None) -> ThemeTable:
    """--theme, then the chart's own theme, then $CHART_COLOUR_THEME, then Office."""
    if getattr(args, 'theme', None):
        return load_theme_file(args.theme)
    if chart is not None and chart.theme is not None:
        return ThemeTable.from_mapping(chart.theme, source=f'{chart.name} (embedded)')
    env_path = theme_path_from_env()
    if env_path:
        return load_theme_file(env_path)
    return OFFICE_THEME


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # OS env vars always win over .env
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'chart-colour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    chart = None
    try:
        if cmd.needs_chart:
            chart = parse_chart_file(args.chart)
        theme = _select_theme(args, chart)
    except FileNotFoundError as e:
        print(f'chart-colour: file not found: {e.filename}', file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f'chart-colour: cannot read {e.filename}: {e.strerror}', file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f'chart-colour: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report(chart_path=getattr(args, 'chart', None), theme_source=theme.source)
    cmd.execute(chart, theme, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
