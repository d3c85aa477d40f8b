"""palette-forge — Colour harmony palettes, tonal scales and WCAG contrast checks.

Usage: palette-forge <command> [options]

Commands are auto-discovered from palette_forge/commands/.
Each command module's docstring is its documentation.
Run `palette-forge help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-forge looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from palette_forge import registry
from palette_forge.core.env import load_env
from palette_forge.core.report import format_json, format_text
from palette_forge.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'palette_forge.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  palette-forge palette --base '#3b82f6' --harmony triadic\n"
        '  palette-forge palette --seed 42 --lock 0 --randomize 2 --json\n'
        "  palette-forge scale '#3b82f6' --format hsl\n"
        "  palette-forge contrast '#ffffff' '#3b82f6' --require aa\n"
        "  palette-forge convert '#3b82f6'\n"
        '  palette-forge help palette\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PALETTE_FORGE_FORMAT   hex | rgb | hsl | hsb | cmyk\n'
        '  PALETTE_FORGE_HARMONY  monochromatic | analogous | complementary |\n'
        '                         split-complementary | triadic | random\n'
        '  PALETTE_FORGE_SEED     integer seed for reproducible random palettes\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-forge',
        description='Colour harmony palettes, tonal scales and WCAG contrast checks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.add_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand prints the full module docstring of a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: palette-forge help <command> for full docs.')
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


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'palette-forge: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    code = registry.get(args.command).execute(report, args)

    # Nothing to print when the command bailed out before producing results
    if report.sections:
        print(format_json(report) if args.json else format_text(report))

    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
