"""CLI main entry point with subcommand structure."""
import argparse
import sys
from typing import List, Optional

from osm_map import __version__
from osm_map.config import DanglingPolicy, DuplicatePolicy
from osm_map.utils.logging import configure_logging


def add_load_options(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every command that loads a file."""
    group = parser.add_argument_group('load options')
    group.add_argument('--dangling',
                       choices=[p.value for p in DanglingPolicy],
                       default=DanglingPolicy.ERROR.value,
                       help='Way refs to unknown nodes: fail, skip them, '
                            'or insert NaN points (default: error)')
    group.add_argument('--duplicates',
                       choices=[p.value for p in DuplicatePolicy],
                       default=DuplicatePolicy.LAST.value,
                       help='Which node wins for a repeated id (default: last)')
    group.add_argument('--strict', action='store_true',
                       help='Fail on elements missing required attributes')


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='osmmap',
        description='OSM Map - load OpenStreetMap XML into nodes, ways and relations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmmap info map.osm
  osmmap ways --highways map.osm
  osmmap convert map.osm map.geojson
  osmmap convert --dangling skip extract.osm ways.csv
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'osmmap {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    from osm_map.cli.commands.info import setup_parser as setup_info
    setup_info(subparsers)

    from osm_map.cli.commands.ways import setup_parser as setup_ways
    setup_ways(subparsers)

    from osm_map.cli.commands.convert import setup_parser as setup_convert
    setup_convert(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected command.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        return 1

    configure_logging(args.verbose, args.quiet)
    return args.func(args)
