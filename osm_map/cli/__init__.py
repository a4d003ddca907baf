"""Command-line interface for osm_map.

This module provides the CLI entry point for the osmmap command.

Usage:
    # After pip install:
    osmmap --help
    osmmap info map.osm
    osmmap convert map.osm map.geojson

    # Or via Python:
    python -m osm_map.cli
"""

import sys
from osm_map.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main(argv=None) -> int:
    """Entry point for the osmmap CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        return _main(argv) or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"osmmap: fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
