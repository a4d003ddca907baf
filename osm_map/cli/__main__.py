"""Allow running osm_map.cli as a module.

Usage:
    python -m osm_map.cli --help
"""

import sys
from osm_map.cli import main

if __name__ == "__main__":
    sys.exit(main())
