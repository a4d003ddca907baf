"""Allow running osm_map as a module.

Usage:
    python -m osm_map --help
    python -m osm_map info map.osm
"""

import sys
from osm_map.cli import main

if __name__ == "__main__":
    sys.exit(main())
