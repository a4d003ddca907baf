"""Convert command - load a map and export it."""
import json

from loguru import logger

from osm_map.cli.commands.common import load_from_args
from osm_map.export import EXPORTERS, detect_format


def setup_parser(subparsers):
    """Setup the convert subcommand parser."""
    from osm_map.cli.main import add_load_options

    parser = subparsers.add_parser(
        'convert',
        help='Export a loaded map to JSON, GeoJSON, CSV or Shapefile',
        description='Load an OSM file and write the map in another format.',
        epilog='''
Examples:
  osmmap convert map.osm map.json
  osmmap convert map.osm roads.geojson
  osmmap convert -f shapefile map.osm out/map
'''
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument('output', help='Output file')
    parser.add_argument('-f', '--format', choices=sorted(EXPORTERS),
                        help='Output format (default: auto-detect from extension)')
    parser.add_argument('--include-nodes', action='store_true',
                        help='Also export nodes (csv, shapefile)')
    parser.add_argument('--compact', action='store_true',
                        help='Compact JSON output')
    parser.add_argument('--summary', action='store_true',
                        help='Print export metadata as JSON')
    add_load_options(parser)

    parser.set_defaults(func=run)
    return parser


def create_exporter(fmt, args):
    """Instantiate the exporter for ``fmt`` with options from ``args``."""
    if fmt == 'json':
        return EXPORTERS[fmt](compact=args.compact)
    if fmt == 'geojson':
        return EXPORTERS[fmt]()
    return EXPORTERS[fmt](include_nodes=args.include_nodes)


def run(args):
    """Execute the convert command."""
    fmt = args.format or detect_format(args.output)

    osm_map = load_from_args(args)
    if osm_map is None:
        return 1

    try:
        exporter = create_exporter(fmt, args)
        result = exporter.export(osm_map, args.output)
    except (ImportError, OSError) as e:
        logger.error("Export to {} failed: {}", fmt, e)
        return 1

    logger.info("Wrote {} ({})", args.output, exporter.get_format_name())
    if args.summary:
        print(json.dumps(result['metadata'], indent=2))

    return 0
