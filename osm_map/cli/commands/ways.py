"""Ways command - list ways with their derived fields."""
import json

from osm_map.cli.commands.common import load_from_args


def setup_parser(subparsers):
    """Setup the ways subcommand parser."""
    from osm_map.cli.main import add_load_options

    parser = subparsers.add_parser(
        'ways',
        help='List ways with highway/building flags',
        description='List ways with their node count, resolved point count and tag flags'
    )

    parser.add_argument('input', help='Input OSM file')
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument('--highways', action='store_true',
                      help='Only ways tagged highway=*')
    kind.add_argument('--buildings', action='store_true',
                      help='Only ways tagged building=*')
    parser.add_argument('--limit', '-n', type=int, default=None,
                        help='Maximum number of ways to show')
    parser.add_argument('--json', action='store_true',
                        help='Output as JSON')
    add_load_options(parser)

    parser.set_defaults(func=run)
    return parser


def select_ways(osm_map, highways=False, buildings=False, limit=None):
    """Pick the ways to list according to the command options."""
    if highways:
        ways = osm_map.highways()
    elif buildings:
        ways = osm_map.buildings()
    else:
        ways = list(osm_map.ways)
    if limit is not None:
        ways = ways[:limit]
    return ways


def run(args):
    """Execute the ways command."""
    osm_map = load_from_args(args)
    if osm_map is None:
        return 1

    ways = select_ways(osm_map, args.highways, args.buildings, args.limit)

    if args.json:
        print(json.dumps([w.to_dict() for w in ways], indent=2))
        return 0

    print(f"{'id':>12}  {'nodes':>5}  {'points':>6}  {'highway':<7}  {'building':<8}  name")
    for way in ways:
        name = way.tags.get('name') or ''
        print(f"{way.id:>12}  {len(way.nds):>5}  {len(way.points or []):>6}  "
              f"{'yes' if way.is_highway else 'no':<7}  "
              f"{'yes' if way.is_building else 'no':<8}  {name}")
    print(f"\n{len(ways)} ways")

    return 0
