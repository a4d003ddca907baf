"""Info command - quick map summary."""
import json
import os
import time
from collections import Counter
from pathlib import Path

from osm_map.cli.commands.common import load_from_args


def setup_parser(subparsers):
    """Setup the info subcommand parser."""
    from osm_map.cli.main import add_load_options

    parser = subparsers.add_parser(
        'info',
        help='Quick file information',
        description='Display summary information about a loaded OSM map'
    )

    parser.add_argument('input', help='Input OSM file')
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output as JSON'
    )
    parser.add_argument(
        '--oneline',
        action='store_true',
        help='Single line output'
    )
    add_load_options(parser)

    parser.set_defaults(func=run)
    return parser


def format_size(size_bytes):
    """Format file size in human readable format."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def summarize(osm_map, top=5):
    """Build the summary dict for a loaded map."""
    tag_counts = Counter()
    for way in osm_map.ways:
        tag_counts.update(k for k in way.tags if k is not None)

    return {
        'nodes': len(osm_map.nodes),
        'ways': len(osm_map.ways),
        'relations': len(osm_map.relations),
        'total': osm_map.total_elements,
        'highways': len(osm_map.highways()),
        'buildings': len(osm_map.buildings()),
        'bbox': osm_map.bbox(),
        'top_way_tags': [{'key': k, 'count': c} for k, c in tag_counts.most_common(top)],
    }


def run(args):
    """Execute the info command."""
    start_time = time.time()

    osm_map = load_from_args(args)
    if osm_map is None:
        return 1

    input_path = Path(args.input)
    file_size = os.path.getsize(input_path)
    info = {
        'file': input_path.name,
        'size': file_size,
        'size_human': format_size(file_size),
        **summarize(osm_map),
    }
    elapsed = time.time() - start_time
    info['load_time'] = round(elapsed, 3)
    bbox = info['bbox']

    if args.json:
        print(json.dumps(info, indent=2))
        return 0

    if args.oneline:
        bbox_str = f"[{bbox[0]:.4f},{bbox[1]:.4f},{bbox[2]:.4f},{bbox[3]:.4f}]" if bbox else "N/A"
        print(f"{info['file']}: {info['nodes']} nodes, {info['ways']} ways, "
              f"{info['relations']} relations, {info['size_human']}, bbox={bbox_str}")
        return 0

    print(f"\n{info['file']}")
    print("=" * 50)
    print(f"Size:      {info['size_human']} ({file_size:,} bytes)")
    print(f"Nodes:     {info['nodes']:,}")
    print(f"Ways:      {info['ways']:,} ({info['highways']:,} highways, "
          f"{info['buildings']:,} buildings)")
    print(f"Relations: {info['relations']:,}")
    print(f"Total:     {info['total']:,} elements")

    if bbox:
        print("\nBounding box:")
        print(f"  Min: {bbox[1]:.6f}, {bbox[0]:.6f}")
        print(f"  Max: {bbox[3]:.6f}, {bbox[2]:.6f}")

    if info['top_way_tags']:
        print("\nTop way tags:")
        for entry in info['top_way_tags']:
            print(f"  {entry['key']}: {entry['count']:,}")

    print(f"\n[{elapsed:.3f}s]")

    return 0
