"""CSV export functionality."""
import csv
from typing import Any, Dict, List, Set

from osm_map.export.base import BaseExporter, build_metadata
from osm_map.models.elements import OSMMap


class CSVExporter(BaseExporter):
    """Export ways (and optionally nodes) to CSV, one row per element."""

    BASE_COLUMNS = ['id', 'type', 'lat', 'lon', 'node_count', 'point_count',
                    'is_highway', 'is_building']

    def __init__(self, include_nodes: bool = False):
        """Initialize CSV exporter.

        Args:
            include_nodes: Also write a row per node
        """
        self.include_nodes = include_nodes

    def get_format_name(self) -> str:
        return 'csv'

    def export(self, osm_map: OSMMap, output_file: str) -> Dict[str, Any]:
        tag_columns: Set[str] = set()
        rows: List[Dict[str, Any]] = []

        if self.include_nodes:
            for node in osm_map.nodes:
                rows.append({
                    'id': node.id,
                    'type': 'node',
                    'lat': node.lat,
                    'lon': node.lon,
                })

        for way in osm_map.ways:
            points = way.points or []
            row = {
                'id': way.id,
                'type': 'way',
                'node_count': len(way.nds),
                'point_count': len(points),
                'is_highway': way.is_highway,
                'is_building': way.is_building,
            }
            # Tags with a missing key cannot become a column
            tags = {k: v for k, v in way.tags.items() if k is not None}
            tag_columns.update(k for k in tags if k not in self.BASE_COLUMNS)
            for key, value in tags.items():
                row.setdefault(key, value)
            rows.append(row)

        columns = self.BASE_COLUMNS + sorted(tag_columns)

        with open(output_file, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=columns, extrasaction='ignore')
            writer.writeheader()
            writer.writerows(rows)

        return {
            'metadata': build_metadata(
                osm_map,
                format='csv',
                rows_written=len(rows),
                columns=len(columns),
            )
        }
