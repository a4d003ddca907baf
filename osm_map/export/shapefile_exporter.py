"""Shapefile export functionality.

Requires pyshp: pip install osm-map[shapefile]

Shapefiles hold a single geometry type, so output is split:
- {basename}_ways.shp for way polylines
- {basename}_nodes.shp for node points (optional)
"""
import math
import os
from typing import Any, Dict, List

from osm_map.export.base import BaseExporter, build_metadata
from osm_map.models.elements import OSMMap

# Optional import - graceful handling if pyshp not installed
try:
    import shapefile
    HAS_PYSHP = True
except ImportError:
    HAS_PYSHP = False
    shapefile = None


# WGS84 projection definition for .prj file
WGS84_PRJ = (
    'GEOGCS["GCS_WGS_1984",DATUM["D_WGS_1984",'
    'SPHEROID["WGS_1984",6378137,298.257223563]],'
    'PRIMEM["Greenwich",0],UNIT["Degree",0.017453292519943295]]'
)


class ShapefileExporter(BaseExporter):
    """Export to ESRI Shapefile format.

    Ways become polylines with the fields below; sentinel points and ways
    with fewer than two resolved points are skipped. Each shapefile gets a
    WGS84 .prj file.
    """

    WAY_FIELDS = [
        ('osm_id', 'C', 20),
        ('highway', 'L', 1),
        ('building', 'L', 1),
        ('name', 'C', 100),
        ('nodes', 'N', 10),
    ]

    NODE_FIELDS = [
        ('osm_id', 'C', 20),
    ]

    def __init__(self, include_nodes: bool = False):
        """Initialize Shapefile exporter.

        Args:
            include_nodes: Also write nodes to {basename}_nodes.shp

        Raises:
            ImportError: If pyshp is not installed
        """
        if not HAS_PYSHP:
            raise ImportError(
                "pyshp is required for Shapefile export. "
                "Install with: pip install osm-map[shapefile]"
            )
        self.include_nodes = include_nodes

    def get_format_name(self) -> str:
        return 'shapefile'

    def export(self, osm_map: OSMMap, output_file: str) -> Dict[str, Any]:
        """Export to Shapefile format.

        Args:
            osm_map: Loaded map
            output_file: Base output path (extension is stripped)

        Returns:
            Result dict with metadata including paths to created files
        """
        base_path = os.path.splitext(output_file)[0]
        created_files = []

        ways_written = self._write_ways(osm_map, f"{base_path}_ways")
        created_files.append(f"{base_path}_ways.shp")

        nodes_written = 0
        if self.include_nodes:
            nodes_written = self._write_nodes(osm_map, f"{base_path}_nodes")
            created_files.append(f"{base_path}_nodes.shp")

        return {
            'metadata': build_metadata(
                osm_map,
                format='shapefile',
                files_created=created_files,
                ways_exported=ways_written,
                nodes_exported=nodes_written,
            )
        }

    def _write_ways(self, osm_map: OSMMap, base_path: str) -> int:
        w = shapefile.Writer(base_path, shapeType=shapefile.POLYLINE)
        for name, ftype, size in self.WAY_FIELDS:
            w.field(name, ftype, size)

        written = 0
        for way in osm_map.ways:
            coords = self._line_coords(way.points or [])
            if len(coords) < 2:
                continue
            w.line([coords])
            w.record(
                osm_id=str(way.id),
                highway=bool(way.is_highway),
                building=bool(way.is_building),
                name=(way.tags.get('name') or '')[:100],
                nodes=len(way.nds),
            )
            written += 1

        w.close()
        self._write_prj(base_path)
        return written

    def _write_nodes(self, osm_map: OSMMap, base_path: str) -> int:
        w = shapefile.Writer(base_path, shapeType=shapefile.POINT)
        for name, ftype, size in self.NODE_FIELDS:
            w.field(name, ftype, size)

        written = 0
        for node in osm_map.nodes:
            if not node.has_location:
                continue
            w.point(node.lon, node.lat)
            w.record(osm_id=str(node.id))
            written += 1

        w.close()
        self._write_prj(base_path)
        return written

    @staticmethod
    def _line_coords(points) -> List[List[float]]:
        # Shapefiles store [x, y] = [lon, lat]
        return [[lon, lat] for lat, lon in points
                if lat is not None and lon is not None
                and not math.isnan(lat) and not math.isnan(lon)]

    @staticmethod
    def _write_prj(base_path: str) -> None:
        with open(f"{base_path}.prj", 'w', encoding='utf-8') as prj:
            prj.write(WGS84_PRJ)

    @staticmethod
    def is_available() -> bool:
        """Check if pyshp is installed.

        Returns:
            True if shapefile export is available
        """
        return HAS_PYSHP


def shapefile_available() -> bool:
    """Check if shapefile export is available.

    Returns:
        True if pyshp is installed
    """
    return HAS_PYSHP
