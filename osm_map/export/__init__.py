"""Export functionality for loaded maps."""

from osm_map.export.base import BaseExporter, build_metadata
from osm_map.export.json_exporter import JSONExporter, GeoJSONExporter
from osm_map.export.csv_exporter import CSVExporter
from osm_map.export.shapefile_exporter import ShapefileExporter, shapefile_available

EXPORTERS = {
    'json': JSONExporter,
    'geojson': GeoJSONExporter,
    'csv': CSVExporter,
    'shapefile': ShapefileExporter,
}

EXTENSIONS = {
    '.json': 'json',
    '.geojson': 'geojson',
    '.csv': 'csv',
    '.shp': 'shapefile',
}


def detect_format(output_file: str) -> str:
    """Guess the export format from a file extension (default: json)."""
    lower = output_file.lower()
    for ext, fmt in EXTENSIONS.items():
        if lower.endswith(ext):
            return fmt
    return 'json'


__all__ = [
    'BaseExporter', 'build_metadata',
    'JSONExporter', 'GeoJSONExporter', 'CSVExporter', 'ShapefileExporter',
    'shapefile_available', 'EXPORTERS', 'detect_format',
]
