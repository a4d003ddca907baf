"""JSON and GeoJSON export functionality."""
import json
from typing import Any, Dict, List

from osm_map.export.base import BaseExporter, build_metadata
from osm_map.models.elements import OSMMap


class JSONExporter(BaseExporter):
    """Export the full map model to JSON.

    Sentinel (NaN) points are written as null.
    """

    def __init__(self, compact: bool = False):
        self.compact = compact

    def get_format_name(self) -> str:
        return 'json'

    def export(self, osm_map: OSMMap, output_file: str) -> Dict[str, Any]:
        result = osm_map.to_dict()
        result['metadata'] = build_metadata(osm_map, format='json')

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=None if self.compact else 2,
                      allow_nan=False)

        return result


class GeoJSONExporter(BaseExporter):
    """Export nodes as Points and ways as LineStrings.

    Relations have no assembled geometry and are not exported.
    """

    def __init__(self, include_nodes: bool = True):
        """Initialize GeoJSON exporter.

        Args:
            include_nodes: Also write every node as a Point feature
        """
        self.include_nodes = include_nodes

    def get_format_name(self) -> str:
        return 'geojson'

    def export(self, osm_map: OSMMap, output_file: str) -> Dict[str, Any]:
        features: List[Dict[str, Any]] = []

        if self.include_nodes:
            for node in osm_map.nodes:
                if not node.has_location:
                    continue
                features.append(node.to_geojson_feature())

        way_count = 0
        for way in osm_map.ways:
            feature = way.to_geojson_feature()
            # A LineString needs two positions
            if len(feature['geometry']['coordinates']) < 2:
                continue
            features.append(feature)
            way_count += 1

        geojson = {
            'type': 'FeatureCollection',
            'features': features,
            'properties': {
                'generator': 'osm-map',
                'feature_count': len(features),
            }
        }

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(geojson, f, indent=2, allow_nan=False)

        return {
            'metadata': build_metadata(
                osm_map,
                format='geojson',
                features_exported=len(features),
                ways_exported=way_count,
            )
        }
