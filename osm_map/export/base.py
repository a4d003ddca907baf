"""Base class for export functionality."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from osm_map.models.elements import OSMMap


def build_metadata(osm_map: OSMMap, **extras) -> Dict[str, Any]:
    """Build the common metadata structure for an exported map.

    Args:
        osm_map: Loaded map
        **extras: Additional metadata fields

    Returns:
        Metadata dictionary
    """
    return {
        'elements': {
            'nodes': len(osm_map.nodes),
            'ways': len(osm_map.ways),
            'relations': len(osm_map.relations),
            'total': osm_map.total_elements,
        },
        **extras
    }


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, osm_map: OSMMap, output_file: str) -> Dict[str, Any]:
        """Export a loaded map to file.

        Args:
            osm_map: OSMMap with derived way fields
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'json', 'geojson').

        Returns:
            Format name string
        """
        pass
