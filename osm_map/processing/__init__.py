"""Post-processing of parsed maps."""

from osm_map.processing.post_processor import (
    build_node_index, resolve_points, post_process, SENTINEL_POINT
)

__all__ = ['build_node_index', 'resolve_points', 'post_process', 'SENTINEL_POINT']
