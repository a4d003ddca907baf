"""Derived way fields: resolved points and tag flags."""
from typing import Dict, List, Optional

from loguru import logger

from osm_map.config import DanglingPolicy, DuplicatePolicy, LoadOptions
from osm_map.exceptions import DanglingReference
from osm_map.models.elements import Node, OSMMap, Point

SENTINEL_POINT: Point = (float('nan'), float('nan'))


def build_node_index(nodes: List[Node],
                     duplicates: DuplicatePolicy = DuplicatePolicy.LAST) -> Dict[int, int]:
    """Map node id to its position in ``nodes``.

    Args:
        nodes: Parsed nodes in document order
        duplicates: Which occurrence wins for a repeated id

    Returns:
        Dict of node id to list index
    """
    index: Dict[int, int] = {}
    for position, node in enumerate(nodes):
        if node.id in index:
            logger.warning("Duplicate node id {} (keeping {} occurrence)",
                           node.id, duplicates.value)
            if duplicates is DuplicatePolicy.FIRST:
                continue
        index[node.id] = position
    return index


def resolve_points(way_id: int, nds: List[int], nodes: List[Node],
                   index: Dict[int, int],
                   dangling: DanglingPolicy = DanglingPolicy.ERROR) -> List[Point]:
    """Resolve a way's node references into (lat, lon) points.

    Raises:
        DanglingReference: If a ref is unknown and ``dangling`` is ERROR
    """
    points: List[Point] = []
    for ref in nds:
        position: Optional[int] = index.get(ref)
        if position is None:
            if dangling is DanglingPolicy.ERROR:
                raise DanglingReference(way_id, ref)
            logger.debug("Way {} references unknown node {} ({})",
                         way_id, ref, dangling.value)
            if dangling is DanglingPolicy.SENTINEL:
                points.append(SENTINEL_POINT)
            continue
        points.append(nodes[position].point)
    return points


def post_process(osm_map: OSMMap, options: Optional[LoadOptions] = None) -> OSMMap:
    """Fill in ``points``, ``is_highway`` and ``is_building`` on every way.

    The id index is built once, after all nodes are parsed, and discarded
    afterwards.

    Args:
        osm_map: Map as produced by the document parser
        options: Dangling and duplicate policies

    Returns:
        The same map, with derived way fields populated
    """
    options = options or LoadOptions()
    index = build_node_index(osm_map.nodes, options.duplicates)

    for way in osm_map.ways:
        way.points = resolve_points(way.id, way.nds, osm_map.nodes, index,
                                    options.dangling)

    for way in osm_map.ways:
        way.is_highway = 'highway' in way.tags
        way.is_building = 'building' in way.tags

    logger.debug("Post-processed {} ways against {} indexed nodes",
                 len(osm_map.ways), len(index))
    return osm_map
