"""Data models for the parsed OSM map."""

from osm_map.models.elements import Node, Way, Member, Relation, OSMMap

__all__ = ['Node', 'Way', 'Member', 'Relation', 'OSMMap']
