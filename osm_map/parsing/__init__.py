"""OSM XML parsing modules."""

from osm_map.parsing.attributes import read_attributes, parse_uint64, parse_double
from osm_map.parsing.elements import (
    parse_tag, parse_nd, parse_member, parse_node, parse_way, parse_relation
)
from osm_map.parsing.document import OSMDocumentParser

__all__ = [
    'read_attributes', 'parse_uint64', 'parse_double',
    'parse_tag', 'parse_nd', 'parse_member',
    'parse_node', 'parse_way', 'parse_relation',
    'OSMDocumentParser',
]
