"""Element-level parsers: tag, nd, member, node, way, relation.

Each parser reads one XML element (and, for ways and relations, its direct
children) into the matching model object. Unknown attributes and child
elements are ignored.
"""
from typing import Optional, Tuple
from xml.etree.ElementTree import Element

from loguru import logger

from osm_map.models.elements import Node, Way, Member, Relation
from osm_map.parsing.attributes import (
    read_attributes, parse_uint64, parse_double, require
)


def parse_tag(element: Element, strict: bool = False,
              owner_id: Optional[int] = None) -> Tuple[Optional[str], Optional[str]]:
    """Read a ``tag`` element into a (key, value) pair.

    Args:
        element: ``tag`` element
        strict: Raise on missing ``k``/``v`` instead of returning None
        owner_id: Id of the enclosing way/relation, for error messages

    Returns:
        (key, value); a missing attribute gives None in its slot
    """
    attrs = read_attributes(element)
    key = require(attrs, 'k', 'tag', strict, owner_id)
    value = require(attrs, 'v', 'tag', strict, owner_id)
    return key, value


def parse_nd(element: Element, strict: bool = False,
             owner_id: Optional[int] = None) -> Optional[int]:
    """Read an ``nd`` element's ``ref`` as an unsigned 64-bit id."""
    attrs = read_attributes(element)
    ref = require(attrs, 'ref', 'nd', strict, owner_id)
    if ref is None:
        return None
    return parse_uint64(ref, 'nd', 'ref', owner_id)


def parse_member(element: Element, strict: bool = False,
                 owner_id: Optional[int] = None) -> Member:
    """Read a ``member`` element into a Member.

    ``type`` and ``role`` are copied verbatim; ``ref`` is parsed as an
    unsigned 64-bit id.
    """
    attrs = read_attributes(element)
    member = Member()
    member.type = require(attrs, 'type', 'member', strict, owner_id)
    ref = require(attrs, 'ref', 'member', strict, owner_id)
    if ref is not None:
        member.ref = parse_uint64(ref, 'member', 'ref', owner_id)
    member.role = require(attrs, 'role', 'member', strict, owner_id)
    return member


def parse_node(element: Element, strict: bool = False) -> Node:
    """Read a ``node`` element's id and coordinates.

    Raises:
        MalformedNumber: If id, lat or lon is not numeric
        MissingAttribute: In strict mode, if one of them is absent
    """
    attrs = read_attributes(element)

    node_id = None
    raw_id = require(attrs, 'id', 'node', strict)
    if raw_id is not None:
        node_id = parse_uint64(raw_id, 'node', 'id')

    lat = lon = None
    raw_lat = require(attrs, 'lat', 'node', strict, node_id)
    if raw_lat is not None:
        lat = parse_double(raw_lat, 'node', 'lat', node_id)
    raw_lon = require(attrs, 'lon', 'node', strict, node_id)
    if raw_lon is not None:
        lon = parse_double(raw_lon, 'node', 'lon', node_id)

    return Node(id=node_id, lat=lat, lon=lon)


def _parse_element_id(attrs, name: str, strict: bool) -> int:
    raw_id = require(attrs, 'id', name, strict)
    if raw_id is None:
        return 0
    return parse_uint64(raw_id, name, 'id')


def parse_way(element: Element, strict: bool = False) -> Way:
    """Read a ``way`` element with its ``nd`` and ``tag`` children.

    Node references keep document order, duplicates included. Repeated tag
    keys keep the last value. Derived fields are left for the
    post-processor.
    """
    way = Way()
    way.id = _parse_element_id(read_attributes(element), 'way', strict)

    for child in element:
        logger.trace("  e- '{}'", child.tag)
        if child.tag == 'nd':
            ref = parse_nd(child, strict, way.id)
            if ref is not None:
                way.nds.append(ref)
        elif child.tag == 'tag':
            key, value = parse_tag(child, strict, way.id)
            way.tags[key] = value

    return way


def parse_relation(element: Element, strict: bool = False) -> Relation:
    """Read a ``relation`` element with its ``member`` and ``tag`` children.

    Members keep document order without deduplication; repeated tag keys
    keep the last value.
    """
    relation = Relation()
    relation.id = _parse_element_id(read_attributes(element), 'relation', strict)

    for child in element:
        logger.trace("  e- '{}'", child.tag)
        if child.tag == 'member':
            relation.members.append(parse_member(child, strict, relation.id))
        elif child.tag == 'tag':
            key, value = parse_tag(child, strict, relation.id)
            relation.tags[key] = value

    return relation
