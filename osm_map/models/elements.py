"""OSM Element data models."""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Any, Optional

Point = Tuple[float, float]


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    """Map NaN sentinels and infinities to None so JSON output stays valid."""
    if value is None or not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class Node:
    """OSM Node with identifier and location.

    Represents a single geographic point. Nodes are never modified after
    they are parsed.
    """
    id: Optional[int]
    lat: Optional[float]
    lon: Optional[float]

    @property
    def point(self) -> Point:
        """Coordinates as a (lat, lon) pair."""
        return (self.lat, self.lon)

    @property
    def has_location(self) -> bool:
        """True when both coordinates are set and finite."""
        return (_finite_or_none(self.lat) is not None and
                _finite_or_none(self.lon) is not None)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id,
                'lat': _finite_or_none(self.lat),
                'lon': _finite_or_none(self.lon)}

    def to_geojson_feature(self) -> Dict[str, Any]:
        """Convert to GeoJSON Feature.

        Returns:
            GeoJSON Feature dict with Point geometry
        """
        return {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [self.lon, self.lat]
            },
            "properties": {
                "id": self.id,
                "osm_type": "node"
            }
        }


@dataclass
class Way:
    """OSM Way with node references and tags.

    ``points``, ``is_highway`` and ``is_building`` are derived by the
    post-processor and stay None until it has run.
    """
    id: int = 0
    nds: List[int] = field(default_factory=list)
    tags: Dict[str, Optional[str]] = field(default_factory=dict)
    points: Optional[List[Point]] = None
    is_highway: Optional[bool] = None
    is_building: Optional[bool] = None

    @property
    def is_closed(self) -> bool:
        """Check if this way forms a closed loop."""
        return (len(self.nds) >= 4 and
                self.nds[0] == self.nds[-1])

    @property
    def is_resolved(self) -> bool:
        """True once the post-processor has filled in the derived fields."""
        return self.points is not None

    def to_dict(self) -> Dict[str, Any]:
        points = None
        if self.points is not None:
            points = [[_finite_or_none(lat), _finite_or_none(lon)]
                      for lat, lon in self.points]
        return {
            'id': self.id,
            'nds': list(self.nds),
            'tags': dict(self.tags),
            'points': points,
            'is_highway': self.is_highway,
            'is_building': self.is_building,
        }

    def to_geojson_feature(self) -> Dict[str, Any]:
        """Convert to a GeoJSON LineString Feature.

        Coordinates come from the resolved ``points``; sentinel points are
        left out of the geometry.

        Returns:
            GeoJSON Feature dict with LineString geometry
        """
        coordinates = []
        for lat, lon in self.points or []:
            if _finite_or_none(lat) is None or _finite_or_none(lon) is None:
                continue
            coordinates.append([lon, lat])  # GeoJSON uses [lon, lat]

        return {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": coordinates
            },
            "properties": {
                **self.tags,
                "id": self.id,
                "osm_type": "way",
                "node_count": len(self.nds),
                "is_highway": self.is_highway,
                "is_building": self.is_building,
            }
        }


@dataclass
class Member:
    """Relation member: referenced element type, id and role.

    Fields absent from the XML stay None.
    """
    type: Optional[str] = None
    ref: Optional[int] = None
    role: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'ref': self.ref, 'role': self.role}


@dataclass
class Relation:
    """OSM Relation with members and tags.

    Represents a logical grouping of elements (nodes, ways, other relations)
    with roles and associated tags. Members are kept as a flat list.
    """
    id: int = 0
    members: List[Member] = field(default_factory=list)
    tags: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def member_count(self) -> int:
        """Get the number of members in this relation."""
        return len(self.members)

    def get_members_by_type(self, member_type: str) -> List[Member]:
        """Get all members of a specific type.

        Args:
            member_type: 'node', 'way', or 'relation'

        Returns:
            List of members matching the type
        """
        return [m for m in self.members if m.type == member_type]

    def get_members_by_role(self, role: str) -> List[Member]:
        """Get all members with a specific role.

        Args:
            role: The role to filter by (e.g., 'outer', 'inner', 'stop')

        Returns:
            List of members with the specified role
        """
        return [m for m in self.members if m.role == role]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'members': [m.to_dict() for m in self.members],
            'tags': dict(self.tags),
        }


@dataclass
class OSMMap:
    """Parsed OSM document: flat node, way and relation collections.

    Collections keep document order.
    """
    nodes: List[Node] = field(default_factory=list)
    ways: List[Way] = field(default_factory=list)
    relations: List[Relation] = field(default_factory=list)

    @property
    def total_elements(self) -> int:
        """Get total number of elements."""
        return len(self.nodes) + len(self.ways) + len(self.relations)

    def node_by_id(self, node_id: int) -> Optional[Node]:
        """Return the last node carrying ``node_id``, or None."""
        for node in reversed(self.nodes):
            if node.id == node_id:
                return node
        return None

    def way_by_id(self, way_id: int) -> Optional[Way]:
        for way in self.ways:
            if way.id == way_id:
                return way
        return None

    def relation_by_id(self, relation_id: int) -> Optional[Relation]:
        for relation in self.relations:
            if relation.id == relation_id:
                return relation
        return None

    def highways(self) -> List[Way]:
        """Ways flagged as highways by the post-processor."""
        return [w for w in self.ways if w.is_highway]

    def buildings(self) -> List[Way]:
        """Ways flagged as buildings by the post-processor."""
        return [w for w in self.ways if w.is_building]

    def bbox(self) -> Optional[List[float]]:
        """Bounding box of all node coordinates.

        Returns:
            [min_lon, min_lat, max_lon, max_lat], or None without nodes
        """
        lats = [n.lat for n in self.nodes if _finite_or_none(n.lat) is not None]
        lons = [n.lon for n in self.nodes if _finite_or_none(n.lon) is not None]
        if not lats or not lons:
            return None
        return [min(lons), min(lats), max(lons), max(lats)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [n.to_dict() for n in self.nodes],
            'ways': [w.to_dict() for w in self.ways],
            'relations': [r.to_dict() for r in self.relations],
        }
