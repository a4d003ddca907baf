"""Tests for way post-processing."""
import math

import pytest

from osm_map.config import DanglingPolicy, DuplicatePolicy, LoadOptions
from osm_map.exceptions import DanglingReference
from osm_map.models.elements import Node, Way, OSMMap
from osm_map.processing.post_processor import (
    build_node_index, resolve_points, post_process
)


@pytest.fixture
def nodes():
    return [Node(1, 10.0, 20.0), Node(2, 11.0, 21.0), Node(3, 12.0, 22.0)]


class TestBuildNodeIndex:
    """Tests for the id to position index."""

    def test_index_positions(self, nodes):
        """Ids map to their list positions."""
        assert build_node_index(nodes) == {1: 0, 2: 1, 3: 2}

    def test_duplicate_last_wins(self):
        """By default the last duplicate id wins."""
        nodes = [Node(1, 0.0, 0.0), Node(1, 5.0, 5.0)]
        assert build_node_index(nodes)[1] == 1

    def test_duplicate_first_wins(self):
        """FIRST keeps the earliest duplicate id."""
        nodes = [Node(1, 0.0, 0.0), Node(1, 5.0, 5.0)]
        assert build_node_index(nodes, DuplicatePolicy.FIRST)[1] == 0


class TestResolvePoints:
    """Tests for resolving node refs into points."""

    def test_points_follow_refs(self, nodes):
        """Points follow ref order, repeats included."""
        index = build_node_index(nodes)
        points = resolve_points(100, [3, 1, 3], nodes, index)
        assert points == [(12.0, 22.0), (10.0, 20.0), (12.0, 22.0)]

    def test_dangling_error(self, nodes):
        """An unknown ref raises DanglingReference by default."""
        index = build_node_index(nodes)
        with pytest.raises(DanglingReference) as exc_info:
            resolve_points(100, [1, 99], nodes, index)
        assert exc_info.value.way_id == 100
        assert exc_info.value.node_id == 99
        assert str(exc_info.value) == "way 100 references unknown node 99"

    def test_dangling_skip(self, nodes):
        """SKIP drops unknown refs."""
        index = build_node_index(nodes)
        points = resolve_points(100, [1, 99, 2], nodes, index, DanglingPolicy.SKIP)
        assert points == [(10.0, 20.0), (11.0, 21.0)]

    def test_dangling_sentinel(self, nodes):
        """SENTINEL inserts a NaN point for unknown refs."""
        index = build_node_index(nodes)
        points = resolve_points(100, [1, 99, 2], nodes, index, DanglingPolicy.SENTINEL)
        assert len(points) == 3
        assert math.isnan(points[1][0]) and math.isnan(points[1][1])
        assert points[2] == (11.0, 21.0)

    def test_empty_refs(self, nodes):
        """A way without refs has no points."""
        assert resolve_points(1, [], nodes, build_node_index(nodes)) == []


class TestPostProcess:
    """Tests for the full post-processing pass."""

    def test_flags(self, nodes):
        """Highway and building flags follow tag keys."""
        osm_map = OSMMap(nodes=nodes, ways=[
            Way(id=1, nds=[1, 2], tags={'highway': 'residential'}),
            Way(id=2, nds=[1, 2, 3, 1], tags={'building': 'yes'}),
            Way(id=3, nds=[2], tags={'highway': 'service', 'building': 'garage'}),
            Way(id=4, nds=[3], tags={'landuse': 'grass'}),
        ])
        post_process(osm_map)

        flags = [(w.is_highway, w.is_building) for w in osm_map.ways]
        assert flags == [(True, False), (False, True), (True, True), (False, False)]

    def test_points_correspond_to_refs(self, nodes):
        """Each point matches the node its ref names."""
        osm_map = OSMMap(nodes=nodes, ways=[Way(id=1, nds=[2, 3, 1])])
        post_process(osm_map)

        way = osm_map.ways[0]
        assert len(way.points) == len(way.nds)
        for ref, point in zip(way.nds, way.points):
            node = osm_map.node_by_id(ref)
            assert point == (node.lat, node.lon)

    def test_returns_same_map(self, nodes):
        """The map is updated in place and returned."""
        osm_map = OSMMap(nodes=nodes)
        assert post_process(osm_map) is osm_map

    def test_dangling_aborts(self, nodes):
        """A dangling ref aborts post-processing."""
        osm_map = OSMMap(nodes=nodes, ways=[Way(id=7, nds=[42])])
        with pytest.raises(DanglingReference):
            post_process(osm_map)

    def test_options_applied(self):
        """Dangling and duplicate policies come from the options."""
        osm_map = OSMMap(
            nodes=[Node(1, 0.0, 0.0), Node(1, 1.0, 1.0)],
            ways=[Way(id=7, nds=[1, 42])],
        )
        options = LoadOptions(dangling=DanglingPolicy.SKIP,
                              duplicates=DuplicatePolicy.FIRST)
        post_process(osm_map, options)
        assert osm_map.ways[0].points == [(0.0, 0.0)]

    def test_tags_not_modified(self, nodes):
        """Tags and refs are left untouched."""
        way = Way(id=1, nds=[1], tags={'highway': 'primary'})
        post_process(OSMMap(nodes=nodes, ways=[way]))
        assert way.tags == {'highway': 'primary'}
        assert way.nds == [1]
