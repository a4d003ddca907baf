"""End-to-end tests for load_osm and OSMLoader."""
import io
import xml.etree.ElementTree as ET

import pytest

from osm_map import (
    load_osm, load_osm_string, OSMLoader, LoadOptions, DanglingPolicy,
    MalformedNumber, MissingAttribute, DanglingReference,
)


class TestLoadOSM:
    """Tests for loading complete documents."""

    def test_example_document(self, example_xml):
        """The three-element example yields the documented map."""
        osm_map = load_osm_string(example_xml)

        assert [n.to_dict() for n in osm_map.nodes] == [
            {'id': 1, 'lat': 10.0, 'lon': 20.0},
            {'id': 2, 'lat': 11.0, 'lon': 21.0},
        ]
        assert len(osm_map.ways) == 1
        way = osm_map.ways[0]
        assert way.id == 100
        assert way.nds == [1, 2]
        assert way.tags == {'highway': 'primary'}
        assert way.points == [(10.0, 20.0), (11.0, 21.0)]
        assert way.is_highway is True
        assert way.is_building is False
        assert osm_map.relations == []

    def test_load_file(self, small_osm_file):
        """Test loading a file with nodes, ways and a relation."""
        osm_map = load_osm(small_osm_file)

        assert [n.id for n in osm_map.nodes] == [1, 2, 3, 4]
        assert [w.id for w in osm_map.ways] == [100, 101]
        assert osm_map.ways[0].is_highway is True
        assert osm_map.ways[1].is_building is True
        assert osm_map.ways[1].is_closed is True
        assert osm_map.ways[1].points[0] == osm_map.ways[1].points[-1]

        relation = osm_map.relations[0]
        assert relation.id == 1000
        assert [(m.type, m.ref, m.role) for m in relation.members] == [
            ('way', 100, 'outer'), ('node', 4, 'stop')
        ]

    def test_load_str_path(self, small_osm_file):
        """A string path is accepted."""
        assert len(load_osm(str(small_osm_file)).nodes) == 4

    def test_load_stream(self, example_xml):
        """A binary stream is accepted."""
        osm_map = load_osm(io.BytesIO(example_xml.encode('utf-8')))
        assert len(osm_map.ways) == 1

    def test_empty_file(self, empty_osm_file):
        """An empty osm document yields an empty map."""
        osm_map = load_osm(empty_osm_file)
        assert osm_map.total_elements == 0

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_osm(tmp_path / "missing.osm")

    def test_malformed_xml_propagates(self):
        """XML parse errors propagate unchanged."""
        with pytest.raises(ET.ParseError):
            load_osm_string('<osm><node id="1"></osm>')

    def test_malformed_lat_returns_no_map(self):
        """A bad latitude aborts the load."""
        xml = '<osm><node id="1" lat="not-a-number" lon="0"/></osm>'
        with pytest.raises(MalformedNumber):
            load_osm_string(xml)

    def test_dangling_default_fails(self, dangling_osm_file):
        """A dangling ref fails the load by default."""
        with pytest.raises(DanglingReference) as exc_info:
            load_osm(dangling_osm_file)
        assert exc_info.value.node_id == 99

    def test_dangling_skip(self, dangling_osm_file):
        """SKIP leaves points shorter than refs."""
        osm_map = load_osm(dangling_osm_file, LoadOptions(dangling=DanglingPolicy.SKIP))
        way = osm_map.ways[0]
        assert way.nds == [1, 99, 2]
        assert way.points == [(10.0, 20.0), (11.0, 21.0)]

    def test_dangling_sentinel(self, dangling_osm_file):
        """SENTINEL keeps points as long as refs."""
        osm_map = load_osm(dangling_osm_file,
                           LoadOptions(dangling=DanglingPolicy.SENTINEL))
        assert len(osm_map.ways[0].points) == 3

    def test_strict_missing_attribute(self):
        """Strict mode rejects a node without lon."""
        with pytest.raises(MissingAttribute):
            load_osm_string('<osm><node id="1" lat="0"/></osm>',
                            LoadOptions(strict=True))

    def test_without_derived_fields(self, example_xml):
        """Derived fields stay unset when disabled."""
        osm_map = load_osm_string(example_xml, LoadOptions(derive_fields=False))
        assert osm_map.ways[0].points is None
        assert osm_map.ways[0].is_highway is None

    def test_unresolvable_ok_without_derived_fields(self, dangling_osm_file):
        """Dangling refs are not checked without post-processing."""
        osm_map = load_osm(dangling_osm_file, LoadOptions(derive_fields=False))
        assert osm_map.ways[0].nds == [1, 99, 2]


class TestOSMLoader:
    """Tests for OSMLoader statistics."""

    def test_stats(self, small_osm_file, example_xml):
        """Statistics accumulate across loads."""
        loader = OSMLoader()
        loader.load(small_osm_file)
        loader.loads(example_xml)

        stats = loader.get_stats()
        assert stats['files_processed'] == 1
        assert stats['elements_parsed'] == 7 + 3
        assert stats['parsing_time'] >= 0

    def test_default_options(self):
        """A loader without options uses the defaults."""
        assert OSMLoader().options == LoadOptions()
