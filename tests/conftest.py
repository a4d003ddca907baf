"""Pytest fixtures for osm_map tests."""
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks installed by configure_logging() during a test."""
    yield
    logger.remove()
    logger.disable("osm_map")


@pytest.fixture
def small_osm_file(tmp_path):
    """Create minimal valid OSM file with nodes, ways and a relation."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="test">
  <bounds minlat="51.5" minlon="-0.13" maxlat="51.53" maxlon="-0.1"/>
  <node id="1" lat="51.5" lon="-0.1">
    <tag k="amenity" v="restaurant"/>
  </node>
  <node id="2" lat="51.51" lon="-0.11"/>
  <node id="3" lat="51.52" lon="-0.12"/>
  <node id="4" lat="51.53" lon="-0.13"/>
  <way id="100">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="primary"/>
    <tag k="name" v="Main Street"/>
  </way>
  <way id="101">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="4"/>
    <nd ref="1"/>
    <tag k="building" v="residential"/>
    <tag k="name" v="Test Building"/>
  </way>
  <relation id="1000">
    <member type="way" ref="100" role="outer"/>
    <member type="node" ref="4" role="stop"/>
    <tag k="type" v="route"/>
  </relation>
</osm>'''
    file = tmp_path / "small.osm"
    file.write_text(content)
    return file


@pytest.fixture
def empty_osm_file(tmp_path):
    """Create empty OSM file."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
</osm>'''
    file = tmp_path / "empty.osm"
    file.write_text(content)
    return file


@pytest.fixture
def dangling_osm_file(tmp_path):
    """Create OSM file whose way references a node that does not exist."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="10.0" lon="20.0"/>
  <node id="2" lat="11.0" lon="21.0"/>
  <way id="100">
    <nd ref="1"/><nd ref="99"/><nd ref="2"/>
    <tag k="highway" v="service"/>
  </way>
</osm>'''
    file = tmp_path / "dangling.osm"
    file.write_text(content)
    return file


@pytest.fixture
def example_xml():
    """The three-element example document as a string."""
    return '''<osm><node id="1" lat="10.0" lon="20.0"/>
     <node id="2" lat="11.0" lon="21.0"/>
     <way id="100"><nd ref="1"/><nd ref="2"/><tag k="highway" v="primary"/></way></osm>'''


@pytest.fixture
def sample_node():
    """Create sample Node."""
    from osm_map.models.elements import Node
    return Node(id=12345, lat=51.5, lon=-0.1)


@pytest.fixture
def sample_way():
    """Create sample Way with resolved points."""
    from osm_map.models.elements import Way
    return Way(
        id=67890,
        nds=[1, 2, 3, 1],
        tags={"building": "residential", "name": "Test Building"},
        points=[(51.5, -0.1), (51.51, -0.11), (51.52, -0.12), (51.5, -0.1)],
        is_highway=False,
        is_building=True,
    )
