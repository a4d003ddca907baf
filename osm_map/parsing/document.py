"""Document-level walk over a parsed OSM XML tree.

Dispatches the children of the ``osm`` root to the element parsers and
accumulates flat node, way and relation collections in document order.
"""
import time
from typing import Any, Dict, Iterable, Union
from xml.etree.ElementTree import Element, ElementTree

from loguru import logger

from osm_map.models.elements import OSMMap
from osm_map.parsing.elements import parse_node, parse_way, parse_relation


class OSMDocumentParser:
    """Single-pass parser from an XML tree to an OSMMap."""

    def __init__(self, strict: bool = False):
        """Initialize parser.

        Args:
            strict: Raise MissingAttribute for absent required attributes
        """
        self.strict = strict
        self.stats = {
            'nodes': 0,
            'ways': 0,
            'relations': 0,
            'ignored': 0,
            'parsing_time': 0.0,
        }

    def parse(self, document: Union[ElementTree, Element]) -> OSMMap:
        """Walk the document and build the map.

        Args:
            document: Parsed ElementTree, or its root element

        Returns:
            OSMMap with nodes, ways and relations; derived way fields unset
        """
        start_time = time.time()
        root = document.getroot() if isinstance(document, ElementTree) else document

        osm_map = OSMMap()
        # ElementTree exposes no document node, so the root is the only
        # top-level child
        for child in self._children((root,)):
            if child.tag == 'osm':
                self._parse_osm(osm_map, child)
            else:
                self._ignore(child)

        self.stats['parsing_time'] = time.time() - start_time
        logger.debug(
            "Parsed {} nodes, {} ways, {} relations in {:.3f}s",
            len(osm_map.nodes), len(osm_map.ways), len(osm_map.relations),
            self.stats['parsing_time']
        )
        return osm_map

    def _parse_osm(self, osm_map: OSMMap, osm: Element) -> None:
        for child in self._children(osm):
            if child.tag == 'node':
                osm_map.nodes.append(parse_node(child, self.strict))
                self.stats['nodes'] += 1
            elif child.tag == 'way':
                osm_map.ways.append(parse_way(child, self.strict))
                self.stats['ways'] += 1
            elif child.tag == 'relation':
                osm_map.relations.append(parse_relation(child, self.strict))
                self.stats['relations'] += 1
            else:
                self._ignore(child)

    @staticmethod
    def _children(parent: Iterable[Element]) -> Iterable[Element]:
        for child in parent:
            logger.trace("element '{}'", child.tag)
            yield child

    def _ignore(self, element: Element) -> None:
        self.stats['ignored'] += 1
        logger.trace("ignoring <{}>", element.tag)

    @property
    def elements_parsed(self) -> int:
        return self.stats['nodes'] + self.stats['ways'] + self.stats['relations']

    def get_stats(self) -> Dict[str, Any]:
        return dict(self.stats, elements_parsed=self.elements_parsed)

    def reset_stats(self) -> None:
        """Reset all statistics."""
        for key in self.stats:
            self.stats[key] = 0
        self.stats['parsing_time'] = 0.0
