"""Main osm_map API.

Provides ``load_osm`` and the OSMLoader class that ties the document
parser and the post-processor together.
"""
import os
import time
import xml.etree.ElementTree as ET
from typing import Any, BinaryIO, Dict, Optional, Union

from loguru import logger

from osm_map.config import LoadOptions
from osm_map.models.elements import OSMMap
from osm_map.parsing.document import OSMDocumentParser
from osm_map.processing.post_processor import post_process

Source = Union[str, os.PathLike, BinaryIO]


class OSMLoader:
    """Load OSM XML documents into OSMMap objects.

    Either a complete map is returned or the error propagates; nothing is
    retried and no partial map is produced.
    """

    def __init__(self, options: Optional[LoadOptions] = None):
        """Initialize loader.

        Args:
            options: Load options (defaults to LoadOptions())
        """
        self.options = options or LoadOptions()
        self.stats = {
            'files_processed': 0,
            'elements_parsed': 0,
            'parsing_time': 0.0,
            'post_processing_time': 0.0,
        }

    def load(self, source: Source) -> OSMMap:
        """Load a map from a file path or binary stream.

        Raises:
            FileNotFoundError: If a path is given and does not exist
            xml.etree.ElementTree.ParseError: If the XML is malformed
            OSMMapError: On malformed numbers, dangling refs, or missing
                attributes in strict mode
        """
        if isinstance(source, (str, os.PathLike)):
            if not os.path.exists(source):
                raise FileNotFoundError(f"OSM file not found: {source}")
            logger.info("Loading {}", os.fspath(source))
        tree = ET.parse(source)
        osm_map = self._build(tree)
        self.stats['files_processed'] += 1
        return osm_map

    def loads(self, text: Union[str, bytes]) -> OSMMap:
        """Load a map from an in-memory XML document."""
        return self._build(ET.fromstring(text))

    def _build(self, document) -> OSMMap:
        parser = OSMDocumentParser(strict=self.options.strict)
        osm_map = parser.parse(document)
        self.stats['elements_parsed'] += parser.elements_parsed
        self.stats['parsing_time'] += parser.stats['parsing_time']

        if self.options.derive_fields:
            start_time = time.time()
            post_process(osm_map, self.options)
            self.stats['post_processing_time'] += time.time() - start_time

        return osm_map

    def get_stats(self) -> Dict[str, Any]:
        """Get processing statistics.

        Returns:
            Dict with counters and timings
        """
        return dict(self.stats)


def load_osm(source: Source, options: Optional[LoadOptions] = None) -> OSMMap:
    """Parse an OSM XML file into an OSMMap with derived way fields.

    Args:
        source: Path to an OSM XML file, or a binary file object
        options: Load options

    Returns:
        Fully populated OSMMap
    """
    return OSMLoader(options).load(source)


def load_osm_string(text: Union[str, bytes],
                    options: Optional[LoadOptions] = None) -> OSMMap:
    """Parse OSM XML held in memory. See ``load_osm``."""
    return OSMLoader(options).loads(text)
