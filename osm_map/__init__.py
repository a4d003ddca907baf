"""
OSM Map - load OpenStreetMap XML exports into an in-memory map model.

Nodes, ways and relations are parsed into flat collections in document
order; ways gain resolved coordinate points and highway/building flags.
"""

__version__ = "1.0.0"

from loguru import logger

# Silent as a library; osm_map.utils.logging.configure_logging() enables it
logger.disable("osm_map")

# Data models
from osm_map.models.elements import Node, Way, Member, Relation, OSMMap

# Errors and options
from osm_map.exceptions import (
    OSMMapError, MalformedNumber, MissingAttribute, DanglingReference
)
from osm_map.config import LoadOptions, DanglingPolicy, DuplicatePolicy

# Parsing
from osm_map.parsing.document import OSMDocumentParser
from osm_map.processing.post_processor import post_process

# Main API
from osm_map.api import OSMLoader, load_osm, load_osm_string

__all__ = [
    # Version
    '__version__',
    # Models
    'Node', 'Way', 'Member', 'Relation', 'OSMMap',
    # Errors
    'OSMMapError', 'MalformedNumber', 'MissingAttribute', 'DanglingReference',
    # Options
    'LoadOptions', 'DanglingPolicy', 'DuplicatePolicy',
    # Parsing
    'OSMDocumentParser', 'post_process',
    # API
    'OSMLoader', 'load_osm', 'load_osm_string',
]
