"""Helpers shared by CLI commands."""
from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import ParseError

from loguru import logger

from osm_map.api import OSMLoader
from osm_map.config import LoadOptions
from osm_map.exceptions import OSMMapError
from osm_map.models.elements import OSMMap


def load_from_args(args) -> Optional[OSMMap]:
    """Load ``args.input`` with the load options given on the command line.

    Errors are logged and None is returned so commands can exit with 1.
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error("File not found: {}", args.input)
        return None

    loader = OSMLoader(LoadOptions.from_args(args))
    try:
        osm_map = loader.load(input_path)
    except ParseError as e:
        logger.error("Invalid XML in {}: {}", args.input, e)
        return None
    except (OSMMapError, OSError) as e:
        logger.error("Failed to load {}: {}", args.input, e)
        return None

    stats = loader.get_stats()
    logger.info("Loaded {} elements in {:.3f}s",
                stats['elements_parsed'],
                stats['parsing_time'] + stats['post_processing_time'])
    return osm_map
