"""Logging setup for the osm_map CLI and scripts."""
import sys

from loguru import logger

_LEVELS = ['WARNING', 'INFO', 'DEBUG', 'TRACE']


def level_for(verbose: int = 0, quiet: bool = False) -> str:
    """Map ``-v`` count and ``-q`` to a loguru level name."""
    if quiet:
        return 'ERROR'
    return _LEVELS[min(max(verbose, 0), len(_LEVELS) - 1)]


def configure_logging(verbose: int = 0, quiet: bool = False) -> str:
    """Enable osm_map logging and route it to stderr.

    Args:
        verbose: Verbosity count (0=WARNING, 1=INFO, 2=DEBUG, 3+=TRACE)
        quiet: Only show errors

    Returns:
        The level that was configured
    """
    level = level_for(verbose, quiet)
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )
    logger.enable('osm_map')
    return level
