"""Utility functions for osm_map."""

from osm_map.utils.logging import configure_logging, level_for

__all__ = ['configure_logging', 'level_for']
