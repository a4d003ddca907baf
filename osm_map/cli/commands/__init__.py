"""CLI command implementations."""

from osm_map.cli.commands.info import run as cmd_info
from osm_map.cli.commands.ways import run as cmd_ways
from osm_map.cli.commands.convert import run as cmd_convert

__all__ = ['cmd_info', 'cmd_ways', 'cmd_convert']
