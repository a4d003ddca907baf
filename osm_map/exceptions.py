"""Errors raised while loading an OSM document."""
from typing import Optional


class OSMMapError(Exception):
    """Base class for all osm_map load errors."""


class MalformedNumber(OSMMapError, ValueError):
    """A numeric attribute (id, lat, lon, ref) could not be parsed."""

    def __init__(self, element: str, attribute: str, value: str,
                 element_id: Optional[int] = None):
        self.element = element
        self.attribute = attribute
        self.value = value
        self.element_id = element_id
        where = f"<{element}>" if element_id is None else f"<{element} id={element_id}>"
        super().__init__(
            f"{where}: attribute '{attribute}' is not a valid number: {value!r}"
        )


class MissingAttribute(OSMMapError):
    """A required attribute is absent (raised in strict mode only)."""

    def __init__(self, element: str, attribute: str,
                 element_id: Optional[int] = None):
        self.element = element
        self.attribute = attribute
        self.element_id = element_id
        where = f"<{element}>" if element_id is None else f"<{element} id={element_id}>"
        super().__init__(f"{where}: missing required attribute '{attribute}'")


class DanglingReference(OSMMapError, KeyError):
    """A way references a node id that is not in the document."""

    def __init__(self, way_id: int, node_id: int):
        self.way_id = way_id
        self.node_id = node_id
        super().__init__(f"way {way_id} references unknown node {node_id}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]
