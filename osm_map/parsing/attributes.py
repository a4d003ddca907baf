"""Attribute access and numeric literal parsing for OSM elements."""
import re
from typing import Dict, Optional
from xml.etree.ElementTree import Element

from loguru import logger

from osm_map.exceptions import MalformedNumber, MissingAttribute

UINT64_MAX = 2 ** 64 - 1

# sscanf('%lu')-style literal: digits only, no sign, no underscores
_UINT_PATTERN = re.compile(r'\s*([0-9]+)\s*\Z')


def read_attributes(element: Element) -> Dict[str, str]:
    """Return all attributes of an element as raw text, in document order.

    Args:
        element: XML element

    Returns:
        Dict of attribute name to unparsed value
    """
    attrs = dict(element.attrib)
    for name, value in attrs.items():
        logger.trace("  a- '{}'='{}'", name, value)
    return attrs


def parse_uint64(value: str, element: str, attribute: str,
                 element_id: Optional[int] = None) -> int:
    """Parse an unsigned 64-bit integer literal.

    Raises:
        MalformedNumber: If the text is not a non-negative integer in range
    """
    match = _UINT_PATTERN.match(value)
    if match is None:
        raise MalformedNumber(element, attribute, value, element_id)
    number = int(match.group(1))
    if number > UINT64_MAX:
        raise MalformedNumber(element, attribute, value, element_id)
    return number


def parse_double(value: str, element: str, attribute: str,
                 element_id: Optional[int] = None) -> float:
    """Parse a floating point literal, scientific notation included.

    Raises:
        MalformedNumber: If the text is not a valid float
    """
    try:
        return float(value)
    except ValueError:
        raise MalformedNumber(element, attribute, value, element_id) from None


def require(attrs: Dict[str, str], name: str, element: str, strict: bool,
            element_id: Optional[int] = None) -> Optional[str]:
    """Fetch an attribute that the element is expected to carry.

    In lenient mode an absent attribute yields None; in strict mode it
    raises MissingAttribute.
    """
    value = attrs.get(name)
    if value is None:
        if strict:
            raise MissingAttribute(element, name, element_id)
        logger.debug("<{}> without '{}' attribute, field left unset", element, name)
    return value
