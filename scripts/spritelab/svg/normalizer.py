"""Icon normalization: turn a standalone SVG icon into a sprite <symbol>."""

import xml.etree.ElementTree as ET

from ..errors import NoSvgElementError
from .document import parse
from .utils import local_name, svg_tag

# Namespace declarations never reach attrib (expat consumes them), so the
# xmlns entries only matter for documents built by hand.
STRIPPED_ATTRIBUTES = ("xmlns", "xmlns:xlink", "version", "width", "height")


def _find_svg(root: ET.Element) -> ET.Element | None:
    for element in root.iter():
        if local_name(element.tag) == "svg":
            return element
    return None


def _qualify(element: ET.Element) -> None:
    """Move un-namespaced elements into the SVG namespace."""
    for node in element.iter():
        if isinstance(node.tag, str) and not node.tag.startswith("{"):
            node.tag = svg_tag(node.tag)


def normalize(icon_text: str, name: str) -> ET.Element:
    """Convert icon SVG text into a <symbol> element with the given id.

    The root <svg> (or the first <svg> in the document) is retagged as
    <symbol>, gets ``id=name`` and loses its sizing and version attributes so
    the referencing element controls the rendered size.

    Args:
        icon_text: Full SVG document text of the icon
        name: Icon name, used as the symbol id

    Returns:
        Detached <symbol> element ready to append to a sprite's <defs>

    Raises:
        MalformedInputError: If the text is not well-formed XML
        NoSvgElementError: If the document contains no <svg> element
    """
    root = parse(icon_text)
    svg = _find_svg(root)
    if svg is None:
        raise NoSvgElementError("The icon must contain an SVG element.")

    _qualify(svg)
    svg.tag = svg_tag("symbol")
    svg.set("id", name)
    for attr in STRIPPED_ATTRIBUTES:
        svg.attrib.pop(attr, None)
    svg.tail = None
    return svg
