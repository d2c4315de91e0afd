"""Sprite document model: a parsed SVG tree with symbols kept in <defs>."""

import xml.etree.ElementTree as ET

from ..errors import MalformedInputError
from .utils import XML_DECLARATION, local_name, register_namespaces


def parse(text: str) -> ET.Element:
    """Parse SVG text into an element tree, keeping comments.

    Args:
        text: SVG document text

    Returns:
        Root element of the document

    Raises:
        MalformedInputError: If the text is not well-formed XML
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        return ET.fromstring(text, parser=parser)
    except ET.ParseError as e:
        raise MalformedInputError(f"Invalid SVG document: {e}") from e


def _namespace_of(element: ET.Element) -> str:
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[: tag.index("}") + 1]
    return ""


def _find_defs(root: ET.Element) -> ET.Element | None:
    for child in root:
        if local_name(child.tag) == "defs":
            return child
    return None


def find_or_create_defs(root: ET.Element) -> ET.Element:
    """Return the <defs> child of root, appending an empty one if absent."""
    defs = _find_defs(root)
    if defs is not None:
        return defs

    defs = ET.SubElement(root, f"{_namespace_of(root)}defs")
    defs.text = "\n"
    defs.tail = "\n"
    return defs


def insert_symbol(defs: ET.Element, symbol: ET.Element) -> None:
    """Append symbol as the last child of defs."""
    symbol.tail = "\n"
    defs.append(symbol)


def find_symbol_by_id(defs: ET.Element, symbol_id: str) -> ET.Element | None:
    """Return the direct child of defs whose id equals symbol_id, if any."""
    for child in defs:
        if child.get("id") == symbol_id:
            return child
    return None


def remove_symbol(defs: ET.Element, node: ET.Element) -> None:
    """Detach node from defs."""
    defs.remove(node)


def iter_symbol_ids(root: ET.Element) -> list[str]:
    """Return the ids of the <symbol> children of <defs>, in document order.

    Symbols outside <defs> are not part of the sprite and are skipped.
    """
    defs = _find_defs(root)
    if defs is None:
        return []
    return [
        element.get("id", "")
        for element in defs
        if local_name(element.tag) == "symbol" and element.get("id")
    ]


def serialize(root: ET.Element) -> str:
    """Render the tree back to SVG text with an XML declaration."""
    register_namespaces()
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"
