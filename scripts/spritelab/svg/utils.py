"""XML namespace and file helpers shared by the SVG modules."""

import xml.etree.ElementTree as ET
from pathlib import Path

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>"

# Written by `create` and `init`; <defs> holds the symbols
BLANK_SPRITE = "\n".join(
    [
        XML_DECLARATION,
        f"<svg xmlns='{SVG_NS}' xmlns:xlink='{XLINK_NS}'>",
        "<defs>",
        "</defs>",
        "</svg>",
        "",
    ]
)


def register_namespaces() -> None:
    """Register XML namespaces so SVG output uses plain tags and xlink:."""
    ET.register_namespace("", SVG_NS)
    ET.register_namespace("xlink", XLINK_NS)


def svg_tag(name: str) -> str:
    """Return the namespace-qualified tag for an SVG element name."""
    return f"{{{SVG_NS}}}{name}"


def local_name(tag: object) -> str:
    """Strip the namespace from an element tag.

    Comments and processing instructions have non-string tags and map to "".
    """
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def load_svg_file(path: Path) -> str:
    """Load SVG file content."""
    return path.read_text(encoding="utf-8")


def save_svg_file(path: Path, content: str) -> None:
    """Save SVG content to file."""
    path.write_text(content, encoding="utf-8")
