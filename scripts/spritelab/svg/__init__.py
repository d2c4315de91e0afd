"""SVG sprite document model and icon normalization."""

from .document import (
    find_or_create_defs,
    find_symbol_by_id,
    insert_symbol,
    iter_symbol_ids,
    parse,
    remove_symbol,
    serialize,
)
from .normalizer import normalize
from .utils import BLANK_SPRITE, SVG_NS, XLINK_NS, local_name, register_namespaces

__all__ = [
    # Utils
    "BLANK_SPRITE",
    "SVG_NS",
    "XLINK_NS",
    "local_name",
    "register_namespaces",
    # Document
    "parse",
    "find_or_create_defs",
    "insert_symbol",
    "find_symbol_by_id",
    "remove_symbol",
    "iter_symbol_ids",
    "serialize",
    # Normalizer
    "normalize",
]
