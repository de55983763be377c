"""Immutable XML blob tree.

Key Components:
    blobs: The closed set of blob kinds with masked and empty variants
    attributes: Attribute collections and the merge algorithm
    factory: Construction functions (node, attrs, attr, text, cdata, mask)
"""

from .attributes import EMPTY_ATTRS, AttrSet
from .blobs import (
    EMPTY_ATTR,
    EMPTY_CDATA,
    EMPTY_NODE,
    EMPTY_TEXT,
    Attr,
    Attrs,
    Blob,
    Cdata,
    CdataValue,
    ElementNode,
    KeyValueAttr,
    MaskedAttr,
    MaskedCdata,
    MaskedNode,
    MaskedText,
    Node,
    Text,
    TextValue,
)
from .factory import (
    attr,
    attrs,
    cdata,
    configure_defaults,
    empty_attr,
    empty_attrs,
    empty_cdata,
    empty_node,
    empty_text,
    get_defaults,
    mask,
    node,
    text,
)

__all__ = [
    # Kinds
    "Blob",
    "Node",
    "Attrs",
    "Attr",
    "Text",
    "Cdata",
    # Implementations
    "AttrSet",
    "CdataValue",
    "ElementNode",
    "KeyValueAttr",
    "TextValue",
    "MaskedAttr",
    "MaskedCdata",
    "MaskedNode",
    "MaskedText",
    # Sentinels
    "EMPTY_ATTR",
    "EMPTY_ATTRS",
    "EMPTY_CDATA",
    "EMPTY_NODE",
    "EMPTY_TEXT",
    # Factories
    "attr",
    "attrs",
    "cdata",
    "configure_defaults",
    "empty_attr",
    "empty_attrs",
    "empty_cdata",
    "empty_node",
    "empty_text",
    "get_defaults",
    "mask",
    "node",
    "text",
]
