"""Factory functions for building blob trees.

These functions are the public construction surface. Each one accepts the
argument shapes listed in its docstring and picks the right blob kind, so
callers never instantiate blob classes directly.

Conditional parts are expressed with zero-argument callables ("suppliers").
A supplier is called once, immediately, and a ``None`` result turns into the
matching empty sentinel::

    node("order",
         attrs("id", order_id),
         node("customer", customer_name),
         node(lambda: node("note", note) if note else None))

Examples:
    >>> node("a", attrs("k1", "v1"), node("b"), node("c")).to_xml()
    '<a k1="v1"><b/><c/></a>'
    >>> node("pin", mask("1234", "****")).to_xml(mask=True)
    '<pin>****</pin>'
"""

from typing import Any, Callable, Optional, Tuple, Union

from xml_blob.shared.config import BlobConfig
from xml_blob.tree.attributes import EMPTY_ATTRS, AttrSet, pairs_to_attrs
from xml_blob.tree.blobs import (
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

NodeSupplier = Callable[[], Optional[Node]]
AttrsSupplier = Callable[[], Optional[Attrs]]
AttrSupplier = Callable[[], Optional[Attr]]
TextSupplier = Callable[[], Optional[Text]]
CdataSupplier = Callable[[], Optional[Cdata]]

Maskable = Union[Node, Attr, Text, Cdata, str]

_CHILD_TYPES = (Node, Text, Cdata)

_defaults = BlobConfig()


def configure_defaults(config: BlobConfig) -> None:
    """Replace the process-wide factory defaults.

    Trees built earlier keep the replacement values they were built with.
    """
    global _defaults
    if not isinstance(config, BlobConfig):
        raise TypeError("config must be a BlobConfig instance")
    _defaults = config


def get_defaults() -> BlobConfig:
    """Get the process-wide factory defaults."""
    return _defaults


def empty_node() -> Node:
    """Get the shared node that prints nothing."""
    return EMPTY_NODE


def empty_attr() -> Attr:
    """Get the shared attribute that prints nothing, not even a separator."""
    return EMPTY_ATTR


def empty_attrs() -> Attrs:
    """Get the shared attribute collection with no members."""
    return EMPTY_ATTRS


def empty_text() -> Text:
    """Get the shared text that prints nothing."""
    return EMPTY_TEXT


def empty_cdata() -> Cdata:
    """Get the shared CDATA section that prints nothing."""
    return EMPTY_CDATA


def _scalar_to_text(value: Union[str, int, bool]) -> Text:
    # bool before int: True is an int too
    if isinstance(value, bool):
        return TextValue("true" if value else "false")
    if isinstance(value, int):
        return TextValue(str(value))
    return TextValue(value)


def _children_from(contents: Tuple[Any, ...]) -> Tuple[Blob, ...]:
    if len(contents) == 1:
        single = contents[0]
        if isinstance(single, (str, int)):
            return (_scalar_to_text(single),)
        if isinstance(single, (list, tuple)):
            contents = tuple(single)

    for child in contents:
        if not isinstance(child, _CHILD_TYPES):
            raise TypeError(
                f"node content must be a Node, Text or Cdata, got {type(child).__name__}"
            )
    return tuple(contents)


def node(tag: Union[str, NodeSupplier], *contents: Any) -> Node:
    """Create an element node.

    Accepted forms::

        node(tag)                          # <tag/>
        node(tag, child, child, ...)       # Node, Text or Cdata children
        node(tag, [child, child, ...])     # children as a list or tuple
        node(tag, "text")                  # escaped text child
        node(tag, 42) / node(tag, True)    # text "42" / "true"
        node(tag, attrs(...), ...)         # any of the above with attributes
        node(supplier)                     # supplier result or empty node

    Args:
        tag: Element name, passed through unvalidated, or a node supplier
        *contents: Optional leading :class:`Attrs` followed by the content

    Returns:
        The new node

    Raises:
        TypeError: If a content argument is of an unsupported type
    """
    if callable(tag):
        if contents:
            raise TypeError("a node supplier takes no further arguments")
        supplied = tag()
        return EMPTY_NODE if supplied is None else supplied

    node_attrs: Attrs = EMPTY_ATTRS
    if contents and isinstance(contents[0], Attrs):
        node_attrs = contents[0]
        contents = contents[1:]

    return ElementNode(tag, node_attrs, _children_from(contents))


def attrs(*args: Any) -> Attrs:
    """Create an attribute collection.

    Accepted forms::

        attrs("k1", "v1", "k2", "v2")      # flat key/value strings
        attrs(attr1, attr2, ...)           # attributes
        attrs(base, attr1, ...)            # base merged with attributes
        attrs(base, other, ...)            # base merged with collections
        attrs(supplier)                    # supplier result or empty attrs

    A key that occurs more than once keeps its right-most value.

    Raises:
        InvalidArgumentError: If flat key/value strings have an odd count
        TypeError: If the arguments match none of the forms above
    """
    if len(args) == 1 and callable(args[0]) and not isinstance(args[0], Attrs):
        supplied = args[0]()
        return EMPTY_ATTRS if supplied is None else supplied

    if not args:
        return AttrSet()

    if all(isinstance(arg, str) for arg in args):
        return AttrSet(pairs_to_attrs(args))

    if isinstance(args[0], Attrs):
        base, overlays = args[0], args[1:]
        if not all(isinstance(overlay, (Attrs, Attr)) for overlay in overlays):
            raise TypeError("attrs overlays must be Attrs or Attr instances")
        if not isinstance(base, AttrSet):
            base = AttrSet(base)
        return base.merge(*overlays)

    if all(isinstance(arg, Attr) for arg in args):
        return AttrSet(args)

    raise TypeError(
        "attrs expects key/value strings, Attr instances, or an Attrs base with overlays"
    )


def attr(key: Union[str, AttrSupplier], value: Optional[str] = None) -> Attr:
    """Create an attribute, or resolve an attribute supplier.

    Args:
        key: Attribute name, or a supplier returning an optional attribute
        value: Attribute value; required with a name

    Raises:
        TypeError: If a name is given without a value
    """
    if callable(key):
        supplied = key()
        return EMPTY_ATTR if supplied is None else supplied
    if value is None:
        raise TypeError(f"attr({key!r}) needs a value")
    return KeyValueAttr(key, value)


def text(value: Union[str, TextSupplier]) -> Text:
    """Create escaped text, or resolve a text supplier."""
    if callable(value):
        supplied = value()
        return EMPTY_TEXT if supplied is None else supplied
    return TextValue(value)


def cdata(value: Union[str, CdataSupplier]) -> Cdata:
    """Create a CDATA section, or resolve a CDATA supplier."""
    if callable(value):
        supplied = value()
        return EMPTY_CDATA if supplied is None else supplied
    return CdataValue(value)


def mask(value: Maskable, replacement: Optional[str] = None) -> Blob:
    """Wrap a value so masked printing shows ``replacement`` instead.

    What the replacement looks like depends on the kind of value:

    - node: ``<replacement/>`` stands in for the whole subtree
    - attribute: the key is kept, the value becomes ``replacement``
    - text or plain string: the text becomes ``replacement``
    - CDATA: the section payload becomes ``replacement``

    Unmasked printing is unaffected. The empty attribute has no key to keep,
    so it is returned unchanged.

    Args:
        value: Node, Attr, Text, Cdata, or a string treated as text
        replacement: Mask token; defaults to ``BlobConfig.default_mask``
            (``***masked***``)

    Returns:
        A masked blob of the same kind as ``value``

    Raises:
        TypeError: If ``value`` cannot be masked
    """
    token = _defaults.default_mask if replacement is None else replacement

    if isinstance(value, str):
        return MaskedText(TextValue(value), TextValue(token))
    if isinstance(value, Node):
        return MaskedNode(value, ElementNode(token, EMPTY_ATTRS))
    if isinstance(value, Attr):
        if value is EMPTY_ATTR:
            return value
        return MaskedAttr(value, KeyValueAttr(value.key, token))
    if isinstance(value, Text):
        return MaskedText(value, TextValue(token))
    if isinstance(value, Cdata):
        return MaskedCdata(value, CdataValue(token))
    raise TypeError(f"cannot mask a value of type {type(value).__name__}")
