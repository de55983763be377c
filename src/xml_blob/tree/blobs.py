"""Immutable blob kinds that make up an XML tree.

The set of kinds is closed: :class:`Node`, :class:`Attrs`, :class:`Attr`,
:class:`Text` and :class:`Cdata`. Each kind has a plain implementation, a
masked wrapper (except ``Attrs``, which masks per member) and a shared empty
sentinel that prints nothing. Trees are built with the functions in
:mod:`xml_blob.tree.factory` and never change afterwards, so a tree or any
subtree can be shared between parents and printed from several threads.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterator, Mapping, Optional, Tuple

from xml_blob.character.escaping import escape_xml11
from xml_blob.printing.printer import Printer, StringPrinter
from xml_blob.shared.config import PrinterConfig
from xml_blob.shared.logging import get_logger

_logger = get_logger(__name__, None, "tree")


class Blob(ABC):
    """Anything that can write its XML form to a :class:`Printer`."""

    __slots__ = ()

    @abstractmethod
    def append_to(self, printer: Printer) -> None:
        """Serialize this blob into ``printer``."""


class Node(Blob):
    """An XML element, or a stand-in for one (masked or empty)."""

    __slots__ = ()

    def write_to(self, printer: Printer) -> Printer:
        """Serialize this node into a caller-supplied printer.

        Args:
            printer: Sink receiving the characters

        Returns:
            The same printer, for chaining
        """
        if _logger.is_debug_enabled():
            _logger.bind(printer.config.correlation_id).debug(
                "Writing node",
                extra={"node_kind": type(self).__name__, "masked": printer.should_mask()},
            )
        self.append_to(printer)
        return printer

    def to_xml(self, mask: bool = False, config: Optional[PrinterConfig] = None) -> str:
        """Serialize this node to a string.

        Args:
            mask: Print masked replacements instead of the original values
            config: Printer configuration; ``mask=True`` switches it to masked mode

        Returns:
            The XML text, without an XML declaration
        """
        if config is None:
            config = PrinterConfig(mask=mask)
        elif mask and not config.mask:
            config = config.override(mask=True)
        printer = StringPrinter(config=config)
        self.write_to(printer)
        return printer.getvalue()

    def to_masked_xml(self) -> str:
        """Serialize this node with every masked value replaced."""
        return self.to_xml(mask=True)

    def __str__(self) -> str:
        return self.to_xml()


class Attr(Blob):
    """A single ``key="value"`` attribute.

    Attributes compare and hash by key only, whatever their value or kind, so
    a collection of attributes holds at most one entry per key.

    The empty attribute has key ``""``. A real attribute with an empty key
    therefore shares its slot: whichever of the two comes last in a
    collection is the one kept.
    """

    __slots__ = ()

    key: str
    value: str

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Attr):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class Attrs(Blob):
    """A key-deduplicated collection of :class:`Attr`."""

    __slots__ = ()

    @property
    @abstractmethod
    def members(self) -> Mapping[str, Attr]:
        """Read-only mapping of key to attribute."""

    @property
    def attrs(self) -> FrozenSet[Attr]:
        """The attributes as a set (equality by key)."""
        return frozenset(self.members.values())

    def keys(self) -> Tuple[str, ...]:
        """Attribute keys in insertion order."""
        return tuple(self.members)

    def get(self, key: str, default: Optional[Attr] = None) -> Optional[Attr]:
        """Get the attribute stored under ``key``."""
        return self.members.get(key, default)

    def __iter__(self) -> Iterator[Attr]:
        return iter(self.members.values())

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Attr):
            return item.key in self.members
        return item in self.members


class Text(Blob):
    """Escaped character data."""

    __slots__ = ()


class Cdata(Blob):
    """A CDATA section whose payload is written verbatim."""

    __slots__ = ()


@dataclass(frozen=True)
class ElementNode(Node):
    """A tagged element with attributes and ordered children."""

    tag: str
    attrs: Attrs
    children: Tuple[Blob, ...] = ()

    def append_to(self, printer: Printer) -> None:
        printer.append_char("<").append(self.tag)
        self.attrs.append_to(printer)

        # Presence of children, not their output, decides the closing form
        if not self.children:
            printer.append("/>")
            return

        printer.append_char(">")
        for child in self.children:
            child.append_to(printer)
        printer.append("</").append(self.tag).append_char(">")


@dataclass(frozen=True, eq=False)
class KeyValueAttr(Attr):
    """A plain attribute; the value is escaped when printed."""

    key: str
    value: str

    def append_to(self, printer: Printer) -> None:
        printer.append(self.key).append('="')
        printer.append(escape_xml11(self.value, printer.config.ascii_only))
        printer.append_char('"')


@dataclass(frozen=True)
class TextValue(Text):
    """Character data escaped according to XML 1.1."""

    value: str

    def append_to(self, printer: Printer) -> None:
        printer.append(escape_xml11(self.value, printer.config.ascii_only))


@dataclass(frozen=True)
class CdataValue(Cdata):
    """A CDATA section.

    The payload is not escaped or split, so a value containing ``]]>`` ends
    the section early. Callers that cannot rule this out should use text.
    """

    value: str

    def append_to(self, printer: Printer) -> None:
        printer.append("<![CDATA[").append(self.value).append("]]>")


# Masked wrappers: each holds the original and a replacement built up front,
# and picks one based on the printer's mode.

@dataclass(frozen=True)
class MaskedNode(Node):
    """Prints ``replacement`` (``<mask/>``) instead of the whole subtree when masking."""

    original: Node
    replacement: Node

    def append_to(self, printer: Printer) -> None:
        if printer.should_mask():
            self.replacement.append_to(printer)
        else:
            self.original.append_to(printer)


@dataclass(frozen=True, eq=False)
class MaskedAttr(Attr):
    """Keeps the attribute key but prints a replacement value when masking."""

    original: Attr
    replacement: Attr

    @property
    def key(self) -> str:
        return self.original.key

    @property
    def value(self) -> str:
        return self.original.value

    def append_to(self, printer: Printer) -> None:
        if printer.should_mask():
            self.replacement.append_to(printer)
        else:
            self.original.append_to(printer)


@dataclass(frozen=True)
class MaskedText(Text):
    """Prints replacement text when masking."""

    original: Text
    replacement: Text

    def append_to(self, printer: Printer) -> None:
        if printer.should_mask():
            self.replacement.append_to(printer)
        else:
            self.original.append_to(printer)


@dataclass(frozen=True)
class MaskedCdata(Cdata):
    """Prints a CDATA section holding the replacement when masking."""

    original: Cdata
    replacement: Cdata

    def append_to(self, printer: Printer) -> None:
        if printer.should_mask():
            self.replacement.append_to(printer)
        else:
            self.original.append_to(printer)


# Empty sentinels

class _EmptyNode(Node):
    __slots__ = ()

    def append_to(self, printer: Printer) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyNode()"


class _EmptyAttr(Attr):
    __slots__ = ()

    @property
    def key(self) -> str:
        return ""

    @property
    def value(self) -> str:
        return ""

    def append_to(self, printer: Printer) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyAttr()"


class _EmptyText(Text):
    __slots__ = ()

    def append_to(self, printer: Printer) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyText()"


class _EmptyCdata(Cdata):
    __slots__ = ()

    def append_to(self, printer: Printer) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyCdata()"


EMPTY_NODE: Node = _EmptyNode()
EMPTY_ATTR: Attr = _EmptyAttr()
EMPTY_TEXT: Text = _EmptyText()
EMPTY_CDATA: Cdata = _EmptyCdata()


def is_empty_attr(attr: Attr) -> bool:
    """Check if ``attr`` is the empty attribute sentinel."""
    return attr is EMPTY_ATTR
