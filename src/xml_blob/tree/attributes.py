"""Attribute collections and the merge algorithm.

An :class:`AttrSet` holds at most one :class:`~xml_blob.tree.blobs.Attr` per
key. Merging folds overlays onto a base from left to right::

    result = base
    for overlay in overlays:
        result = (result - keys(overlay)) | overlay

so every key ends up with the value of its right-most occurrence, while keys
that appear in only one input are kept as they are.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Union

from xml_blob.printing.printer import Printer
from xml_blob.shared.config import AttributeOrder
from xml_blob.shared.errors import InvalidArgumentError
from xml_blob.tree.blobs import Attr, Attrs, KeyValueAttr, is_empty_attr

Overlay = Union[Attrs, Attr]


def collect_unique(members: Iterable[Attr]) -> Dict[str, Attr]:
    """Index attributes by key, the last occurrence of a key winning.

    A replaced key keeps the position where it was first seen.
    """
    result: Dict[str, Attr] = {}
    for member in members:
        result[member.key] = member
    return result


def merge_members(
    base: Mapping[str, Attr],
    overlays: Iterable[Iterable[Attr]]
) -> Dict[str, Attr]:
    """Fold attribute overlays onto ``base``.

    Args:
        base: Starting attributes indexed by key
        overlays: Attribute groups applied in order

    Returns:
        New mapping with one attribute per distinct key across all inputs
    """
    result = dict(base)
    for overlay in overlays:
        # Dropping shared keys then adding the overlay is a per-key overwrite
        result.update(collect_unique(overlay))
    return result


def ordered_members(members: Mapping[str, Attr], order: AttributeOrder) -> List[Attr]:
    """List attributes in the order a printer should write them."""
    if order is AttributeOrder.SORTED:
        return [members[key] for key in sorted(members)]
    return list(members.values())


def pairs_to_attrs(pairs: Sequence[str]) -> List[Attr]:
    """Turn a flat ``key, value, key, value`` sequence into attributes.

    Raises:
        InvalidArgumentError: If the sequence has an odd length
    """
    if len(pairs) % 2 != 0:
        raise InvalidArgumentError("attribute pairs must be even", argument="pairs")
    return [KeyValueAttr(pairs[i], pairs[i + 1]) for i in range(0, len(pairs), 2)]


class AttrSet(Attrs):
    """Immutable, key-deduplicated attribute collection."""

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[Attr] = ()) -> None:
        """Build the collection; a repeated key keeps its last attribute."""
        self._members: Mapping[str, Attr] = MappingProxyType(collect_unique(members))

    @classmethod
    def _from_mapping(cls, members: Mapping[str, Attr]) -> "AttrSet":
        attr_set = cls.__new__(cls)
        attr_set._members = MappingProxyType(dict(members))
        return attr_set

    @property
    def members(self) -> Mapping[str, Attr]:
        return self._members

    def merge(self, *overlays: Overlay) -> "AttrSet":
        """Return a new collection with ``overlays`` folded on top.

        Each overlay is either a whole :class:`Attrs` or a single
        :class:`Attr`; later overlays win on shared keys.
        """
        groups = [
            overlay.members.values() if isinstance(overlay, Attrs) else (overlay,)
            for overlay in overlays
        ]
        return AttrSet._from_mapping(merge_members(self._members, groups))

    def append_to(self, printer: Printer) -> None:
        for member in ordered_members(self._members, printer.config.attribute_order):
            # The empty sentinel contributes no separator
            if not is_empty_attr(member):
                printer.append_char(" ")
            member.append_to(printer)

    def _identity(self) -> frozenset:
        return frozenset(
            (key, member.value, type(member)) for key, member in self._members.items()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrSet):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={member.value!r}" for key, member in self._members.items())
        return f"AttrSet({inner})"


class _EmptyAttrs(AttrSet):
    __slots__ = ()

    def __repr__(self) -> str:
        return "EmptyAttrs()"


EMPTY_ATTRS: Attrs = _EmptyAttrs()
