"""Rewrites numeric-keyed pseudo-arrays as ordered sequences."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from bqtools.data.nbt.tags import ARRAY_TAGS, NbtValue, TagType, is_index_name


def coerce_arrays(node: NbtValue) -> NbtValue:
    """Return ``node`` with every pseudo-array below it turned into a list.

    Children are coerced before their parent is classified. A non-empty
    compound whose names are all decimal indices becomes a list ordered by
    numeric index; gaps are allowed and the indices themselves are dropped.
    An empty object declared as a list becomes an empty list. Applying the
    function twice gives the same result as applying it once.

    The result is read-only all the way down: lists become tuples and
    compounds become ``MappingProxyType`` views.
    """
    value = node.value
    if node.tag in ARRAY_TAGS:
        return node
    if isinstance(value, (list, tuple)):
        return NbtValue(node.tag, tuple(coerce_arrays(child) for child in value))
    if not isinstance(value, Mapping):
        return node

    children = {name: coerce_arrays(child) for name, child in value.items()}
    if not children:
        return NbtValue(node.tag, () if node.tag is TagType.LIST else MappingProxyType({}))
    if all(is_index_name(name) for name in children):
        ordered = sorted(children.items(), key=lambda item: int(item[0]))
        return NbtValue(node.tag, tuple(child for _, child in ordered))
    return NbtValue(node.tag, MappingProxyType(children))
