"""Tag model shared by the normalizer, coercer and schema mappers."""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, TypeAlias, Union

RawNode: TypeAlias = Union[Dict[str, "RawNode"], List["RawNode"], str, int, float, bool]
"""A decoded document node before any key interpretation."""

_INDEX_NAME = re.compile(r"0|[1-9][0-9]*")


class TagType(IntEnum):
    """Declared value types, numbered by their NBT tag ids."""

    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12

    @property
    def label(self) -> str:
        return self.name.replace("_", "").title().replace("array", "Array")


INTEGER_TAGS = frozenset({TagType.BYTE, TagType.SHORT, TagType.INT, TagType.LONG})
NUMERIC_TAGS = INTEGER_TAGS | {TagType.FLOAT, TagType.DOUBLE}
ARRAY_TAGS = frozenset({TagType.BYTE_ARRAY, TagType.INT_ARRAY, TagType.LONG_ARRAY})
SEQUENCE_TAGS = frozenset({TagType.LIST, TagType.COMPOUND}) | ARRAY_TAGS


@dataclass(frozen=True, slots=True)
class TypedKey:
    name: str
    tag: TagType


@dataclass(frozen=True, slots=True)
class NbtValue:
    """A value carrying the type its key declared.

    ``value`` is a mapping of name to NbtValue for compounds, a sequence of
    NbtValue for lists and coerced pseudo-arrays, a tuple of ints for the
    array tags and a plain scalar otherwise. After coercion every container
    is read-only: compounds are ``MappingProxyType`` and lists are tuples.
    """

    tag: TagType
    value: Any

    @property
    def is_compound(self) -> bool:
        return isinstance(self.value, Mapping)

    @property
    def is_sequence(self) -> bool:
        return isinstance(self.value, (list, tuple))

    def to_python(self) -> object:
        """Return the value with all tags stripped."""
        if isinstance(self.value, Mapping):
            return {name: child.to_python() for name, child in self.value.items()}
        if self.tag in ARRAY_TAGS:
            return list(self.value)
        if isinstance(self.value, (list, tuple)):
            return [child.to_python() for child in self.value]
        return self.value


def is_index_name(name: str) -> bool:
    """Return True for canonical non-negative decimal integers ("0", "17", not "01")."""
    return _INDEX_NAME.fullmatch(name) is not None


def describe_shape(node: object) -> str:
    """Name the runtime shape of a raw or normalized value for error messages."""
    if isinstance(node, NbtValue):
        node = node.value
    if node is None:
        return "null"
    if isinstance(node, Mapping):
        return "object"
    if isinstance(node, (list, tuple)):
        return "array"
    if isinstance(node, bool):
        return "boolean"
    if isinstance(node, int):
        return "integer"
    if isinstance(node, float):
        return "float"
    if isinstance(node, str):
        return "string"
    return type(node).__name__
