"""Key suffix decoding and declared-type checks."""
from __future__ import annotations

import re
from typing import Dict

from bqtools.data.errors import MalformedKeyError, TypeMismatchError, UnknownTypeCodeError
from bqtools.data.nbt.tags import (
    ARRAY_TAGS,
    INTEGER_TAGS,
    NbtValue,
    RawNode,
    TagType,
    TypedKey,
    describe_shape,
    is_index_name,
)

_TYPE_CODE = re.compile(r"[0-9]+")


def split_key(raw_key: str, source: str, path: str = "") -> TypedKey:
    """Split ``name:typeCode`` at its last colon into a TypedKey."""
    name, sep, code_text = raw_key.rpartition(":")
    if not sep:
        raise MalformedKeyError(source, path, raw_key, "missing ':typeCode' suffix")
    if not name:
        raise MalformedKeyError(source, path, raw_key, "empty name")
    if _TYPE_CODE.fullmatch(code_text) is None:
        raise MalformedKeyError(source, path, raw_key, f"type suffix '{code_text}' is not a number")
    type_code = int(code_text)
    try:
        tag = TagType(type_code)
    except ValueError as exc:
        raise UnknownTypeCodeError(source, path, raw_key, type_code) from exc
    return TypedKey(name=name, tag=tag)


def normalize_document(raw: Dict[str, RawNode], source: str) -> NbtValue:
    """Strip key suffixes across a decoded document, returning a tagged compound root."""
    return NbtValue(TagType.COMPOUND, _normalize_compound(raw, source, ""))


def _normalize_compound(raw: Dict[str, RawNode], source: str, path: str) -> Dict[str, NbtValue]:
    result: Dict[str, NbtValue] = {}
    for raw_key, raw_value in raw.items():
        key = split_key(raw_key, source, path)
        if key.name in result:
            raise MalformedKeyError(source, path, raw_key, f"duplicate name '{key.name}'")
        child_path = f"{path}.{key.name}" if path else key.name
        result[key.name] = _normalize_value(key.tag, raw_value, source, child_path)
    return result


def _normalize_value(tag: TagType, raw: RawNode, source: str, path: str) -> NbtValue:
    if tag is TagType.COMPOUND:
        if isinstance(raw, dict):
            return NbtValue(tag, _normalize_compound(raw, source, path))
    elif tag is TagType.LIST:
        if isinstance(raw, list):
            return NbtValue(
                tag,
                [_normalize_element(item, source, f"{path}[{index}]") for index, item in enumerate(raw)],
            )
        if isinstance(raw, dict):
            children = _normalize_compound(raw, source, path)
            if all(is_index_name(name) for name in children):
                return NbtValue(tag, children)
    elif tag in ARRAY_TAGS:
        if isinstance(raw, list) and all(_is_int(item) for item in raw):
            return NbtValue(tag, tuple(raw))
    elif tag is TagType.STRING:
        if isinstance(raw, str):
            return NbtValue(tag, raw)
    elif tag is TagType.BYTE:
        # The exporter writes some byte flags as JSON booleans.
        if isinstance(raw, bool):
            return NbtValue(tag, int(raw))
        if _is_int(raw):
            return NbtValue(tag, raw)
    elif tag in INTEGER_TAGS:
        if _is_int(raw):
            return NbtValue(tag, raw)
    elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NbtValue(tag, float(raw))
    raise TypeMismatchError(source, path, tag.label, describe_shape(raw))


def _normalize_element(raw: RawNode, source: str, path: str) -> NbtValue:
    if isinstance(raw, dict):
        tag = TagType.COMPOUND
    elif isinstance(raw, list):
        tag = TagType.LIST
    elif isinstance(raw, str):
        tag = TagType.STRING
    elif isinstance(raw, bool):
        tag = TagType.BYTE
    elif isinstance(raw, int):
        tag = TagType.INT
    elif isinstance(raw, float):
        tag = TagType.DOUBLE
    else:
        raise TypeMismatchError(source, path, "List element", describe_shape(raw))
    return _normalize_value(tag, raw, source, path)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
