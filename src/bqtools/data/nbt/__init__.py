"""Decoding of the exporter's NBT-derived JSON documents."""

from .coercer import coerce_arrays
from .decoder import decode_document
from .normalizer import normalize_document, split_key
from .tags import NbtValue, RawNode, TagType, TypedKey

__all__ = [
    "NbtValue",
    "RawNode",
    "TagType",
    "TypedKey",
    "coerce_arrays",
    "decode_document",
    "normalize_document",
    "split_key",
]
