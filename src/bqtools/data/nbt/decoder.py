"""Raw tree decoding for exported quest documents."""
from __future__ import annotations

import codecs
import json
from typing import Dict

from bqtools.data.errors import ParseError
from bqtools.data.nbt.tags import RawNode

NESTING_TOO_DEEP = "document nested too deeply"


def decode_document(data: bytes, source: str) -> Dict[str, RawNode]:
    """Decode one exported file into its raw object tree.

    Decoding is purely syntactic: keys keep their ``:typeCode`` suffixes and
    numeric-keyed objects stay objects. Errors report a byte offset into
    ``data``.
    """
    bom = len(codecs.BOM_UTF8) if data.startswith(codecs.BOM_UTF8) else 0
    try:
        text = data[bom:].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(source, bom + exc.start, "invalid UTF-8") from exc

    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        offset = bom + len(text[: exc.pos].encode("utf-8"))
        raise ParseError(source, offset, exc.msg) from exc
    except RecursionError as exc:
        raise ParseError(source, bom, NESTING_TOO_DEEP) from exc

    if not isinstance(root, dict):
        leading = len(text) - len(text.lstrip())
        raise ParseError(source, bom + leading, "top-level value must be an object")
    return root
