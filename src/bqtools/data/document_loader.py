"""Low-level helpers turning export files into normalized tag trees."""
from __future__ import annotations

import logging
from pathlib import Path

from bqtools.data.errors import DataLoadError, ParseError
from bqtools.data.nbt import NbtValue, coerce_arrays, decode_document, normalize_document
from bqtools.data.nbt.decoder import NESTING_TOO_DEEP

logger = logging.getLogger(__name__)


def parse_document(data: bytes, source: str) -> NbtValue:
    """Decode, normalize and coerce one document.

    Nesting deeper than the interpreter can walk is reported as a ParseError
    at the start of the document.
    """
    raw = decode_document(data, source)
    try:
        return coerce_arrays(normalize_document(raw, source))
    except RecursionError as exc:
        raise ParseError(source, 0, NESTING_TOO_DEEP) from exc


def load_document(path: Path) -> NbtValue:
    """Read a document from disk and raise DataLoadError if it cannot be read."""
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise DataLoadError(f"Export file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read export file: {path}") from exc
    logger.debug("Parsing %s (%d bytes)", path, len(data))
    return parse_document(data, str(path))
