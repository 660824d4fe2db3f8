"""Quest identifier helpers.

The exporter stores 64-bit identifiers as two signed 32-bit halves
(``questIDHigh``/``questIDLow``). Identifiers are kept as plain unsigned
ints throughout the library; these helpers convert between the forms.
"""
from __future__ import annotations

_MASK_32 = 0xFFFF_FFFF


def quest_id_from_parts(high: int, low: int) -> int:
    """Combine signed high/low halves into one unsigned 64-bit identifier."""
    return ((high & _MASK_32) << 32) | (low & _MASK_32)


def high_part(quest_id: int) -> int:
    """Return the signed high half of an identifier."""
    return _to_signed_32((quest_id >> 32) & _MASK_32)


def low_part(quest_id: int) -> int:
    """Return the signed low half of an identifier."""
    return _to_signed_32(quest_id & _MASK_32)


def _to_signed_32(value: int) -> int:
    return value - (1 << 32) if value & 0x8000_0000 else value
