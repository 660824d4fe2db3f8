"""Item stack definition used for quest and quest line icons."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ItemStackDef:
    item_id: str
    damage: int = 0
    count: int = 1
    oredict: str = ""
