"""Quest line definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from bqtools.domain.defs.item_def import ItemStackDef


@dataclass(frozen=True, slots=True)
class QuestLineEntryDef:
    """Placement of one quest tile on a quest line."""

    quest_id: int
    x: int
    y: int
    size_x: int = 24
    size_y: int = 24
    source: str = ""


@dataclass(frozen=True, slots=True)
class QuestLineDef:
    line_id: int
    name: str
    description: str
    entries: Tuple[QuestLineEntryDef, ...]
    visibility: str = "NORMAL"
    icon: ItemStackDef | None = None
    source: str = ""

    @property
    def quest_ids(self) -> Tuple[int, ...]:
        return tuple(entry.quest_id for entry in self.entries)
