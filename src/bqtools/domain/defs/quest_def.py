"""Quest definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from bqtools.data.nbt.tags import NbtValue
from bqtools.domain.defs.item_def import ItemStackDef


@dataclass(frozen=True, slots=True)
class QuestTaskDef:
    """One task entry. The payload is kept as exported, without its type id."""

    index: int
    type_id: str
    payload: Mapping[str, NbtValue]


@dataclass(frozen=True, slots=True)
class QuestRewardDef:
    index: int
    type_id: str
    payload: Mapping[str, NbtValue]


@dataclass(frozen=True, slots=True)
class QuestDef:
    quest_id: int
    name: str
    description: str
    tasks: Tuple[QuestTaskDef, ...]
    rewards: Tuple[QuestRewardDef, ...]
    prerequisites: Tuple[int, ...]
    required_prerequisites: Tuple[int, ...]
    optional_prerequisites: Tuple[int, ...]
    is_main: bool = False
    is_silent: bool = False
    auto_claim: bool = False
    global_share: bool = False
    locked_progress: bool = False
    simultaneous: bool = False
    party_single_reward: bool = False
    repeat_relative: bool = True
    repeat_time: int = -1
    visibility: str = "NORMAL"
    quest_logic: str = "AND"
    task_logic: str = "AND"
    icon: ItemStackDef | None = None
    source: str = ""

    @property
    def is_repeatable(self) -> bool:
        return self.repeat_time >= 0
