"""Domain definition exports."""

from .item_def import ItemStackDef
from .quest_def import QuestDef, QuestRewardDef, QuestTaskDef
from .quest_line_def import QuestLineDef, QuestLineEntryDef
from .settings_def import QuestSettingsDef

__all__ = [
    "ItemStackDef",
    "QuestDef",
    "QuestLineDef",
    "QuestLineEntryDef",
    "QuestRewardDef",
    "QuestSettingsDef",
    "QuestTaskDef",
]
