"""Domain records produced by loading a quest export."""

from .database import QuestDatabase
from .quest_id import high_part, low_part, quest_id_from_parts

__all__ = ["QuestDatabase", "high_part", "low_part", "quest_id_from_parts"]
