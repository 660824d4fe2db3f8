"""The validated, read-only quest database."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from bqtools.domain.defs import QuestDef, QuestLineDef, QuestSettingsDef


@dataclass(frozen=True, slots=True)
class QuestDatabase:
    """Quests, quest lines and settings from one export.

    Every prerequisite of every quest and every quest referenced by a quest
    line entry is a key of ``quests``. Instances are only built by
    ``resolve_database``.
    """

    quests: Mapping[int, QuestDef]
    quest_lines: Mapping[int, QuestLineDef]
    settings: QuestSettingsDef
    quest_line_order: Tuple[int, ...]

    def get_quest(self, quest_id: int) -> QuestDef:
        try:
            return self.quests[quest_id]
        except KeyError as exc:
            raise KeyError(quest_id) from exc

    def get_quest_line(self, line_id: int) -> QuestLineDef:
        try:
            return self.quest_lines[line_id]
        except KeyError as exc:
            raise KeyError(line_id) from exc

    def all_quests(self) -> list[QuestDef]:
        """Return all quests sorted deterministically by id."""
        return [self.quests[key] for key in sorted(self.quests)]

    def all_quest_lines(self) -> list[QuestLineDef]:
        """Return quest lines in ``quest_line_order``."""
        return [self.quest_lines[key] for key in self.quest_line_order]

    def dependents_of(self, quest_id: int) -> list[QuestDef]:
        """Return quests listing ``quest_id`` as a prerequisite, sorted by id."""
        return [quest for quest in self.all_quests() if quest_id in quest.prerequisites]
