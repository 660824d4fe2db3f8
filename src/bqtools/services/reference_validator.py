"""Cross-reference validation and assembly of the quest database."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable

from bqtools.data.errors import (
    DanglingReferenceError,
    DuplicateQuestIdError,
    DuplicateQuestLineIdError,
)
from bqtools.domain.database import QuestDatabase
from bqtools.domain.defs import QuestDef, QuestLineDef, QuestSettingsDef


def resolve_database(
    quests: Iterable[QuestDef],
    quest_lines: Iterable[QuestLineDef],
    settings: QuestSettingsDef,
) -> QuestDatabase:
    """Check every identifier and build the database, raising on the first problem.

    Checks run in a fixed order: duplicate quest ids, duplicate quest line
    ids, quest prerequisites (ascending quest id, then list order), then
    quest line entries (ascending line id, then entry order). Prerequisite
    cycles are accepted.
    """
    quest_map = _index_quests(quests)
    line_map = _index_quest_lines(quest_lines)

    for quest_id in sorted(quest_map):
        quest = quest_map[quest_id]
        for prerequisite_id in quest.prerequisites:
            if prerequisite_id not in quest_map:
                raise DanglingReferenceError("quest", quest_id, prerequisite_id, quest.source)

    for line_id in sorted(line_map):
        quest_line = line_map[line_id]
        for entry in quest_line.entries:
            if entry.quest_id not in quest_map:
                source = entry.source or quest_line.source
                raise DanglingReferenceError("quest line", line_id, entry.quest_id, source)

    return QuestDatabase(
        quests=MappingProxyType({key: quest_map[key] for key in sorted(quest_map)}),
        quest_lines=MappingProxyType({key: line_map[key] for key in sorted(line_map)}),
        settings=settings,
        quest_line_order=tuple(sorted(line_map)),
    )


def _index_quests(quests: Iterable[QuestDef]) -> Dict[int, QuestDef]:
    indexed: Dict[int, QuestDef] = {}
    for quest in quests:
        existing = indexed.get(quest.quest_id)
        if existing is not None:
            raise DuplicateQuestIdError(quest.quest_id, existing.source, quest.source)
        indexed[quest.quest_id] = quest
    return indexed


def _index_quest_lines(quest_lines: Iterable[QuestLineDef]) -> Dict[int, QuestLineDef]:
    indexed: Dict[int, QuestLineDef] = {}
    for quest_line in quest_lines:
        existing = indexed.get(quest_line.line_id)
        if existing is not None:
            raise DuplicateQuestLineIdError(quest_line.line_id, existing.source, quest_line.source)
        indexed[quest_line.line_id] = quest_line
    return indexed
