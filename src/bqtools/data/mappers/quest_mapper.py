"""Mapper for quest documents."""
from __future__ import annotations

from typing import List, Mapping

from bqtools.data.mappers.base import Fields, SchemaMapper
from bqtools.data.nbt.tags import INTEGER_TAGS, NbtValue, TagType
from bqtools.domain.defs import QuestDef, QuestRewardDef, QuestTaskDef

_ANY_OF_LOGIC = {"OR", "ONE_OF", "ANY", "XOR"}
_ID_ARRAY_TAGS = (TagType.INT_ARRAY, TagType.LONG_ARRAY)


class QuestMapper(SchemaMapper[QuestDef]):
    """Maps one quest compound to a QuestDef."""

    schema = "quest"

    def _build(self, fields: Fields) -> QuestDef:
        base = self._prefix
        quest_id = self._read_id(fields, "questID", ("questID",), base)
        self._entity_id = quest_id

        props, props_path = self._properties(fields, base)
        quest_logic = self._optional_str(props, "questLogic", props_path, "AND")

        all_prereqs = self._read_quest_refs(fields, "preRequisites", base)
        optional = self._read_quest_refs(fields, "optionalPreRequisites", base)
        if optional:
            optional_set = set(optional)
            required = [quest for quest in all_prereqs if quest not in optional_set]
        elif quest_logic.upper() in _ANY_OF_LOGIC:
            required, optional = [], all_prereqs
        else:
            required = all_prereqs

        tasks = tuple(
            QuestTaskDef(index=index, type_id=type_id, payload=payload)
            for index, type_id, payload in self._read_entries(fields, "tasks", "taskID", base)
        )
        rewards = tuple(
            QuestRewardDef(index=index, type_id=type_id, payload=payload)
            for index, type_id, payload in self._read_entries(fields, "rewards", "rewardID", base)
        )

        return QuestDef(
            quest_id=quest_id,
            name=self._optional_str(props, "name", props_path, ""),
            description=self._optional_str(props, "desc", props_path, ""),
            tasks=tasks,
            rewards=rewards,
            prerequisites=_unique(all_prereqs + optional),
            required_prerequisites=_unique(required),
            optional_prerequisites=_unique(optional),
            is_main=self._optional_flag(props, "isMain", props_path, False),
            is_silent=self._optional_flag(props, "isSilent", props_path, False),
            auto_claim=self._optional_flag(props, "autoClaim", props_path, False),
            global_share=self._optional_flag(props, "globalShare", props_path, False),
            locked_progress=self._optional_flag(props, "lockedProgress", props_path, False),
            simultaneous=self._optional_flag(props, "simultaneous", props_path, False),
            party_single_reward=self._optional_flag(props, "partySingleReward", props_path, False),
            repeat_relative=self._optional_flag(props, "repeat_relative", props_path, True),
            repeat_time=self._optional_int(props, "repeatTime", props_path, -1),
            visibility=self._optional_str(props, "visibility", props_path, "NORMAL"),
            quest_logic=quest_logic,
            task_logic=self._optional_str(props, "taskLogic", props_path, "AND"),
            icon=self._read_icon(props, props_path),
            source=self._source,
        )

    def _read_quest_refs(self, fields: Fields, name: str, base: str) -> List[int]:
        value = fields.get(name)
        if value is None:
            return []
        path = self._path(base, name)
        if value.tag in _ID_ARRAY_TAGS:
            return list(value.value)
        refs: List[int] = []
        for index, element in enumerate(self._require_sequence(value, path)):
            element_path = f"{path}[{index}]"
            if element.tag in INTEGER_TAGS:
                refs.append(element.value)
            elif element.is_compound:
                refs.append(self._read_id(element.value, "questID", ("questID", "id"), element_path))
            else:
                raise self._mismatch(element_path, "Int/Compound", element)
        return refs

    def _read_entries(
        self, fields: Fields, name: str, id_field: str, base: str
    ) -> List[tuple[int, str, Mapping[str, NbtValue]]]:
        value = fields.get(name)
        if value is None:
            return []
        path = self._path(base, name)
        entries = []
        for index, element in enumerate(self._require_sequence(value, path)):
            element_path = f"{path}[{index}]"
            payload = self._require_compound(element, element_path)
            type_id = self._optional_str(payload, id_field, element_path, "")
            body = {key: child for key, child in payload.items() if key != id_field}
            entries.append((index, type_id, self._freeze(body)))
        return entries


def map_quest(root: NbtValue, source: str) -> QuestDef:
    """Map a normalized quest document to a QuestDef."""
    return QuestMapper(source).map(root)


def _unique(values: List[int]) -> tuple[int, ...]:
    return tuple(dict.fromkeys(values))
