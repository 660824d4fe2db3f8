"""Mapper for the single-file ``DefaultQuests.json`` export."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from bqtools.data.mappers.base import Fields, SchemaMapper
from bqtools.data.mappers.quest_line_mapper import QuestLineMapper
from bqtools.data.mappers.quest_mapper import QuestMapper
from bqtools.data.mappers.settings_mapper import SettingsMapper
from bqtools.data.nbt.tags import NbtValue
from bqtools.domain.defs import QuestDef, QuestLineDef, QuestSettingsDef


@dataclass(frozen=True, slots=True)
class MappedBundle:
    quests: Tuple[QuestDef, ...]
    quest_lines: Tuple[QuestLineDef, ...]
    settings: QuestSettingsDef | None


class BundleMapper(SchemaMapper[MappedBundle]):
    """Splits a whole-database document into quests, quest lines and settings."""

    schema = "quest database"

    def _build(self, fields: Fields) -> MappedBundle:
        quests = tuple(
            QuestMapper(self._source, path).map(element)
            for path, element in self._elements(fields, "questDatabase")
        )
        quest_lines = tuple(
            QuestLineMapper(self._source, path).map(element)
            for path, element in self._elements(fields, "questLines")
        )
        settings = None
        if "questSettings" in fields:
            settings = SettingsMapper(self._source, "questSettings").map(fields["questSettings"])
        return MappedBundle(quests=quests, quest_lines=quest_lines, settings=settings)

    def _elements(self, fields: Fields, name: str) -> list[tuple[str, NbtValue]]:
        value = fields.get(name)
        if value is None:
            return []
        return [
            (f"{name}[{index}]", element)
            for index, element in enumerate(self._require_sequence(value, name))
        ]


def map_bundle(root: NbtValue, source: str) -> MappedBundle:
    """Map a normalized ``DefaultQuests.json`` document."""
    return BundleMapper(source).map(root)
