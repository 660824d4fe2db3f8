"""Mappers for quest line documents and their entries."""
from __future__ import annotations

from typing import Iterable, List

from bqtools.data.mappers.base import Fields, SchemaMapper
from bqtools.data.nbt.tags import NbtValue
from bqtools.domain.defs import QuestLineDef, QuestLineEntryDef

_DEFAULT_TILE_SIZE = 24


class QuestLineEntryMapper(SchemaMapper[QuestLineEntryDef]):
    """Maps one quest tile placement."""

    schema = "quest line entry"

    def _build(self, fields: Fields) -> QuestLineEntryDef:
        base = self._prefix
        quest_id = self._read_id(fields, "questID", ("questID", "id"), base)
        self._entity_id = quest_id
        x = self._require_int(fields, "x", base)
        y = self._require_int(fields, "y", base)
        size = self._optional_int(fields, "size", base, _DEFAULT_TILE_SIZE)
        return QuestLineEntryDef(
            quest_id=quest_id,
            x=x,
            y=y,
            size_x=self._optional_int(fields, "sizeX", base, size),
            size_y=self._optional_int(fields, "sizeY", base, size),
            source=self._source,
        )


class QuestLineMapper(SchemaMapper[QuestLineDef]):
    """Maps a quest line header plus its inline or separately supplied entries."""

    schema = "quest line"

    def __init__(
        self,
        source: str,
        prefix: str = "",
        entries: Iterable[QuestLineEntryDef] = (),
    ) -> None:
        super().__init__(source, prefix)
        self._extra_entries = tuple(entries)

    def _build(self, fields: Fields) -> QuestLineDef:
        base = self._prefix
        line_id = self._read_id(fields, "questLineID", ("lineID",), base)
        self._entity_id = line_id
        props, props_path = self._properties(fields, base)
        entries = self._read_inline_entries(fields, base)
        entries.extend(self._extra_entries)
        return QuestLineDef(
            line_id=line_id,
            name=self._optional_str(props, "name", props_path, ""),
            description=self._optional_str(props, "desc", props_path, ""),
            entries=tuple(entries),
            visibility=self._optional_str(props, "visibility", props_path, "NORMAL"),
            icon=self._read_icon(props, props_path),
            source=self._source,
        )

    def _read_inline_entries(self, fields: Fields, base: str) -> List[QuestLineEntryDef]:
        value = fields.get("quests")
        if value is None:
            return []
        path = self._path(base, "quests")
        return [
            QuestLineEntryMapper(self._source, f"{path}[{index}]").map(element)
            for index, element in enumerate(self._require_sequence(value, path))
        ]


def map_quest_line(
    root: NbtValue, source: str, entries: Iterable[QuestLineEntryDef] = ()
) -> QuestLineDef:
    """Map a normalized quest line document.

    ``entries`` holds placements read from separate entry files; they follow
    any entries stored inline under ``quests``.
    """
    return QuestLineMapper(source, entries=entries).map(root)


def map_quest_line_entry(root: NbtValue, source: str) -> QuestLineEntryDef:
    """Map a normalized quest line entry document."""
    return QuestLineEntryMapper(source).map(root)
