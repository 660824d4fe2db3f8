"""Mapper for the global quest settings document."""
from __future__ import annotations

from bqtools.data.mappers.base import Fields, SchemaMapper
from bqtools.data.nbt.tags import NbtValue, TagType
from bqtools.domain.defs import QuestSettingsDef

_VERSION_FIELDS = ("version", "format")


class SettingsMapper(SchemaMapper[QuestSettingsDef]):
    """Flattens the settings document into a single name to value mapping.

    Top-level keys come first; keys of the ``properties`` block (usually
    ``properties.betterquesting``) are merged over them.
    """

    schema = "quest settings"

    def _build(self, fields: Fields) -> QuestSettingsDef:
        base = self._prefix
        values = {name: value for name, value in fields.items() if name != "properties"}
        if "properties" in fields:
            props, _ = self._properties(fields, base)
            values.update(props)

        format_version = None
        for name in _VERSION_FIELDS:
            value = values.get(name)
            if value is not None and value.tag is TagType.STRING:
                format_version = value.value
                break
        return QuestSettingsDef(
            format_version=format_version,
            values=self._freeze(values),
            source=self._source,
        )


def map_settings(root: NbtValue, source: str) -> QuestSettingsDef:
    """Map a normalized settings document."""
    return SettingsMapper(source).map(root)
