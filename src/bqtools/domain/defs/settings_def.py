"""Global quest settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from bqtools.data.nbt.tags import NbtValue


@dataclass(frozen=True, slots=True)
class QuestSettingsDef:
    """Flat view of the exporter's settings block.

    ``values`` maps each setting name to its tagged value; ``format_version``
    is lifted out for convenience when the export records one.
    """

    format_version: str | None = None
    values: Mapping[str, NbtValue] = field(default_factory=lambda: MappingProxyType({}))
    source: str = ""

    def get(self, name: str, default: object = None) -> object:
        """Return a setting's plain Python value, or ``default`` if absent."""
        value = self.values.get(name)
        if value is None:
            return default
        return value.to_python()

    def get_flag(self, name: str, default: bool = False) -> bool:
        """Return a numeric setting as a boolean (nonzero is True)."""
        value = self.get(name)
        if isinstance(value, (int, float)):
            return value != 0
        return default
