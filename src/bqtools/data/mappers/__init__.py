"""Schema mappers from normalized tag trees to domain definitions."""

from .bundle_mapper import MappedBundle, map_bundle
from .quest_line_mapper import map_quest_line, map_quest_line_entry
from .quest_mapper import map_quest
from .settings_mapper import map_settings

__all__ = [
    "MappedBundle",
    "map_bundle",
    "map_quest",
    "map_quest_line",
    "map_quest_line_entry",
    "map_settings",
]
