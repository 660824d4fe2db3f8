"""Helpers for locating an export and naming its files."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

EXPORT_DIR_ENV = "BQTOOLS_EXPORT_DIR"


@dataclass(frozen=True, slots=True)
class ExportLayout:
    """File and directory names of a DefaultQuests export."""

    settings_files: tuple[str, ...] = ("QuestSettings.json", "QuestSettings")
    quests_dir: str = "Quests"
    quest_lines_dir: str = "QuestLines"
    quest_line_file: str = "QuestLine.json"
    bundle_file: str = "DefaultQuests.json"
    suffix: str = ".json"


DEFAULT_LAYOUT = ExportLayout()


def get_default_export_path() -> Path:
    """Return the export location used by a game instance run from the working directory."""
    return Path.cwd() / "config" / "betterquesting" / "DefaultQuests"


def get_export_path(base_path: Path | str | None = None) -> Path:
    """Return the export directory: explicit path, then environment, then default."""
    if base_path is not None:
        return Path(base_path)
    env_path = os.environ.get(EXPORT_DIR_ENV)
    if env_path:
        return Path(env_path)
    return get_default_export_path()
