"""Classifies the files of an export directory by role."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from bqtools.data.errors import DataLoadError
from bqtools.data.paths import DEFAULT_LAYOUT, ExportLayout

logger = logging.getLogger(__name__)


class FileRole(Enum):
    SETTINGS = "settings"
    QUEST = "quest"
    QUEST_LINE = "quest_line"
    QUEST_LINE_ENTRY = "quest_line_entry"
    BUNDLE = "bundle"


@dataclass(frozen=True, slots=True)
class ExportFile:
    """One export file. ``group`` names the quest line directory of line files."""

    path: Path
    role: FileRole
    group: str | None = None


def scan_export(root: Path, layout: ExportLayout | None = None) -> List[ExportFile]:
    """Return the export's files in a deterministic order.

    Order: settings, bundle, quests (sorted by path), then each quest line
    directory (sorted by name) with its header before its entry files.
    """
    layout = layout or DEFAULT_LAYOUT
    if not root.is_dir():
        raise DataLoadError(f"Export directory not found: {root}")

    files: List[ExportFile] = []
    for name in layout.settings_files:
        settings_path = root / name
        if settings_path.is_file():
            files.append(ExportFile(settings_path, FileRole.SETTINGS))
            break

    bundle_path = root / layout.bundle_file
    if bundle_path.is_file():
        files.append(ExportFile(bundle_path, FileRole.BUNDLE))

    quests_dir = root / layout.quests_dir
    if quests_dir.is_dir():
        for quest_path in sorted(quests_dir.rglob(f"*{layout.suffix}")):
            if quest_path.is_file():
                files.append(ExportFile(quest_path, FileRole.QUEST))

    lines_dir = root / layout.quest_lines_dir
    if lines_dir.is_dir():
        for line_dir in sorted(path for path in lines_dir.iterdir() if path.is_dir()):
            files.extend(_scan_quest_line_dir(line_dir, layout))

    logger.debug("Scanned %s: %d files", root, len(files))
    return files


def _scan_quest_line_dir(line_dir: Path, layout: ExportLayout) -> List[ExportFile]:
    header = line_dir / layout.quest_line_file
    entries = [
        path
        for path in sorted(line_dir.glob(f"*{layout.suffix}"))
        if path.is_file() and path.name != layout.quest_line_file
    ]
    if not header.is_file():
        if entries:
            raise DataLoadError(
                f"Quest line directory {line_dir} has entry files but no {layout.quest_line_file}"
            )
        return []
    group = line_dir.name
    files = [ExportFile(header, FileRole.QUEST_LINE, group)]
    files.extend(ExportFile(path, FileRole.QUEST_LINE_ENTRY, group) for path in entries)
    return files
