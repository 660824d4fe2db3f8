"""Entry points for loading a quest export from disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from bqtools.data.document_loader import load_document
from bqtools.data.errors import DataLoadError
from bqtools.data.export_scanner import ExportFile, FileRole, scan_export
from bqtools.data.mappers import (
    map_bundle,
    map_quest,
    map_quest_line,
    map_quest_line_entry,
    map_settings,
)
from bqtools.data.nbt import NbtValue
from bqtools.data.paths import ExportLayout, get_export_path
from bqtools.domain.database import QuestDatabase
from bqtools.domain.defs import QuestDef, QuestLineDef, QuestLineEntryDef, QuestSettingsDef
from bqtools.services.reference_validator import resolve_database

logger = logging.getLogger(__name__)


def load_quest_database(
    path: Path | str | None = None, layout: ExportLayout | None = None
) -> QuestDatabase:
    """Load and validate a whole export directory.

    Returns the validated database or raises the first QuestDataError met;
    nothing is returned on failure.
    """
    root = get_export_path(path)
    return build_quest_database(scan_export(root, layout))


def build_quest_database(files: Iterable[ExportFile]) -> QuestDatabase:
    """Load already classified export files and validate them as one database.

    Files are read in the order given. Quest line entry files are matched to
    their header through ``ExportFile.group``; a group with entries but no
    header raises DataLoadError.
    """
    quests: List[QuestDef] = []
    bundle_lines: List[QuestLineDef] = []
    settings: QuestSettingsDef | None = None
    bundle_settings: QuestSettingsDef | None = None
    line_headers: Dict[str | None, ExportFile] = {}
    line_trees: Dict[str | None, NbtValue] = {}
    line_entries: Dict[str | None, List[QuestLineEntryDef]] = {}
    file_count = 0

    for export_file in files:
        file_count += 1
        tree = load_document(export_file.path)
        source = str(export_file.path)
        if export_file.role is FileRole.SETTINGS:
            settings = map_settings(tree, source)
        elif export_file.role is FileRole.BUNDLE:
            bundle = map_bundle(tree, source)
            quests.extend(bundle.quests)
            bundle_lines.extend(bundle.quest_lines)
            bundle_settings = bundle.settings
        elif export_file.role is FileRole.QUEST:
            quests.append(map_quest(tree, source))
        elif export_file.role is FileRole.QUEST_LINE:
            line_headers[export_file.group] = export_file
            line_trees[export_file.group] = tree
            line_entries.setdefault(export_file.group, [])
        else:
            entry = map_quest_line_entry(tree, source)
            line_entries.setdefault(export_file.group, []).append(entry)

    quest_lines = list(bundle_lines)
    for group, entries in line_entries.items():
        header = line_headers.get(group)
        if header is None:
            raise DataLoadError(f"Quest line entries for group '{group}' have no quest line file")
        entries = sorted(entries, key=lambda entry: entry.quest_id)
        quest_lines.append(map_quest_line(line_trees[group], str(header.path), entries))

    if settings is None:
        settings = bundle_settings or QuestSettingsDef()

    logger.debug(
        "Mapped %d quests and %d quest lines from %d files",
        len(quests),
        len(quest_lines),
        file_count,
    )
    return resolve_database(quests, quest_lines, settings)


def load_quest_file(path: Path | str) -> QuestDef:
    """Load a single quest document without cross-reference checks."""
    quest_path = Path(path)
    return map_quest(load_document(quest_path), str(quest_path))
