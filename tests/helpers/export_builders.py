"""Builders for small in-memory and on-disk quest exports."""
from __future__ import annotations

import json
from pathlib import Path

from bqtools.data.document_loader import parse_document
from bqtools.data.nbt import NbtValue


def tree(document: dict, source: str = "memory.json") -> NbtValue:
    return parse_document(json.dumps(document).encode("utf-8"), source)


def quest_doc(quest_id: int, name: str = "", prereqs: list[int] | None = None, **props: object) -> dict:
    properties: dict[str, object] = {"name:8": name or f"Quest {quest_id}"}
    properties.update(props)
    document: dict[str, object] = {
        "questIDHigh:4": 0,
        "questIDLow:4": quest_id,
        "properties:10": {"betterquesting:10": properties},
    }
    if prereqs is not None:
        document["preRequisites:9"] = {
            f"{index}:10": {"questIDHigh:4": 0, "questIDLow:4": prereq}
            for index, prereq in enumerate(prereqs)
        }
    return document


def line_doc(line_id: int, name: str = "") -> dict:
    return {
        "questLineIDHigh:4": 0,
        "questLineIDLow:4": line_id,
        "properties:10": {"betterquesting:10": {"name:8": name or f"Line {line_id}"}},
    }


def entry_doc(quest_id: int, x: int = 0, y: int = 0) -> dict:
    return {"questIDHigh:4": 0, "questIDLow:4": quest_id, "x:3": x, "y:3": y}


def write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
