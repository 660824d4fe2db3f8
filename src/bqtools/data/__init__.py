"""Data layer utilities for reading quest exports."""

from .errors import (
    DanglingReferenceError,
    DataLoadError,
    DataReferenceError,
    DataValidationError,
    DuplicateQuestIdError,
    DuplicateQuestLineIdError,
    MalformedKeyError,
    MissingFieldError,
    ParseError,
    QuestDataError,
    TypeMismatchError,
    UnknownTypeCodeError,
)
from .paths import ExportLayout, get_export_path

__all__ = [
    "DanglingReferenceError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "DuplicateQuestIdError",
    "DuplicateQuestLineIdError",
    "ExportLayout",
    "MalformedKeyError",
    "MissingFieldError",
    "ParseError",
    "QuestDataError",
    "TypeMismatchError",
    "UnknownTypeCodeError",
    "get_export_path",
]
