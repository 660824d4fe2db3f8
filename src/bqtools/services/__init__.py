"""Loading and validation services."""

from .database_loader import build_quest_database, load_quest_database, load_quest_file
from .reference_validator import resolve_database

__all__ = ["build_quest_database", "load_quest_database", "load_quest_file", "resolve_database"]
