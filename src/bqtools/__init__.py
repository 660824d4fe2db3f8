"""Reader for BetterQuesting DefaultQuests exports."""
from __future__ import annotations

import logging

from .data.errors import QuestDataError
from .domain.database import QuestDatabase
from .services.database_loader import load_quest_database, load_quest_file

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = ["QuestDataError", "QuestDatabase", "load_quest_database", "load_quest_file"]
