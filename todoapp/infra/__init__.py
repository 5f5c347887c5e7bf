"""Infrastructure layer - Configuration, database and persistence"""

from .config import Settings, get_settings
from .db import Base, DatabaseEngine, StartupError, TaskModel, open_database
from .repository import TaskRepository, TaskStore

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "DatabaseEngine",
    "StartupError",
    "TaskModel",
    "open_database",
    "TaskRepository",
    "TaskStore",
]
