"""Domain layer - Pure business entities"""

from .models import Task, TaskListing, StorageError

__all__ = ["Task", "TaskListing", "StorageError"]
