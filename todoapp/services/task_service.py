"""
Task Service - input rules in front of the task store.

Empty text and unparsable ids are not errors here: both are treated as a
request to do nothing, and callers redirect as usual.
"""

from typing import Optional
import logging
import re

from todoapp.domain.models import Task, TaskListing
from todoapp.infra.repository import TaskStore

logger = logging.getLogger(__name__)

# Plain ASCII digits with an optional sign, stored as a signed 64-bit integer
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -2**63
_ID_MAX = 2**63 - 1


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    async def list_tasks(self) -> TaskListing:
        return await self.store.list_tasks()

    async def add(self, text: str) -> Optional[Task]:
        """
        Add a task.

        Returns the stored task, or None when text is empty and nothing
        was written. Raises StorageError if the insert fails.
        """
        if text == "":
            return None
        return await self.store.add_task(text)

    @staticmethod
    def parse_id(raw: str) -> Optional[int]:
        """Parse a path segment as a task id, None if it is not an integer"""
        if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
            return None
        task_id = int(raw)
        if not _ID_MIN <= task_id <= _ID_MAX:
            return None
        return task_id

    async def mark_done(self, raw_id: str) -> bool:
        """Mark a task done; False if raw_id was ignored"""
        task_id = self.parse_id(raw_id)
        if task_id is None:
            logger.debug("Ignoring done request for id %r", raw_id)
            return False
        await self.store.mark_done(task_id)
        return True

    async def delete(self, raw_id: str) -> bool:
        """Delete a task; False if raw_id was ignored"""
        task_id = self.parse_id(raw_id)
        if task_id is None:
            logger.debug("Ignoring delete request for id %r", raw_id)
            return False
        await self.store.delete_task(task_id)
        return True
