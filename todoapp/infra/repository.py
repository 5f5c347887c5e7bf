"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from the HTTP layer. Makes it easy to:
- Switch database engines (SQLite, MySQL, SQL Server) behind one interface
- Swap in a fake store for testing failure paths
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from pydantic import ValidationError
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todoapp.domain.models import Task, TaskListing, StorageError
from todoapp.infra.db import TaskModel, DatabaseEngine

logger = logging.getLogger(__name__)


class TaskStore(ABC):
    """
    Abstract interface for task persistence.

    Reads never raise: a failed listing comes back as a TaskListing with
    its error set. Writes raise StorageError.
    """

    @abstractmethod
    async def list_tasks(self) -> TaskListing:
        ...

    @abstractmethod
    async def add_task(self, text: str) -> Task:
        ...

    @abstractmethod
    async def mark_done(self, task_id: int) -> None:
        ...

    @abstractmethod
    async def delete_task(self, task_id: int) -> None:
        ...


class TaskRepository(TaskStore):
    """
    Handles all Task-related database operations.

    Converts between domain models (Pydantic) and ORM models (SQLAlchemy).
    """

    def __init__(self, db: DatabaseEngine, session: Optional[AsyncSession] = None):
        self.db = db
        self.session = session

    async def _get_session(self) -> AsyncSession:
        """Get session - either injected or create new one"""
        if self.session:
            return self.session
        return self.db.get_session()

    async def list_tasks(self) -> TaskListing:
        """Get all tasks in id order"""
        try:
            session = await self._get_session()
            async with session:
                result = await session.execute(select(TaskModel).order_by(TaskModel.id))
                task_models = result.scalars().all()
                return TaskListing(tasks=self._to_tasks(task_models))
        except SQLAlchemyError as e:
            logger.exception("Error fetching tasks")
            return TaskListing(tasks=[], error=str(e))

    @staticmethod
    def _to_tasks(task_models) -> List[Task]:
        """Convert rows, skipping any that do not form a valid Task"""
        tasks = []
        for tm in task_models:
            try:
                tasks.append(Task.model_validate(tm))
            except ValidationError as e:
                logger.error("Skipping unreadable task row id=%s: %s", tm.id, e)
        return tasks

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID"""
        session = await self._get_session()
        async with session:
            result = await session.execute(
                select(TaskModel).where(TaskModel.id == task_id)
            )
            task_model = result.scalar_one_or_none()
            return Task.model_validate(task_model) if task_model else None

    async def add_task(self, text: str) -> Task:
        """Insert a new, not yet done task"""
        try:
            session = await self._get_session()
            async with session:
                task_model = TaskModel(text=text, done=False)
                session.add(task_model)
                await session.commit()
                await session.refresh(task_model)
                logger.debug("Task added id=%s", task_model.id)
                return Task.model_validate(task_model)
        except SQLAlchemyError as e:
            logger.error("Error adding task: %s", e)
            raise StorageError(str(e)) from e

    async def mark_done(self, task_id: int) -> None:
        """Set Done on one task; unknown ids are ignored"""
        try:
            session = await self._get_session()
            async with session:
                await session.execute(
                    update(TaskModel)
                    .where(TaskModel.id == task_id)
                    .values(done=True)
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Error marking task %s as done: %s", task_id, e)
            raise StorageError(str(e)) from e

    async def delete_task(self, task_id: int) -> None:
        """Delete one task; unknown ids are ignored"""
        try:
            session = await self._get_session()
            async with session:
                await session.execute(
                    delete(TaskModel).where(TaskModel.id == task_id)
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Error deleting task %s: %s", task_id, e)
            raise StorageError(str(e)) from e
