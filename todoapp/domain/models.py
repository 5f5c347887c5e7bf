"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
The same Task object is built from ORM rows, rendered by the template and
asserted on in tests. Pydantic gives one validated shape for all three.
"""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class Task(BaseModel):
    """
    A single to-do item.

    The id is generated by the storage engine, so it is None until saved.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    text: str
    done: bool = False


class TaskListing(BaseModel):
    """
    Result of listing tasks.

    A failed read still yields a listing: tasks is empty and error carries
    the underlying message, so callers can tell "empty" from "broken".
    """
    tasks: List[Task] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StorageError(Exception):
    """Raised when a write against the Tasks table fails."""
