"""Repository for tasks."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import delete, select

from ..database.connection import DatabaseManager
from ..models.task import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskFieldOptions:
    """Which optional task attributes are in use, and their defaults.

    A disabled attribute is always stored as ``None``. An enabled attribute
    that the caller leaves out receives its default.
    """

    enable_priority: bool = True
    enable_icon: bool = True
    default_priority: int = 0
    default_icon: Optional[int] = None

    @classmethod
    def from_settings(cls, settings) -> "TaskFieldOptions":
        return cls(
            enable_priority=settings.task_enable_priority,
            enable_icon=settings.task_enable_icon,
            default_priority=settings.task_default_priority,
            default_icon=settings.task_default_icon,
        )

    def resolve_priority(self, priority: Optional[int]) -> Optional[int]:
        if not self.enable_priority:
            return None
        return self.default_priority if priority is None else priority

    def resolve_icon(self, icon_ref: Optional[int]) -> Optional[int]:
        if not self.enable_icon:
            return None
        return self.default_icon if icon_ref is None else icon_ref


class TaskRepository:
    """List, insert and delete tasks."""

    def __init__(self, db: DatabaseManager, options: Optional[TaskFieldOptions] = None):
        self._db = db
        self.options = options or TaskFieldOptions()

    async def get_all_tasks(self) -> List[Task]:
        async with self._db.session() as session:
            result = await session.execute(select(Task).order_by(Task.id.asc()))
            return list(result.scalars().all())

    async def insert_task(self, task: Task) -> Task:
        async with self._db.session() as session:
            session.add(task)
            await session.commit()
            await session.refresh(task)
        logger.debug("Task added id=%s title=%s", task.id, task.title)
        return task

    async def add_new_task(
        self,
        title: str,
        description: str,
        priority: Optional[int] = None,
        icon_ref: Optional[int] = None,
    ) -> Task:
        """Build a task from its fields, applying the optional-field options."""
        task = Task(
            title=title,
            description=description,
            priority=self.options.resolve_priority(priority),
            icon_ref=self.options.resolve_icon(icon_ref),
        )
        return await self.insert_task(task)

    async def remove_task(self, task_id: int) -> bool:
        """Delete a task by id. Returns False when no such task exists."""
        async with self._db.session() as session:
            result = await session.execute(delete(Task).where(Task.id == task_id))
            await session.commit()
        removed = (result.rowcount or 0) > 0
        if removed:
            logger.debug("Task removed id=%s", task_id)
        return removed
