"""Task endpoints."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from ..observability import metrics
from ..repositories.tasks import TaskRepository
from .deps import get_task_repository

router = APIRouter()


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    priority: Optional[int] = None
    icon_ref: Optional[int] = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    priority: Optional[int]
    icon_ref: Optional[int]
    created_at: datetime

    class Config:
        from_attributes = True


@router.get("", response_model=List[TaskResponse])
async def list_tasks(repository: TaskRepository = Depends(get_task_repository)):
    """List all tasks."""
    return await repository.get_all_tasks()


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    task_data: TaskCreate,
    repository: TaskRepository = Depends(get_task_repository),
):
    """Create a new task."""
    task = await repository.add_new_task(
        title=task_data.title,
        description=task_data.description,
        priority=task_data.priority,
        icon_ref=task_data.icon_ref,
    )
    metrics.record_task_operation("create")
    return task


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: int,
    repository: TaskRepository = Depends(get_task_repository),
):
    """Delete a task."""
    if not await repository.remove_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    metrics.record_task_operation("delete")
    return Response(status_code=204)
