import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from taskapp.deps import get_task_repository
from taskapp.errors import NotFoundError, StoreError, ValidationError
from taskapp.interfaces.task_repository import ITaskRepository
from taskapp.models.task import Task

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


class CreateTaskRequest(BaseModel):
    description: Optional[str] = None


class TaskResponse(BaseModel):
    task: Task


class MessageResponse(BaseModel):
    msg: str


def _require_id(task_id: str) -> str:
    task_id = task_id.strip()
    if not task_id:
        raise HTTPException(status_code=400, detail="task id is required")
    return task_id


@router.get("/", response_model=List[Task])
async def list_tasks(repository: ITaskRepository = Depends(get_task_repository)):
    """List every task in the namespace, oldest first"""
    try:
        return await repository.list()
    except StoreError as e:
        logger.error(f"Failed to list tasks: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/", response_model=TaskResponse)
async def create_task(
    request: Optional[CreateTaskRequest] = None,
    repository: ITaskRepository = Depends(get_task_repository),
):
    """Create a new task"""
    description = request.description if request else None
    if not description or not description.strip():
        raise HTTPException(status_code=400, detail="description is required")

    try:
        task = await repository.add(description)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        logger.error(f"Failed to create task '{description}': {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {"task": task}


async def _set_done(repository: ITaskRepository, task_id: str, done: bool) -> None:
    task_id = _require_id(task_id)
    try:
        if done:
            await repository.mark_done(task_id)
        else:
            await repository.mark_undone(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        logger.error(f"Failed to update task {task_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{task_id}/done", response_model=MessageResponse)
async def mark_task_done(task_id: str, repository: ITaskRepository = Depends(get_task_repository)):
    """Mark a task as done"""
    await _set_done(repository, task_id, True)
    return {"msg": "done"}


@router.patch("/{task_id}/undone", response_model=MessageResponse)
async def mark_task_undone(task_id: str, repository: ITaskRepository = Depends(get_task_repository)):
    """Mark a task as not done"""
    await _set_done(repository, task_id, False)
    return {"msg": "undone"}


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: str, repository: ITaskRepository = Depends(get_task_repository)):
    """Delete a task. Unknown ids are reported as deleted."""
    task_id = _require_id(task_id)
    try:
        await repository.delete(task_id)
    except StoreError as e:
        logger.error(f"Failed to delete task {task_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {"msg": "deleted"}
