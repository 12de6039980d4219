"""FastAPI dependencies"""
from fastapi import HTTPException, Request

from taskapp.interfaces.task_repository import ITaskRepository


def get_task_repository(request: Request) -> ITaskRepository:
    """Return the repository opened for this process at startup."""
    repository = getattr(request.app.state, "task_repository", None)
    if repository is None:
        raise HTTPException(status_code=503, detail="Task repository is not available")
    return repository
