"""Health check endpoint"""

from fastapi import APIRouter, Depends

from taskapp.deps import get_task_repository
from taskapp.interfaces.task_repository import ITaskRepository

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check(repository: ITaskRepository = Depends(get_task_repository)):
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": "taskapp",
        "namespace": repository.namespace,
    }
