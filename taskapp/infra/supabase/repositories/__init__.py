"""Repository exports"""
from .base import BaseRepository
from .tasks import (
    TASKS_TABLE,
    SupabaseTaskRepository,
    open_task_repository,
    task_collection_path,
    validate_store_config,
)

__all__ = [
    'BaseRepository',
    'SupabaseTaskRepository',
    'TASKS_TABLE',
    'open_task_repository',
    'task_collection_path',
    'validate_store_config',
]
