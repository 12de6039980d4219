from .task_repository import ITaskRepository

__all__ = ['ITaskRepository']
