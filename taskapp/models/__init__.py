"""Domain models for the application"""
from .task import Task, TaskCreate

__all__ = ['Task', 'TaskCreate']
