# API module exports
from taskapp.api import health, tasks
from taskapp.api.base import api_router

__all__ = ["health", "tasks", "api_router"]
