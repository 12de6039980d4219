"""Task repository

Tasks live in a single ``tasks`` table:

    id          uuid primary key default gen_random_uuid()
    collection  text not null
    description text not null
    created     timestamptz not null
    done        boolean not null default false

``collection`` is the namespace's task collection path, ``<namespace>/App/Tasks``.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError as PydanticValidationError
from supabase import Client  # type: ignore

from taskapp.config import AppConfig
from taskapp.errors import (
    ConfigurationError,
    NotFoundError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
)
from taskapp.infra.supabase.client import close_supabase_client, create_supabase_client
from taskapp.interfaces.task_repository import ITaskRepository
from taskapp.models.task import Task, TaskCreate

from .base import BaseRepository

logger = logging.getLogger(__name__)

TASKS_TABLE = "tasks"
TASK_COLUMNS = "id, description, created, done"

# Errors raised by the store client for a failed round trip
STORE_ERRORS = (APIError, httpx.HTTPError)

# Postgres "invalid text representation": the id can not name any row
INVALID_ID_CODE = "22P02"


def task_collection_path(namespace: str) -> str:
    return f"{namespace}/App/Tasks"


def validate_store_config(project_id: Optional[str], namespace: Optional[str]) -> None:
    """Check the values needed to open a task repository.

    Raises:
        ConfigurationError: project id or namespace is missing, or the
            namespace contains a path separator
    """
    if not project_id:
        raise ConfigurationError("You need to set the environment variable PROJECT_ID")
    if not namespace:
        raise ConfigurationError("You need to set the environment variable FS_NAMESPACE")
    if "/" in namespace:
        raise ConfigurationError("FS_NAMESPACE must not include a slash")


def _is_invalid_id(error: BaseException) -> bool:
    return isinstance(error, APIError) and getattr(error, "code", None) == INVALID_ID_CODE


class SupabaseTaskRepository(BaseRepository[Task], ITaskRepository):
    """Repository for the tasks of one namespace"""

    def __init__(self, client: Client, namespace: str):
        super().__init__(client, TASKS_TABLE, task_collection_path(namespace), Task)
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    async def list(self) -> List[Task]:
        """Return every task in the namespace ordered by creation time (oldest first)"""
        try:
            response = (
                self._scoped(self._table().select(TASK_COLUMNS))
                .order("created", desc=False)
                .execute()
            )
        except STORE_ERRORS as e:
            logger.error(f"Failed to list tasks in {self.collection}: {e}")
            raise StoreReadError(f"Failed to list tasks: {e}", cause=e) from e

        return self._to_models(response.data or [])

    async def add(self, description: str) -> Task:
        """Create a new task stamped with the current server time

        Raises:
            ValidationError: description is empty
            StoreWriteError: the insert failed; ``error.task`` holds the
                unpersisted task
        """
        try:
            data = TaskCreate(description=description)
        except PydanticValidationError as e:
            raise ValidationError("description must not be empty", cause=e) from e

        task = Task(description=data.description, created=datetime.now(timezone.utc))
        payload = self._document(task.model_dump(mode="json", exclude={"id"}))

        try:
            response = self._table().insert(payload).execute()
        except STORE_ERRORS as e:
            logger.error(f"Failed to add task to {self.collection}: {e}")
            raise StoreWriteError(f"Failed to add task: {e}", cause=e, task=task) from e

        created = self._to_model(response.data[0]) if response.data else None
        if created is None or not created.is_persisted:
            raise StoreWriteError("Failed to add task: store returned no document id", task=task)

        logger.info(f"Added task {created.id} to {self.collection}")
        return created

    async def mark_done(self, task_id: str) -> None:
        await self._set_done(task_id, True)

    async def mark_undone(self, task_id: str) -> None:
        await self._set_done(task_id, False)

    async def _set_done(self, task_id: str, done: bool) -> None:
        """Update only the ``done`` field of one task

        Raises:
            NotFoundError: no task with this id in the namespace
            StoreWriteError: the update failed
        """
        try:
            response = (
                self._scoped(self._table().update({"done": done}))
                .eq("id", task_id)
                .execute()
            )
        except STORE_ERRORS as e:
            if _is_invalid_id(e):
                raise NotFoundError(f"Task not found: {task_id}", cause=e) from e
            logger.error(f"Failed to update task {task_id} in {self.collection}: {e}")
            raise StoreWriteError(f"Failed to update task {task_id}: {e}", cause=e) from e

        if not response.data:
            raise NotFoundError(f"Task not found: {task_id}")

        logger.info(f"Set done={done} on task {task_id}")

    async def delete(self, task_id: str) -> None:
        """Delete a task.

        Deleting an id that does not exist in the namespace succeeds and
        changes nothing.
        """
        try:
            response = (
                self._scoped(self._table().delete())
                .eq("id", task_id)
                .execute()
            )
        except STORE_ERRORS as e:
            if _is_invalid_id(e):
                logger.info(f"Delete of unknown task {task_id} ignored")
                return
            logger.error(f"Failed to delete task {task_id} from {self.collection}: {e}")
            raise StoreWriteError(f"Failed to delete task {task_id}: {e}", cause=e) from e

        if response.data:
            logger.info(f"Deleted task {task_id} from {self.collection}")
        else:
            logger.info(f"Delete of unknown task {task_id} ignored")

    def close(self) -> None:
        """Release the Supabase client. Later calls are no-ops."""
        if self._client is None:
            return
        client, self._client = self._client, None
        close_supabase_client(client)
        logger.info(f"Closed task repository for namespace {self._namespace}")


def open_task_repository(
    config: AppConfig,
    client_factory: Callable[[str, str], Client] = create_supabase_client,
) -> SupabaseTaskRepository:
    """Validate the configuration and open a repository for its namespace.

    The returned repository owns its client; close it when done, e.g.
    ``with open_task_repository(config) as repo: ...``.

    Raises:
        ConfigurationError: the configuration is incomplete, or the store
            client could not be created
    """
    validate_store_config(config.project_id, config.namespace)
    if not config.service_key:
        raise ConfigurationError("You need to set the environment variable SUPABASE_SERVICE_ROLE_KEY")

    try:
        client = client_factory(config.project_id, config.service_key)
    except Exception as e:
        raise ConfigurationError(f"Could not create store client: {e}", cause=e) from e

    return SupabaseTaskRepository(client, config.namespace)
