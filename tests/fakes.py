"""Test doubles for the Supabase client and the task repository"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from taskapp.errors import NotFoundError, ValidationError
from taskapp.interfaces.task_repository import ITaskRepository
from taskapp.models.task import Task


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data


class FakeQuery:
    """Chainable stand-in for a PostgREST request builder"""

    def __init__(self, client: "FakeSupabaseClient", table: str, action: str, payload: Any = None, columns: str = "*"):
        self._client = client
        self._table = table
        self._action = action
        self._payload = payload
        self._columns = columns
        self._filters: List[tuple[str, Any]] = []
        self._order: Optional[tuple[str, bool]] = None

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self._columns == "*":
            return dict(row)
        names = [name.strip() for name in self._columns.split(",")]
        return {name: row[name] for name in names}

    def execute(self) -> FakeResponse:
        self._client.calls.append((self._action, self._table, list(self._filters)))
        if self._client.fail_with is not None:
            raise self._client.fail_with

        rows = self._client.tables.setdefault(self._table, [])

        if self._action == "insert":
            if self._client.drop_inserts:
                return FakeResponse([])
            row = {"id": str(uuid.uuid4()), **self._payload}
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self._action == "select":
            if self._order is not None:
                column, desc = self._order
                matched = sorted(matched, key=lambda row: row[column], reverse=desc)
            return FakeResponse([self._project(row) for row in matched])

        if self._action == "update":
            for row in matched:
                row.update(self._payload)
            return FakeResponse([dict(row) for row in matched])

        if self._action == "delete":
            self._client.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse([dict(row) for row in matched])

        raise AssertionError(f"unexpected action {self._action}")


class FakeTable:
    def __init__(self, client: "FakeSupabaseClient", name: str):
        self._client = client
        self._name = name

    def select(self, columns: str = "*") -> FakeQuery:
        return FakeQuery(self._client, self._name, "select", columns=columns)

    def insert(self, payload: Dict[str, Any]) -> FakeQuery:
        return FakeQuery(self._client, self._name, "insert", payload=payload)

    def update(self, payload: Dict[str, Any]) -> FakeQuery:
        return FakeQuery(self._client, self._name, "update", payload=payload)

    def delete(self) -> FakeQuery:
        return FakeQuery(self._client, self._name, "delete")


class FakeSession:
    def __init__(self):
        self.close_count = 0

    @property
    def is_closed(self) -> bool:
        return self.close_count > 0

    def close(self) -> None:
        self.close_count += 1


class FakePostgrest:
    def __init__(self):
        self.session = FakeSession()


class FakeAuth:
    def __init__(self):
        self._http_client = FakeSession()


class FakeSupabaseClient:
    """In-memory Supabase client supporting the calls the repository makes"""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.fail_with: Optional[BaseException] = None
        self.drop_inserts = False
        self._postgrest = FakePostgrest()
        self.auth = FakeAuth()

    def table(self, name: str) -> FakeTable:
        return FakeTable(self, name)

    def writes(self) -> List[tuple]:
        return [call for call in self.calls if call[0] != "select"]


class InMemoryTaskRepository(ITaskRepository):
    """Task repository keeping tasks in a dict"""

    def __init__(self, namespace: str = "test"):
        self._namespace = namespace
        self._tasks: Dict[str, Task] = {}
        self.closed = False
        self.close_count = 0

    @property
    def namespace(self) -> str:
        return self._namespace

    async def list(self) -> List[Task]:
        return sorted(self._tasks.values(), key=lambda t: t.created)

    async def add(self, description: str) -> Task:
        if not description or not description.strip():
            raise ValidationError("description must not be empty")
        task = Task(
            id=uuid.uuid4().hex,
            description=description,
            created=datetime.now(timezone.utc),
        )
        self._tasks[task.id] = task
        return task

    async def mark_done(self, task_id: str) -> None:
        self._set_done(task_id, True)

    async def mark_undone(self, task_id: str) -> None:
        self._set_done(task_id, False)

    def _set_done(self, task_id: str, done: bool) -> None:
        if task_id not in self._tasks:
            raise NotFoundError(f"Task not found: {task_id}")
        self._tasks[task_id] = self._tasks[task_id].model_copy(update={"done": done})

    async def delete(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)

    def close(self) -> None:
        self.closed = True
        self.close_count += 1
