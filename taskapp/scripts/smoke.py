"""Add a task and print every task in the configured namespace.

    python -m taskapp.scripts.smoke --description "test"
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from taskapp.config import load_config
from taskapp.errors import StoreWriteError, TaskAppError
from taskapp.infra.supabase.repositories import open_task_repository
from taskapp.interfaces.task_repository import ITaskRepository
from taskapp.main import configure_logging

logger = logging.getLogger(__name__)


async def run(repository: ITaskRepository, description: str) -> None:
    task = await repository.add(description)
    if not task.is_persisted:
        raise StoreWriteError("Task was not persisted", task=task)
    print(f"Added {task.id} in namespace {repository.namespace}")
    for task in await repository.list():
        status = "x" if task.done else " "
        print(f"[{status}] {task.id} {task.created.isoformat()} {task.description}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--description", type=str, default="test")
    args = ap.parse_args(argv)

    try:
        config = load_config()
        configure_logging(config.log_level)
        with open_task_repository(config) as repository:
            asyncio.run(run(repository, args.description))
    except TaskAppError as exc:
        logger.error(f"Smoke check failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
