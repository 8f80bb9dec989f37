import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from flask import current_app

from tasks_api.models.task_model import Task

logger = logging.getLogger(__name__)

SEED_TASKS = [
    ("Learn Next.js API routes", "Build REST endpoints with best practices"),
    ("Add Swagger documentation", "Make API explorable via /docs"),
]


class TaskStore:
    """In-memory task collection, kept in insertion order.

    Every operation holds one store-wide lock, so overlapping requests from a
    threaded server see each call run to completion. Records handed out are
    copies; state only changes through the methods below.
    """

    def __init__(self, seed: bool = True):
        self._tasks: Dict[str, Task] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        if seed:
            for title, description in SEED_TASKS:
                self.create(title, description)

    def list(self) -> List[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks.values()]

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task else None

    def create(self, title: str, description: str) -> Task:
        """Append a new task. Callers validate the fields."""
        with self._lock:
            task = Task(id=str(next(self._ids)), title=title, description=description)
            self._tasks[task.id] = task
            logger.debug("Created task id=%s", task.id)
            return replace(task)

    def update(
        self,
        task_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[Task]:
        """Overwrite the supplied fields; returns None when the id is unknown."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            if title is not None:
                task.title = title
            if description is not None:
                task.description = description
            logger.debug("Updated task id=%s", task_id)
            return replace(task)

    def delete(self, task_id: str) -> bool:
        with self._lock:
            if task_id not in self._tasks:
                return False
            del self._tasks[task_id]
            logger.debug("Deleted task id=%s", task_id)
            return True

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)


def init_app(app, store: Optional[TaskStore] = None) -> TaskStore:
    """Attach a store to the app; one store lives for the app's lifetime."""
    if store is None:
        store = TaskStore(seed=app.config.get("SEED_TASKS", True))
    app.extensions["task_store"] = store
    return store


def get_store() -> TaskStore:
    return current_app.extensions["task_store"]
