"""Per-username task state kept in sync with the remote service by re-fetching after every change."""
import logging
from typing import List

from models import Task
from services.todoApi import TodoApiError

logger = logging.getLogger(__name__)

INIT_ERROR = "Failed to initialize user. Please try again."
LOAD_ERROR = "Failed to load tasks. Please try again."
ADD_ERROR = "Failed to add task. Please try again."
DELETE_ERROR = "Failed to delete task. Please try again."
CLEAR_ERROR = "Failed to clear all tasks. Please try again."


class TaskStore:
    def __init__(self, api, username: str):
        self.api = api
        self.username = username
        self.tasks: List[Task] = []
        self.total_created = 0
        self.loading = False
        self.error = ""

    @property
    def current_count(self) -> int:
        return len(self.tasks)

    @property
    def has_tasks(self) -> bool:
        return bool(self.tasks)

    def initialize_user(self) -> None:
        self.loading = True
        self.error = ""
        try:
            self.api.initialize_user(self.username)
            self.load_tasks()
        except TodoApiError:
            self.error = INIT_ERROR
            logger.exception("Error initializing user %s", self.username)
        finally:
            self.loading = False

    def load_tasks(self) -> bool:
        """Replace the task list with the server's. On failure the previous list is kept."""
        self.error = ""
        try:
            user = self.api.get_user(self.username)
        except TodoApiError:
            self.error = LOAD_ERROR
            logger.exception("Error loading tasks for %s", self.username)
            return False
        self.tasks = list(user.todos)
        self.total_created = len(self.tasks)
        return True

    def add_task(self, label) -> bool:
        label = (label or "").strip()
        if not label:
            return False
        self.loading = True
        self.error = ""
        try:
            self.api.add_task(self.username, label)
            self.load_tasks()
            return True
        except TodoApiError:
            self.error = ADD_ERROR
            logger.exception("Error adding task for %s", self.username)
            return False
        finally:
            self.loading = False

    def delete_task(self, task_id: int) -> bool:
        self.loading = True
        self.error = ""
        try:
            self.api.delete_task(task_id)
            self.load_tasks()
            return True
        except TodoApiError:
            self.error = DELETE_ERROR
            logger.exception("Error deleting task %s", task_id)
            return False
        finally:
            self.loading = False

    def clear_all_tasks(self) -> bool:
        if not self.tasks:
            return False
        self.loading = True
        self.error = ""
        try:
            self.api.clear_all_tasks(self.tasks)
            self.load_tasks()
            return True
        except TodoApiError:
            self.error = CLEAR_ERROR
            logger.exception("Error clearing all tasks for %s", self.username)
            return False
        finally:
            self.loading = False

    def to_dict(self):
        return {
            "username": self.username,
            "tasks": [t.to_dict() for t in self.tasks],
            "total_created": self.total_created,
            "current_count": self.current_count,
            "has_tasks": self.has_tasks,
            "loading": self.loading,
            "error": self.error,
        }
