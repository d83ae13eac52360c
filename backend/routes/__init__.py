from flask import current_app

from services.taskStore import TaskStore


def task_store_for(username: str) -> TaskStore:
    return TaskStore(current_app.extensions["todo_api"], username)
