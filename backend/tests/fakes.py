from models import Task, User
from services.todoApi import TodoApiError


class FakeTodoApi:
    """
    In-memory stand-in for TodoApi.

    Records every call in `calls` and raises TodoApiError for any operation
    named in `fail_on`.
    """

    def __init__(self):
        self.users = {}
        self.calls = []
        self.fail_on = set()
        self._next_id = 1

    def _record(self, op, *args):
        self.calls.append((op,) + args)
        if op in self.fail_on:
            raise TodoApiError(f"{op} failed")

    def ops(self):
        return [c[0] for c in self.calls]

    def seed(self, username, *labels):
        todos = self.users.setdefault(username, [])
        for label in labels:
            todos.append(Task(id=self._next_id, label=label))
            self._next_id += 1
        return todos

    def initialize_user(self, username):
        self._record("initialize_user", username)
        if username in self.users:
            return False
        self.users[username] = []
        return True

    def get_user(self, username):
        self._record("get_user", username)
        if username not in self.users:
            raise TodoApiError("User not found", status_code=404)
        return User(name=username, todos=list(self.users[username]))

    def add_task(self, username, label):
        self._record("add_task", username, label)
        task = Task(id=self._next_id, label=label)
        self._next_id += 1
        self.users.setdefault(username, []).append(task)
        return task

    def delete_task(self, task_id):
        self._record("delete_task", task_id)
        for todos in self.users.values():
            for t in todos:
                if t.id == task_id:
                    todos.remove(t)
                    return
        raise TodoApiError("Todo not found", status_code=404)

    def clear_all_tasks(self, tasks):
        self._record("clear_all_tasks", [t.id for t in tasks])
        for t in list(tasks):
            self.delete_task(t.id)
