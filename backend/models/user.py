from dataclasses import dataclass, field
from typing import List

from models.task import Task


@dataclass
class User:
    """Remote user (username only; no auth) together with its todos."""
    name: str
    todos: List[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data, username: str = ""):
        if not isinstance(data, dict):
            raise ValueError(f"Not a user payload: {data!r}")
        raw_todos = data.get("todos") or []
        if not isinstance(raw_todos, list):
            raise ValueError("todos must be an array")
        return cls(
            name=str(data.get("name") or username),
            todos=[Task.from_dict(t) for t in raw_todos],
        )

    def to_dict(self):
        return {"name": self.name, "todos": [t.to_dict() for t in self.todos]}
