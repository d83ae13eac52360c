from dataclasses import dataclass


@dataclass
class Task:
    """A to-do item as stored by the remote service. The id is server-assigned."""
    id: int
    label: str
    is_done: bool = False

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or data.get("id") is None:
            raise ValueError(f"Not a task payload: {data!r}")
        return cls(
            id=int(data["id"]),
            label=str(data.get("label") or ""),
            is_done=bool(data.get("is_done", False)),
        )

    def to_dict(self):
        return {"id": self.id, "label": self.label, "is_done": self.is_done}
