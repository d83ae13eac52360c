from models.task import Task
from models.user import User

__all__ = ["Task", "User"]
