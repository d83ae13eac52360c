import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")

    # Remote to-do service (users + todos). All task data lives there.
    TODO_API_BASE_URL = os.getenv("TODO_API_BASE_URL", "https://playground.4geeks.com/todo")
    TODO_API_TIMEOUT = float(os.getenv("TODO_API_TIMEOUT", "15"))
    # Upper bound on parallel DELETE requests issued by "clear all"
    CLEAR_ALL_MAX_WORKERS = int(os.getenv("CLEAR_ALL_MAX_WORKERS", "8"))

    SESSION_USERNAME_KEY = "todoUsername"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
