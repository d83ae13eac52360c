"""Remote to-do service client: users and their todos over REST, via requests."""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, Optional
from urllib.parse import quote

import requests

from models import Task, User

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://playground.4geeks.com/todo"


class TodoApiError(Exception):
    """Remote call failed (network, non-2xx status or unusable payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TodoApi:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15,
        max_workers: int = 8,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_workers = max(1, int(max_workers))
        self.session_factory = session_factory
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """Session of the calling thread; Flask request threads and clear-all workers never share one."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self.session_factory()
            self._local.session = session
        return session

    def url(self, *parts) -> str:
        return "/".join([self.base_url] + [quote(str(p), safe="") for p in parts])

    def _request(self, method: str, *parts, **kwargs) -> requests.Response:
        url = self.url(*parts)
        logger.debug("%s %s", method, url)
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TodoApiError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _check(r: requests.Response) -> None:
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            raise TodoApiError(str(e), status_code=r.status_code) from e

    @staticmethod
    def _json(r: requests.Response):
        try:
            return r.json()
        except ValueError as e:
            raise TodoApiError(f"Invalid JSON from {r.url}: {e}", status_code=r.status_code) from e

    def initialize_user(self, username: str) -> bool:
        """Make sure the user exists remotely. Returns True when it had to be created."""
        r = self._request("GET", "users", username)
        if r.status_code == 404:
            created = self._request(
                "POST", "users", username, headers={"Content-Type": "application/json"}
            )
            self._check(created)
            logger.info("Created remote user %s", username)
            return True
        self._check(r)
        return False

    def get_user(self, username: str) -> User:
        r = self._request("GET", "users", username)
        self._check(r)
        try:
            return User.from_dict(self._json(r), username=username)
        except (TypeError, ValueError) as e:
            raise TodoApiError(f"Unexpected user payload for {username}: {e}") from e

    def add_task(self, username: str, label: str) -> Task:
        r = self._request(
            "POST",
            "todos",
            username,
            json={"label": label, "is_done": False},
        )
        self._check(r)
        try:
            return Task.from_dict(self._json(r))
        except (TypeError, ValueError) as e:
            raise TodoApiError(f"Unexpected task payload: {e}") from e

    def delete_task(self, task_id: int) -> None:
        r = self._request("DELETE", "todos", task_id)
        self._check(r)

    def clear_all_tasks(self, tasks: Iterable[Task]) -> None:
        """Delete every task in parallel; waits for all, then re-raises the first failure."""
        tasks = list(tasks)
        if not tasks:
            return
        workers = min(self.max_workers, len(tasks))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.delete_task, t.id) for t in tasks]
            wait(futures)
        for f in futures:
            f.result()
