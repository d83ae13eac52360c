"""Username kept in the signed session cookie; the only client-side state."""
from typing import Optional

from flask import current_app, session


def normalize_username(raw) -> str:
    if not isinstance(raw, str):
        return ""
    return raw.strip()


def _key() -> str:
    return current_app.config["SESSION_USERNAME_KEY"]


def current_username() -> Optional[str]:
    return session.get(_key()) or None


def remember_username(raw) -> Optional[str]:
    """Persist a trimmed, non-empty username. Returns None (and stores nothing) otherwise."""
    username = normalize_username(raw)
    if not username:
        return None
    session[_key()] = username
    return username


def forget_username() -> None:
    session.pop(_key(), None)
