"""Typed access to the authenticated user held in the session.

Learn: Starlette's request.session is a plain dict serialized into a
signed cookie. Reading it directly means loose dict lookups and casts
everywhere, so this module is the only place that does it. Callers get
a SessionUser or None, never a raw value.
"""

from typing import Optional

from pydantic import BaseModel, ValidationError
from starlette.requests import HTTPConnection

from blogboard.db.models import User

SESSION_USER_KEY = "sessionUser"


class SessionUser(BaseModel):
    """Snapshot of the logged-in user kept in the session cookie."""

    id: int
    username: str

    model_config = {"from_attributes": True, "frozen": True}


def get_session_user(conn: HTTPConnection) -> Optional[SessionUser]:
    """Return the authenticated user, or None when the session has none.

    A value that does not parse as a SessionUser (tampered or stale
    layout) counts as no login.
    """
    raw = conn.session.get(SESSION_USER_KEY)
    if raw is None:
        return None
    try:
        return SessionUser.model_validate(raw)
    except ValidationError:
        return None


def store_session_user(conn: HTTPConnection, user: User) -> SessionUser:
    """Mark the session as logged in as `user`."""
    session_user = SessionUser.model_validate(user)
    conn.session[SESSION_USER_KEY] = session_user.model_dump()
    return session_user


def clear_session(conn: HTTPConnection) -> None:
    """Log the session out by dropping everything stored in it."""
    conn.session.clear()
