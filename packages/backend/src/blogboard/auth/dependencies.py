"""The login gate and its FastAPI dependencies.

Learn: check_authenticated is the gate itself — it observes the session,
never writes to it, and raises AuthenticationRequired when nobody is
logged in. require_login wraps it as a dependency; api/__init__.py
attaches it at include_router level so the handler of a protected
route never runs for an anonymous request.
"""

import structlog
from fastapi import Request

from blogboard.auth.session import SessionUser, get_session_user
from blogboard.errors import AuthenticationRequired

logger = structlog.get_logger()


def check_authenticated(request: Request) -> SessionUser:
    """Allow the request through if a user is logged in, else raise."""
    logger.debug("auth_gate.check", url=str(request.url))
    user = get_session_user(request)
    if user is None:
        logger.info("auth_gate.rejected", path=request.url.path)
        raise AuthenticationRequired("Please log in first")
    return user


async def require_login(request: Request) -> None:
    """Router-level dependency: gate only, no return value."""
    check_authenticated(request)


async def get_current_user(request: Request) -> SessionUser:
    """Handler-level dependency: gate and hand the user to the handler."""
    return check_authenticated(request)
