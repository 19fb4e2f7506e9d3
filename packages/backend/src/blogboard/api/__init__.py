"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: the login gate is applied at the include_router level using
FastAPI's dependencies parameter. Every route in a protected router is
gated without touching individual handlers; an anonymous request is
rejected with 401 before the handler runs. Health, join/login/logout
and public board reads stay open.
"""

from fastapi import APIRouter, Depends

from blogboard.api.auth import router as auth_router
from blogboard.api.boards import protected_router as boards_write_router
from blogboard.api.boards import router as boards_read_router
from blogboard.api.health import router as health_router
from blogboard.api.replies import router as replies_router
from blogboard.auth.dependencies import require_login

# All protected routers require a logged-in session
_auth = [Depends(require_login)]

api_router = APIRouter(prefix="/api/v1")

# Open routes — no login required
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(boards_read_router, tags=["boards"])

# Protected routes — require a session user
api_router.include_router(boards_write_router, tags=["boards"], dependencies=_auth)
api_router.include_router(replies_router, tags=["replies"], dependencies=_auth)
