"""Application errors and their HTTP mapping.

Learn: routes and repositories raise these instead of HTTPException so
the repository layer stays free of HTTP concerns. A single exception
handler (registered in main.py) turns them into JSON responses.
Database errors are deliberately not part of this hierarchy; they
propagate to the framework untouched.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class BlogboardError(Exception):
    """Base class for errors that map to a client-facing status code."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationRequired(BlogboardError):
    status_code = 401
    default_message = "Login required"


class Forbidden(BlogboardError):
    status_code = 403
    default_message = "Permission denied"


class NotFound(BlogboardError):
    status_code = 404
    default_message = "Resource not found"


class Conflict(BlogboardError):
    status_code = 409
    default_message = "Resource already exists"


async def blogboard_error_handler(request: Request, exc: BlogboardError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationRequired):
        headers = {"WWW-Authenticate": "Session"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )
