"""Auth API — join, login, logout, current user.

Learn: login does not hand out a token. It stores a SessionUser in the
server-side session (a signed cookie via SessionMiddleware); the browser
sends the cookie back and the login gate reads it.
- POST /auth/join → create a user account
- POST /auth/login → username/password → session marked as logged in
- POST /auth/logout → session cleared
- GET /auth/me → the session user (login required)
"""

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blogboard.auth.dependencies import get_current_user
from blogboard.auth.password import hash_password, verify_password
from blogboard.auth.session import (
    SessionUser,
    clear_session,
    store_session_user,
)
from blogboard.db.engine import get_db
from blogboard.db.models import User
from blogboard.errors import AuthenticationRequired, Conflict
from blogboard.repositories.user_repository import UserRepository
from blogboard.schemas.user import JoinRequest, LoginRequest, UserRead

logger = structlog.get_logger()

router = APIRouter(prefix="/auth")


def _repo(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


@router.post("/join", response_model=UserRead, status_code=201)
async def join(body: JoinRequest, repo: UserRepository = Depends(_repo)):
    """Create a new user account."""
    if await repo.find_by_username(body.username):
        raise Conflict("Username already taken")

    user = User(
        username=body.username,
        password_hash=hash_password(body.password),
        email=body.email,
    )
    return await repo.save(user)


@router.post("/login", response_model=SessionUser)
async def login(
    body: LoginRequest,
    request: Request,
    repo: UserRepository = Depends(_repo),
):
    """Check credentials and mark the session as logged in."""
    user = await repo.find_by_username(body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("auth.login_failed", username=body.username)
        raise AuthenticationRequired("Invalid username or password")

    session_user = store_session_user(request, user)
    logger.info("auth.login", user_id=user.id)
    return session_user


@router.post("/logout", status_code=204)
async def logout(request: Request):
    clear_session(request)


@router.get("/me", response_model=SessionUser)
async def get_me(user: SessionUser = Depends(get_current_user)):
    """Get the current session user."""
    return user
