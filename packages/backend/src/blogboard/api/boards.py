"""Board API routes.

Learn: FastAPI routers define HTTP endpoints. Each route function
receives its repository via Depends() and handles HTTP concerns
(status codes, ownership); the repository handles persistence.

Reads are public (`router`). Writes live on `protected_router`, which
api/__init__.py mounts behind the login gate.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blogboard.auth.dependencies import get_current_user
from blogboard.auth.session import SessionUser
from blogboard.db.engine import get_db
from blogboard.db.models import Board
from blogboard.errors import AuthenticationRequired, Forbidden, NotFound
from blogboard.repositories.board_repository import BoardRepository
from blogboard.repositories.reply_repository import ReplyRepository
from blogboard.repositories.user_repository import UserRepository
from blogboard.schemas.board import (
    BoardCreate,
    BoardDetail,
    BoardRead,
    BoardUpdate,
    ReplyRead,
)

router = APIRouter()
protected_router = APIRouter()


def _repo(db: AsyncSession = Depends(get_db)) -> BoardRepository:
    return BoardRepository(db)


async def _owned_board(
    board_id: int, user: SessionUser, repo: BoardRepository
) -> Board:
    board = await repo.find_by_id(board_id)
    if board is None:
        raise NotFound("Board not found")
    if board.user_id != user.id:
        raise Forbidden("You can only modify your own boards")
    return board


# ─── Public reads ───────────────────────────────────────

@router.get("/boards", response_model=list[BoardRead])
async def list_boards(repo: BoardRepository = Depends(_repo)):
    return await repo.find_all()


@router.get("/boards/{board_id}", response_model=BoardDetail)
async def get_board(board_id: int, repo: BoardRepository = Depends(_repo)):
    board = await repo.find_detail(board_id)
    if board is None:
        raise NotFound("Board not found")
    return board


@router.get("/boards/{board_id}/replies", response_model=list[ReplyRead])
async def list_replies(board_id: int, db: AsyncSession = Depends(get_db)):
    if await BoardRepository(db).find_by_id(board_id) is None:
        raise NotFound("Board not found")
    return await ReplyRepository(db).find_by_board_id(board_id)


# ─── Writes (login required) ────────────────────────────

@protected_router.post("/boards", response_model=BoardRead, status_code=201)
async def create_board(
    body: BoardCreate,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a board authored by the session user."""
    author = await UserRepository(db).find_by_id(user.id)
    if author is None:
        # Session outlived its account
        raise AuthenticationRequired("Session user no longer exists")

    board = Board(title=body.title, content=body.content, user=author)
    return await BoardRepository(db).save(board)


@protected_router.put("/boards/{board_id}", response_model=BoardRead)
async def update_board(
    board_id: int,
    body: BoardUpdate,
    user: SessionUser = Depends(get_current_user),
    repo: BoardRepository = Depends(_repo),
):
    await _owned_board(board_id, user, repo)
    return await repo.update_by_id(board_id, body)


@protected_router.delete("/boards/{board_id}", status_code=204)
async def delete_board(
    board_id: int,
    cascade: bool = Query(
        True,
        description="true: delete through the session, replies go too. "
        "false: bulk DELETE statement, replies are not touched.",
    ),
    user: SessionUser = Depends(get_current_user),
    repo: BoardRepository = Depends(_repo),
):
    await _owned_board(board_id, user, repo)
    if cascade:
        await repo.delete_by_id_safely(board_id)
    else:
        await repo.delete_by_id(board_id)
