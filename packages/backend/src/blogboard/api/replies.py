"""Reply API routes. Mounted behind the login gate."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogboard.auth.dependencies import get_current_user
from blogboard.auth.session import SessionUser
from blogboard.db.engine import get_db
from blogboard.db.models import Reply
from blogboard.errors import AuthenticationRequired, Forbidden, NotFound
from blogboard.repositories.board_repository import BoardRepository
from blogboard.repositories.reply_repository import ReplyRepository
from blogboard.repositories.user_repository import UserRepository
from blogboard.schemas.board import ReplyCreate, ReplyRead

router = APIRouter()


@router.post("/boards/{board_id}/replies", response_model=ReplyRead, status_code=201)
async def create_reply(
    board_id: int,
    body: ReplyCreate,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    board = await BoardRepository(db).find_by_id(board_id)
    if board is None:
        raise NotFound("Board not found")

    author = await UserRepository(db).find_by_id(user.id)
    if author is None:
        raise AuthenticationRequired("Session user no longer exists")

    reply = Reply(comment=body.comment, board=board, user=author)
    return await ReplyRepository(db).save(reply)


@router.delete("/replies/{reply_id}", status_code=204)
async def delete_reply(
    reply_id: int,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    repo = ReplyRepository(db)
    reply = await repo.find_by_id(reply_id)
    if reply is None:
        raise NotFound("Reply not found")
    if reply.user_id != user.id:
        raise Forbidden("You can only delete your own replies")
    await repo.delete_by_id(reply_id)
