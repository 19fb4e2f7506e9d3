"""Reply repository.

Replies are only ever deleted through the session (load, then delete),
so deleting a reply goes through the same managed lifecycle as
BoardRepository.delete_by_id_safely.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blogboard.db.models import Reply, id_in_range
from blogboard.errors import NotFound

logger = structlog.get_logger()


class ReplyRepository:
    """Persistence access for Reply entities."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, reply_id: int) -> Reply | None:
        if not id_in_range(reply_id):
            return None
        return await self.db.get(Reply, reply_id, options=[selectinload(Reply.user)])

    async def find_by_board_id(self, board_id: int) -> list[Reply]:
        """Replies of one board, oldest first."""
        if not id_in_range(board_id):
            return []
        result = await self.db.execute(
            select(Reply)
            .where(Reply.board_id == board_id)
            .options(selectinload(Reply.user))
            .order_by(Reply.id)
        )
        return list(result.scalars().all())

    async def save(self, reply: Reply) -> Reply:
        self.db.add(reply)
        await self.db.flush()
        await self.db.commit()
        logger.info("reply.saved", reply_id=reply.id, board_id=reply.board_id)
        return reply

    async def delete_by_id(self, reply_id: int) -> None:
        if not id_in_range(reply_id):
            raise NotFound("No reply to delete")
        reply = await self.db.get(Reply, reply_id)
        if reply is None:
            raise NotFound("No reply to delete")
        await self.db.delete(reply)
        await self.db.commit()
        logger.info("reply.deleted", reply_id=reply_id)
