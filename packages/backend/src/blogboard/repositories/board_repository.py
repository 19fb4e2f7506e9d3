"""Board repository — CRUD for blog posts against the ORM session.

Learn: the repository is the only code that talks to the database for
boards. Reads return ORM objects (or None); mutations commit before
returning, so each call is one all-or-nothing unit of work. If anything
raises before the commit, the request session is closed without
committing and the database is untouched.

Two delete paths exist on purpose and are NOT interchangeable:

- delete_by_id issues a bulk DELETE statement. It never loads the board,
  so ORM cascades configured on Board.replies do not run. Replies are
  left behind (or, on a database enforcing the foreign key, the statement
  fails with an integrity error).
- delete_by_id_safely loads the board into the session and deletes it
  through the session, so the "all, delete-orphan" cascade removes its
  replies in the same transaction. Use this one for any board that may
  have replies.
"""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blogboard.db.models import Board, Reply, id_in_range
from blogboard.errors import NotFound
from blogboard.schemas.board import BoardUpdate

logger = structlog.get_logger()


class BoardRepository:
    """Persistence access for Board entities."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────

    async def find_by_id(self, board_id: int) -> Board | None:
        """Primary-key lookup. Absence is not an error here."""
        logger.info("board.find_by_id", board_id=board_id)
        if not id_in_range(board_id):
            return None
        return await self.db.get(
            Board, board_id, options=[selectinload(Board.user)]
        )

    async def find_detail(self, board_id: int) -> Board | None:
        """Like find_by_id, with replies and their authors loaded too."""
        logger.info("board.find_detail", board_id=board_id)
        if not id_in_range(board_id):
            return None
        result = await self.db.execute(
            select(Board)
            .where(Board.id == board_id)
            .options(
                selectinload(Board.user),
                selectinload(Board.replies).selectinload(Reply.user),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def find_all(self) -> list[Board]:
        """Every board, newest (highest id) first."""
        logger.info("board.find_all")
        result = await self.db.execute(
            select(Board).options(selectinload(Board.user)).order_by(Board.id.desc())
        )
        return list(result.scalars().all())

    # ─── Writes ─────────────────────────────────────────

    async def save(self, board: Board) -> Board:
        """Insert a new board. The author must already be attached.

        Returns the same instance, now carrying its generated id.
        """
        if board.user is None and board.user_id is None:
            raise ValueError("board has no author")
        logger.info(
            "board.save",
            title=board.title,
            author=board.user.username if board.user is not None else board.user_id,
        )
        self.db.add(board)
        await self.db.flush()
        await self.db.commit()
        logger.info("board.saved", board_id=board.id)
        return board

    async def update_by_id(self, board_id: int, body: BoardUpdate) -> Board:
        """Load, change title/content, then save explicitly.

        Raises NotFound when the board does not exist.
        """
        logger.info("board.update", board_id=board_id)
        board = await self.find_by_id(board_id)
        if board is None:
            raise NotFound("Board not found")

        board.title = body.title
        board.content = body.content
        self.db.add(board)
        await self.db.flush()
        await self.db.commit()
        return board

    async def delete_by_id(self, board_id: int) -> None:
        """Bulk DELETE by id. Skips ORM cascades; see module docstring."""
        logger.info("board.delete_bulk", board_id=board_id)
        if not id_in_range(board_id):
            raise NotFound("No board to delete")
        result = await self.db.execute(delete(Board).where(Board.id == board_id))
        if result.rowcount == 0:
            raise NotFound("No board to delete")
        await self.db.commit()
        logger.info("board.deleted", board_id=board_id, rows=result.rowcount)

    async def delete_by_id_safely(self, board_id: int) -> None:
        """Load then delete through the session; cascades to replies."""
        logger.info("board.delete_safely", board_id=board_id)
        if not id_in_range(board_id):
            raise NotFound("No board to delete")
        # The cascade only deletes what is in the loaded collection,
        # so refresh it even when the board is already in the session.
        board = await self.db.get(
            Board,
            board_id,
            options=[selectinload(Board.replies)],
            populate_existing=True,
        )
        if board is None:
            raise NotFound("No board to delete")

        await self.db.delete(board)
        await self.db.commit()
        logger.info("board.deleted", board_id=board_id, cascade=True)
