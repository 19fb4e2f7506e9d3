"""SQLAlchemy ORM models — single source of truth for the database schema.

Learn: Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Each class = one table.

Cascade note: Board.replies is configured with ORM-level cascade
("all, delete-orphan"). ORM cascade only runs when a Board passes through
the session lifecycle (session.delete). A bulk DELETE statement skips it,
and the foreign key carries no ON DELETE rule, so the database does not
cascade either.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# Primary keys are 32-bit INTEGER columns. Larger values cannot exist and
# would overflow the driver's parameter binding.
MAX_ID = 2**31 - 1


def id_in_range(value: int) -> bool:
    return 0 < value <= MAX_ID


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered user. Authors boards and replies."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )


class Board(Base):
    """A blog post.

    Learn: user_id is set once at creation. There is no operation that
    reassigns it; updates touch title and content only.
    """

    __tablename__ = "boards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    # Relationships
    user: Mapped["User"] = relationship()
    replies: Mapped[list["Reply"]] = relationship(
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="Reply.id",
    )


class Reply(Base):
    """A comment on a board. Dependent of Board for cascade purposes."""

    __tablename__ = "replies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comment: Mapped[str] = mapped_column(String(500), nullable=False)
    board_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("boards.id"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    # Relationships
    board: Mapped["Board"] = relationship(back_populates="replies")
    user: Mapped["User"] = relationship()
