"""Pydantic schemas for boards and replies.

Learn: Pydantic v2 models validate request/response data. Separate
"Create"/"Update" schemas (input) from "Read" schemas (output).
Read schemas are built from ORM objects (from_attributes), so the
relationships they expose must already be loaded.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ─── Authors ────────────────────────────────────────────

class AuthorRead(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


# ─── Replies ────────────────────────────────────────────

class ReplyCreate(BaseModel):
    comment: str = Field(..., min_length=1, max_length=500)


class ReplyRead(BaseModel):
    id: int
    board_id: int
    comment: str
    user: AuthorRead
    created_at: datetime

    model_config = {"from_attributes": True}


# ─── Boards ─────────────────────────────────────────────

class BoardCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)


class BoardUpdate(BaseModel):
    """Only title and content are mutable."""
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)


class BoardRead(BaseModel):
    id: int
    title: str
    content: str
    user: AuthorRead
    created_at: datetime

    model_config = {"from_attributes": True}


class BoardDetail(BoardRead):
    """Board with its replies, oldest first."""
    replies: list[ReplyRead] = []
