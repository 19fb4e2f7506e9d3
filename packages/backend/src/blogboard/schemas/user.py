"""Pydantic schemas for join/login."""

from datetime import datetime

from pydantic import BaseModel, Field


class JoinRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=20, pattern=r"^[A-Za-z0-9_]+$")
    password: str = Field(..., min_length=4, max_length=72)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class LoginRequest(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
