"""User repository — lookups and registration."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogboard.db.models import User, id_in_range

logger = structlog.get_logger()


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: int) -> User | None:
        if not id_in_range(user_id):
            return None
        return await self.db.get(User, user_id)

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalars().first()

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        await self.db.commit()
        logger.info("user.saved", user_id=user.id, username=user.username)
        return user
