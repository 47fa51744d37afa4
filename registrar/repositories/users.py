"""User repository for database operations"""

from typing import Sequence

from sqlalchemy import select

from registrar.repositories.base import BaseRepository
from registrar.models.user import User
from registrar.schemas.users import UserInDB


class UserRepository(BaseRepository[User, UserInDB]):
    """Repository for User model operations"""
    _model = User

    async def get_active(self) -> Sequence[User]:
        """Users that have not been soft-deleted, oldest first"""
        query = select(self._model).where(self._model.deleted_at.is_(None)).order_by(self._model.id)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return result.scalars().all()
