"""Base repository with generic CRUD operations"""

from contextlib import AbstractAsyncContextManager
from typing import Callable, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core.database.session import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class BaseRepository(Generic[ModelType, CreateSchemaType]):
    _model: Type[ModelType]

    def __init__(
        self, session_factory: Callable[..., AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory

    async def get_by(self, **kwargs) -> Optional[ModelType]:
        """Get an entity by field(s)"""
        query = select(self._model).filter_by(**kwargs)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return result.scalar_one_or_none()

    async def create(self, entity_in: CreateSchemaType) -> ModelType:
        entity = self._model(**entity_in.model_dump())

        async with self.session_factory() as session:
            session.add(entity)
            await session.commit()
            await session.refresh(entity)

            return entity

    async def find_or_create(self, entity_in: CreateSchemaType, **lookup) -> tuple[ModelType, bool]:
        """Return the entity matching *lookup*, inserting *entity_in* if there is none.

        The second element of the result tells whether a row was inserted. An
        existing row is returned as stored. A concurrent insert that wins the
        race on a unique index is read back instead of raising.
        """
        query = select(self._model).filter_by(**lookup)

        async with self.session_factory() as session:
            result = await session.execute(query)
            entity = result.scalar_one_or_none()
            if entity:
                return entity, False

            entity = self._model(**entity_in.model_dump())
            session.add(entity)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                result = await session.execute(query)
                existing = result.scalar_one_or_none()
                if existing is None:
                    raise
                return existing, False

            await session.refresh(entity)
            return entity, True
